"""Custom field rules for pydantic models.

Rules are ``typing.Annotated`` metadata::

    class Payment(BaseModel):
        amount: Annotated[str, number_as_string().decimal(",", 2).greater(0)]
        ledger: Annotated[str, ledger_number()]
"""

from .dates import date_string, datetime_string, end_date, time_string, time_without_seconds
from .enums import enum_value
from .errors import ErrorCode, FieldRulesError
from .number_as_string import Accepted, NumberAsString, Rejected, number_as_string
from .refs import Ref
from .strings import (
    elfproef,
    ledger_number,
    new_password_repeat,
    numeric,
    range_number_with_two_decimals,
    registration_code,
    simple_email,
    totp_token,
)

__all__ = [
    "Accepted",
    "ErrorCode",
    "FieldRulesError",
    "NumberAsString",
    "Ref",
    "Rejected",
    "date_string",
    "datetime_string",
    "elfproef",
    "end_date",
    "enum_value",
    "ledger_number",
    "new_password_repeat",
    "number_as_string",
    "numeric",
    "range_number_with_two_decimals",
    "registration_code",
    "simple_email",
    "time_string",
    "time_without_seconds",
    "totp_token",
]
