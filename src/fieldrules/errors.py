"""Reason codes and message templates for every field rule."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic_core import PydanticCustomError


class FieldRulesError(Exception):
    """Programmer error while building a rule (not an input-validation failure)."""


class ErrorCode(StrEnum):
    # ── number as string ───────────────────────────────────────────────────
    NOT_A_STRING = "number_as_string.not_a_string"
    NOT_A_NUMBER = "number_as_string.not_a_number"
    LEADING_ZERO = "number_as_string.leading_zero"
    NEGATIVE_ZERO = "number_as_string.negative_zero"
    NO_DECIMALS = "number_as_string.no_decimals"
    DECIMAL_SEPARATOR = "number_as_string.decimal_separator"
    MAX_DECIMALS = "number_as_string.max_decimals"
    MIN_DECIMALS = "number_as_string.min_decimals"
    BELOW_MIN = "number_as_string.min"
    ABOVE_MAX = "number_as_string.max"
    NOT_GREATER = "number_as_string.greater"
    NOT_LESS = "number_as_string.less"

    # ── strings ────────────────────────────────────────────────────────────
    NEW_PASSWORD_REPEAT = "string.new_password_repeat"
    TOTP_TOKEN = "string.totp_token"
    REGISTRATION_CODE = "string.registration_code"
    ELFPROEF = "string.elfproef"
    NUMERIC = "string.numeric"
    LEDGER_NUMBER = "string.ledger_number"
    SIMPLE_EMAIL = "string.simple_email"
    RANGE_NUMBER_WITH_TWO_DECIMALS = "string.range_number_with_two_decimals"

    # ── dates, times and enums ─────────────────────────────────────────────
    TIME = "koi.time"
    TIME_WITHOUT_SECONDS = "koi.time_without_seconds"
    DATE = "koi.date"
    DATETIME = "koi.datetime"
    END_DATE = "koi.end_date"
    MISSING_START_DATE = "koi.missing_start_date"
    ENUM = "koi.enum"


MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_A_STRING: "needs to be a number as a string",
    ErrorCode.NOT_A_NUMBER: "needs to be a number",
    ErrorCode.LEADING_ZERO: "must not have a leading zero",
    ErrorCode.NEGATIVE_ZERO: "must not be negative zero",
    ErrorCode.NO_DECIMALS: "must not have decimals",
    ErrorCode.DECIMAL_SEPARATOR: "needs '{expected}' as decimal separator",
    ErrorCode.MAX_DECIMALS: "needs to have at most {limit} decimals",
    ErrorCode.MIN_DECIMALS: "needs to have at least {limit} decimals",
    ErrorCode.BELOW_MIN: "needs to be at least {limit}",
    ErrorCode.ABOVE_MAX: "needs to be at most {limit}",
    ErrorCode.NOT_GREATER: "needs to be greater than {limit}",
    ErrorCode.NOT_LESS: "needs to be less than {limit}",
    ErrorCode.NEW_PASSWORD_REPEAT: "needs to match the new password",
    ErrorCode.TOTP_TOKEN: "needs to be a string of six digits",
    ErrorCode.REGISTRATION_CODE: "needs to be a string of 12 upper case letters",
    ErrorCode.ELFPROEF: "needs to pass the elfproef",
    ErrorCode.NUMERIC: "needs to be a string consisting of only numbers",
    ErrorCode.LEDGER_NUMBER: "needs to be a string consisting of 4 digits",
    ErrorCode.SIMPLE_EMAIL: "needs to be a valid email address",
    ErrorCode.RANGE_NUMBER_WITH_TWO_DECIMALS: "needs to be a number between 0,00 and 9,00 with two decimals",
    ErrorCode.TIME: "needs to be a valid time string",
    ErrorCode.TIME_WITHOUT_SECONDS: "needs to be a valid time without seconds string",
    ErrorCode.DATE: "needs to be a valid date string",
    ErrorCode.DATETIME: "needs to be a valid datetime string",
    ErrorCode.END_DATE: "needs to be larger than or equal to start date",
    ErrorCode.MISSING_START_DATE: "a {start_field} field is missing",
    ErrorCode.ENUM: "needs to be an enum value",
}


def rule_error(code: ErrorCode, context: dict[str, Any] | None = None) -> PydanticCustomError:
    """Build the host error for *code*, rendered by pydantic from ``MESSAGES``."""
    return PydanticCustomError(str(code), MESSAGES[code], context or {})
