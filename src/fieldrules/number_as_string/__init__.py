"""Number-as-string validation: scanner, format policy, coercion, range rules."""

from .coercion import coerce
from .policy import Accepted, NumberAsStringConfig, Rejected, evaluate
from .rules import RangeRule
from .scanner import NotANumber, ScanResult, Sign, scan
from .schema import NumberAsString, number_as_string

__all__ = [
    "Accepted",
    "NotANumber",
    "NumberAsString",
    "NumberAsStringConfig",
    "RangeRule",
    "Rejected",
    "ScanResult",
    "Sign",
    "coerce",
    "evaluate",
    "number_as_string",
    "scan",
]
