"""Lexical scanner for numbers written as strings.

Walks the candidate left to right through a small state machine::

    SIGN --'-'--> INTEGER --sep--> FRACTION
      \\--digit--/   |digit           |digit

Anything that is not a digit, a leading minus or a recognized separator ends
the scan with ``NotANumber``. The scanner knows nothing about configuration;
deciding whether a separator or a decimal count is allowed is the policy
evaluator's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum

SEPARATORS = frozenset(".,")
DIGITS = frozenset("0123456789")


class Sign(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class _State(Enum):
    SIGN = "sign"
    INTEGER = "integer"
    FRACTION = "fraction"


class _CharClass(Enum):
    MINUS = "minus"
    DIGIT = "digit"
    SEPARATOR = "separator"
    OTHER = "other"


@dataclass(frozen=True)
class ScanResult:
    """Structured tokens of a syntactically valid number string."""

    sign: Sign
    integer_part: str
    separator: str | None = None
    fractional_part: str = ""

    @property
    def has_separator(self) -> bool:
        return self.separator is not None

    @property
    def decimals(self) -> int:
        return len(self.fractional_part)

    @property
    def wrong_leading_zero(self) -> bool:
        # "0" followed by another digit; "0", "0.5" and "-0" are fine here
        return len(self.integer_part) > 1 and self.integer_part[0] == "0"


@dataclass(frozen=True)
class NotANumber:
    """Scan failure: *char* at *position* cannot continue a number.

    *char* is ``None`` when the input ended too early (empty string, a bare
    sign, or a separator without fractional digits).
    """

    position: int
    char: str | None = None


def _classify(char: str) -> _CharClass:
    if char == "-":
        return _CharClass.MINUS
    if char in DIGITS:
        return _CharClass.DIGIT
    if char in SEPARATORS:
        return _CharClass.SEPARATOR
    return _CharClass.OTHER


def scan(raw: str) -> ScanResult | NotANumber:
    """Split *raw* into sign, integer digits, separator and fractional digits."""
    state = _State.SIGN
    sign = Sign.POSITIVE
    integer: list[str] = []
    fraction: list[str] = []
    separator: str | None = None

    for position, char in enumerate(raw):
        kind = _classify(char)

        if state is _State.SIGN:
            state = _State.INTEGER
            if kind is _CharClass.MINUS:
                sign = Sign.NEGATIVE
                continue

        if state is _State.INTEGER:
            if kind is _CharClass.DIGIT:
                integer.append(char)
            elif kind is _CharClass.SEPARATOR:
                separator = char
                state = _State.FRACTION
            else:
                return NotANumber(position, char)
        elif kind is _CharClass.DIGIT:
            fraction.append(char)
        else:
            return NotANumber(position, char)

    # Nothing after the sign, or a separator with no digits behind it
    if separator is None and not integer:
        return NotANumber(len(raw))
    if separator is not None and not fraction:
        return NotANumber(len(raw))

    return ScanResult(
        sign=sign,
        integer_part="".join(integer),
        separator=separator,
        fractional_part="".join(fraction),
    )
