"""Fixed-format string rules: tokens, codes, checksums."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .base import FieldRule, PatternRule
from .errors import ErrorCode


def totp_token() -> PatternRule:
    return PatternRule(r"[0-9]{6}", ErrorCode.TOTP_TOKEN)


def registration_code() -> PatternRule:
    return PatternRule(r"[A-Z]{12}", ErrorCode.REGISTRATION_CODE)


def numeric() -> PatternRule:
    """Digits only; the empty string passes."""
    return PatternRule(r"[0-9]*", ErrorCode.NUMERIC)


def ledger_number() -> PatternRule:
    return PatternRule(r"[0-9]{4}", ErrorCode.LEDGER_NUMBER)


def simple_email() -> PatternRule:
    """Anything with an ``@`` that has text on both sides."""
    return PatternRule(r".+@.+", ErrorCode.SIMPLE_EMAIL)


def range_number_with_two_decimals() -> PatternRule:
    """Comma-decimal amount from 0,00 up to and including 9,00."""
    return PatternRule(r"[0-8],[0-9]{2}|9,00", ErrorCode.RANGE_NUMBER_WITH_TWO_DECIMALS)


def passes_elfproef(bsn: str) -> bool:
    """Dutch 11-proof over an 8 or 9 digit number.

    Digits are weighted n, n-1, ..., 2 from the left and the last digit -1;
    the weighted sum has to be divisible by 11.
    """
    if not (8 <= len(bsn) <= 9) or not (bsn.isascii() and bsn.isdigit()):
        return False

    total = 0
    for i, digit in enumerate(bsn):
        weight = -1 if i == len(bsn) - 1 else len(bsn) - i
        total += int(digit) * weight
    return total % 11 == 0


@dataclass(frozen=True)
class Elfproef(FieldRule):
    def verdict(self, value: Any, data: Mapping[str, Any] | None = None) -> ErrorCode | None:
        if isinstance(value, str) and passes_elfproef(value):
            return None
        return ErrorCode.ELFPROEF


def elfproef() -> Elfproef:
    return Elfproef()


@dataclass(frozen=True)
class NewPasswordRepeat(FieldRule):
    """Must equal the sibling password field."""

    field: str = "new_password"

    def verdict(self, value: Any, data: Mapping[str, Any] | None = None) -> ErrorCode | None:
        if data is not None and self.field in data and value == data[self.field]:
            return None
        return ErrorCode.NEW_PASSWORD_REPEAT


def new_password_repeat(field: str = "new_password") -> NewPasswordRepeat:
    return NewPasswordRepeat(field)
