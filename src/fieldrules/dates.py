"""Strict date and time string rules.

Strings must match their layout exactly (zero padded, no ISO ``T`` or zone
suffix) and name a real calendar moment: ``2010-02-31`` is rejected.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .base import FieldRule
from .errors import ErrorCode

# (regex, strptime format) per layout
TIME_LAYOUT = (r"[0-9]{2}:[0-9]{2}:[0-9]{2}", "%H:%M:%S")
TIME_WITHOUT_SECONDS_LAYOUT = (r"[0-9]{2}:[0-9]{2}", "%H:%M")
DATE_LAYOUT = (r"[0-9]{4}-[0-9]{2}-[0-9]{2}", "%Y-%m-%d")
DATETIME_LAYOUT = (r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}", "%Y-%m-%d %H:%M:%S")


def matches_layout(value: Any, layout: tuple[str, str]) -> bool:
    """True if *value* is a string in exactly this layout and a valid moment."""
    pattern, fmt = layout
    if not isinstance(value, str) or not re.fullmatch(pattern, value):
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class LayoutRule(FieldRule):
    layout: tuple[str, str]
    code: ErrorCode

    def verdict(self, value: Any, data: Mapping[str, Any] | None = None) -> ErrorCode | None:
        return None if matches_layout(value, self.layout) else self.code


def time_string() -> LayoutRule:
    return LayoutRule(TIME_LAYOUT, ErrorCode.TIME)


def time_without_seconds() -> LayoutRule:
    return LayoutRule(TIME_WITHOUT_SECONDS_LAYOUT, ErrorCode.TIME_WITHOUT_SECONDS)


def date_string() -> LayoutRule:
    return LayoutRule(DATE_LAYOUT, ErrorCode.DATE)


def datetime_string() -> LayoutRule:
    return LayoutRule(DATETIME_LAYOUT, ErrorCode.DATETIME)


def _as_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class EndDate(FieldRule):
    """End of a period: not before the sibling start field.

    The start field has to be present among the already validated siblings.
    When either side is ``None`` the period is open and anything goes.
    """

    start_field: str = "start_date"

    def verdict(self, value: Any, data: Mapping[str, Any] | None = None) -> ErrorCode | None:
        if data is None or self.start_field not in data:
            return ErrorCode.MISSING_START_DATE

        start = data[self.start_field]
        if start is None or value is None:
            return None

        start_at, end_at = _as_datetime(start), _as_datetime(value)
        if start_at is None or end_at is None:
            return ErrorCode.END_DATE
        try:
            before_start = end_at < start_at
        except TypeError:
            # naive vs. timezone-aware
            return ErrorCode.END_DATE
        return ErrorCode.END_DATE if before_start else None

    def error_context(self) -> dict[str, Any]:
        return {"start_field": self.start_field}


def end_date(start_field: str = "start_date") -> EndDate:
    return EndDate(start_field)
