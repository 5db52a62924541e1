"""Range rules chained onto an accepted number string."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from ..errors import ErrorCode
from ..refs import Ref, resolve
from .coercion import coerce
from .policy import Rejected
from .scanner import NotANumber, scan

RangeKind = Literal["min", "max", "greater", "less"]

_COMPARISONS: dict[str, tuple[Callable[[float, float], bool], ErrorCode]] = {
    "min": (operator.ge, ErrorCode.BELOW_MIN),
    "max": (operator.le, ErrorCode.ABOVE_MAX),
    "greater": (operator.gt, ErrorCode.NOT_GREATER),
    "less": (operator.lt, ErrorCode.NOT_LESS),
}


def _limit_value(limit: Any, decimal_separator: str | None) -> float | None:
    """Turn a resolved limit into a float; sibling strings use our separator."""
    if isinstance(limit, bool):
        return None
    if isinstance(limit, (int, float)):
        return float(limit)
    if isinstance(limit, str):
        # Same grammar as the field itself: no "1_0", "inf" or foreign separator
        limit = limit.strip()
        scanned = scan(limit)
        if isinstance(scanned, NotANumber):
            return None
        if scanned.has_separator and scanned.separator != decimal_separator:
            return None
        return coerce(limit, decimal_separator)
    return None


@dataclass(frozen=True)
class RangeRule:
    """``min`` (>=), ``max`` (<=), ``greater`` (>) or ``less`` (<) than *limit*."""

    kind: RangeKind
    limit: float | Ref

    def check(
        self,
        value: str,
        decimal_separator: str | None,
        data: Mapping[str, Any] | None = None,
    ) -> Rejected | None:
        """Return a rejection, or ``None`` when *value* satisfies the rule."""
        compare, code = _COMPARISONS[self.kind]
        limit = _limit_value(resolve(self.limit, data), decimal_separator)
        if limit is None or math.isnan(limit):
            return Rejected(code, {"limit": None})
        if compare(coerce(value, decimal_separator), limit):
            return None
        return Rejected(code, {"limit": limit})
