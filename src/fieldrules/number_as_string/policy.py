"""Format policy: decides whether a scanned number string is acceptable.

Several conditions can hold at once (``"-00,5"`` has a leading zero *and*
may use the wrong separator), so the checks run in a fixed order and the
first one that fires is the only reason reported:

1. not a number
2. decimals present but none allowed / wrong separator
3. leading zero
4. negative zero
5. too many decimals
6. too few decimals

Leading and negative zero are judged on the scanned tokens rather than on
the parsed float, which would collapse ``"-0"`` and ``"00"`` into ``0``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ErrorCode
from ..refs import Ref, resolve
from .coercion import coerce
from .scanner import NotANumber, ScanResult, Sign

DecimalSeparator = Literal[".", ","]
# Strict: booleans and fractional floats are not decimal counts
DecimalCount = Annotated[int, Field(strict=True, ge=0)]
Limit = Annotated[float, Field(strict=True)]


class NumberAsStringConfig(BaseModel):
    """Per-schema configuration, frozen once the schema is built.

    ``decimal_separator=None`` means no decimal part is allowed at all.
    ``min_decimals`` may exceed ``max_decimals``; such a schema simply
    rejects every number that has to pass both checks.
    """

    model_config = ConfigDict(frozen=True)

    decimal_separator: DecimalSeparator | None = None
    min_decimals: DecimalCount | Ref = 0
    max_decimals: DecimalCount | Ref = 0


@dataclass(frozen=True)
class Accepted:
    value: str


@dataclass(frozen=True)
class Rejected:
    code: ErrorCode
    context: dict[str, Any] = field(default_factory=dict)


def _decimal_count(value: Any) -> int | None:
    """Interpret a (possibly referenced) decimal count; ``None`` if unusable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int) and value >= 0:
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def evaluate(
    raw: str,
    scan: ScanResult | NotANumber,
    config: NumberAsStringConfig,
    data: Mapping[str, Any] | None = None,
) -> Accepted | Rejected:
    """Apply the configured format policy to one scanned string."""
    if isinstance(scan, NotANumber):
        return Rejected(ErrorCode.NOT_A_NUMBER)

    if scan.has_separator and scan.decimals == 0:
        return Rejected(ErrorCode.NOT_A_NUMBER)

    if scan.has_separator:
        if config.decimal_separator is None:
            return Rejected(ErrorCode.NO_DECIMALS, {"found": scan.separator})
        if scan.separator != config.decimal_separator:
            return Rejected(
                ErrorCode.DECIMAL_SEPARATOR,
                {"expected": config.decimal_separator, "found": scan.separator},
            )

    if scan.wrong_leading_zero:
        return Rejected(ErrorCode.LEADING_ZERO)

    if scan.sign is Sign.NEGATIVE and coerce(raw, config.decimal_separator) == 0:
        return Rejected(ErrorCode.NEGATIVE_ZERO)

    max_decimals = _decimal_count(resolve(config.max_decimals, data))
    if max_decimals is None or scan.decimals > max_decimals:
        return Rejected(ErrorCode.MAX_DECIMALS, {"limit": max_decimals, "actual": scan.decimals})

    min_decimals = _decimal_count(resolve(config.min_decimals, data))
    if min_decimals is None or scan.decimals < min_decimals:
        return Rejected(ErrorCode.MIN_DECIMALS, {"limit": min_decimals, "actual": scan.decimals})

    return Accepted(raw)
