"""Numeric coercion of accepted number strings."""

from __future__ import annotations


def coerce(value: str, decimal_separator: str | None = None) -> float:
    """Parse an accepted number string as a base-10 float.

    The configured separator is swapped for a decimal point first, so
    ``coerce("10,20", ",") == 10.2``. Only used for comparisons; the
    validated output is always the original string.
    """
    if decimal_separator and decimal_separator != ".":
        value = value.replace(decimal_separator, ".", 1)
    return float(value)
