"""Enum membership rule for string-valued enumerations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .base import FieldRule
from .errors import ErrorCode, FieldRulesError


@dataclass(frozen=True)
class EnumValue(FieldRule):
    values: frozenset[str]

    def verdict(self, value: Any, data: Mapping[str, Any] | None = None) -> ErrorCode | None:
        if isinstance(value, str) and value in self.values:
            return None
        return ErrorCode.ENUM


def enum_value(choices: type[Enum] | Mapping[str, str]) -> EnumValue:
    """Accept only the string values of an ``Enum`` class or a name->value mapping.

    Raises ``FieldRulesError`` if any value is not a string.
    """
    if isinstance(choices, Mapping):
        values = list(choices.values())
    else:
        values = [member.value for member in choices]

    bad = [v for v in values if not isinstance(v, str)]
    if bad:
        raise FieldRulesError(f"Enum values must be strings, got {bad!r}")
    return EnumValue(frozenset(values))
