"""Shared plumbing for single-pass field rules."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import ErrorCode, rule_error


class FieldRule:
    """A stateless predicate applied after the host's own type validation.

    Subclasses implement ``verdict``; used as ``Annotated`` metadata they
    chain onto whatever schema precedes them, so several rules can be stacked
    on one field and run in declaration order.
    """

    def verdict(self, value: Any, data: Mapping[str, Any] | None = None) -> ErrorCode | None:
        """Return the reason *value* is rejected, or ``None`` if it passes."""
        raise NotImplementedError

    def error_context(self) -> dict[str, Any]:
        return {}

    def _validate(self, value: Any, info: core_schema.ValidationInfo) -> Any:
        code = self.verdict(value, getattr(info, "data", None))
        if code is not None:
            raise rule_error(code, self.error_context())
        return value

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.with_info_after_validator_function(self._validate, handler(source_type))


@dataclass(frozen=True)
class PatternRule(FieldRule):
    """The whole string must match *pattern*."""

    pattern: str
    code: ErrorCode

    def verdict(self, value: Any, data: Mapping[str, Any] | None = None) -> ErrorCode | None:
        if isinstance(value, str) and re.fullmatch(self.pattern, value):
            return None
        return self.code
