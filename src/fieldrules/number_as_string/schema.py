"""Chainable number-as-string schema that plugs into pydantic.

Usage::

    from typing import Annotated
    from pydantic import BaseModel
    from fieldrules import number_as_string

    class Reading(BaseModel):
        amount: Annotated[str, number_as_string().decimal(",", 2).min(0)]

Every builder call returns a new frozen schema, so a half-configured schema
can be shared and specialised without affecting other users of it.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

import structlog
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, validate_call
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..config import get_settings
from ..errors import ErrorCode, rule_error
from ..refs import Ref
from .policy import Accepted, DecimalCount, DecimalSeparator, Limit, NumberAsStringConfig, Rejected, evaluate
from .rules import RangeRule, RangeKind
from .scanner import scan

logger = structlog.get_logger(__name__)

# str.strip() leaves the byte order mark alone
_TRIM = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def convert_mode(info: core_schema.ValidationInfo) -> bool:
    """Whether whitespace may be trimmed for this validation call.

    A ``{"convert": ...}`` validation context wins, then a strict host
    config (which disables trimming), then ``Settings.convert``. Pydantic
    does not pass a per-call ``strict=True`` through to validators, so use
    ``context={"convert": False}`` for that.
    """
    context = info.context if isinstance(info.context, Mapping) else {}
    if "convert" in context:
        return bool(context["convert"])
    if info.config and info.config.get("strict"):
        return False
    return get_settings().convert


@dataclass(frozen=True)
class NumberAsString:
    """A string that must spell a number in the configured format."""

    config: NumberAsStringConfig = field(default_factory=NumberAsStringConfig)
    rules: tuple[RangeRule, ...] = ()

    # ── configuration ──────────────────────────────────────────────────────

    def _configure(self, **changes: Any) -> NumberAsString:
        values = {name: getattr(self.config, name) for name in NumberAsStringConfig.model_fields}
        values.update(changes)
        return replace(self, config=NumberAsStringConfig(**values))

    @validate_call
    def decimal(self, separator: DecimalSeparator, digits: DecimalCount | Ref):
        """Require exactly *digits* decimals after *separator*."""
        return self._configure(decimal_separator=separator, min_decimals=digits, max_decimals=digits)

    @validate_call
    def decimal_separator(self, separator: DecimalSeparator):
        return self._configure(decimal_separator=separator)

    @validate_call
    def min_decimals(self, digits: DecimalCount | Ref):
        return self._configure(min_decimals=digits)

    @validate_call
    def max_decimals(self, digits: DecimalCount | Ref):
        return self._configure(max_decimals=digits)

    # ── range rules ────────────────────────────────────────────────────────

    def _add_rule(self, kind: RangeKind, limit: float | Ref) -> NumberAsString:
        return replace(self, rules=(*self.rules, RangeRule(kind, limit)))

    @validate_call
    def min(self, limit: Limit | Ref):
        return self._add_rule("min", limit)

    @validate_call
    def max(self, limit: Limit | Ref):
        return self._add_rule("max", limit)

    @validate_call
    def greater(self, limit: Limit | Ref):
        return self._add_rule("greater", limit)

    @validate_call
    def less(self, limit: Limit | Ref):
        return self._add_rule("less", limit)

    # ── validation ─────────────────────────────────────────────────────────

    def check(
        self,
        value: Any,
        *,
        convert: bool | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> Accepted | Rejected:
        """Validate *value* without going through pydantic.

        *convert* defaults to ``Settings.convert``; *data* supplies sibling
        values for ``Ref`` limits and decimal counts.
        """
        if not isinstance(value, str):
            return self._rejected(Rejected(ErrorCode.NOT_A_STRING))

        if convert is None:
            convert = get_settings().convert
        if convert:
            value = _TRIM.sub("", value)

        outcome = evaluate(value, scan(value), self.config, data)
        if isinstance(outcome, Rejected):
            return self._rejected(outcome)

        for rule in self.rules:
            rejection = rule.check(outcome.value, self.config.decimal_separator, data)
            if rejection is not None:
                return self._rejected(rejection)
        return outcome

    def _rejected(self, rejection: Rejected) -> Rejected:
        if get_settings().log_rejections:
            logger.debug("number_as_string_rejected", code=str(rejection.code), **rejection.context)
        return rejection

    def _validate(self, value: Any, info: core_schema.ValidationInfo) -> str:
        # `data` only exists while validating model fields
        outcome = self.check(value, convert=convert_mode(info), data=getattr(info, "data", None))
        if isinstance(outcome, Rejected):
            raise rule_error(outcome.code, outcome.context)
        return outcome.value

    # ── pydantic hooks ─────────────────────────────────────────────────────

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        # Plain validator: the not-a-string check is ours, not the host's
        return core_schema.with_info_plain_validator_function(self._validate)

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "number-as-string"}


def number_as_string() -> NumberAsString:
    """Start a number-as-string schema: integers only, no range rules."""
    return NumberAsString()
