"""References to sibling fields, resolved at validation time."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ref:
    """Points at another field of the same object, by field name."""

    key: str

    def resolve(self, data: Mapping[str, Any] | None) -> Any:
        """Return the sibling value, or ``None`` when it is not available.

        Under pydantic, *data* is ``ValidationInfo.data``: only fields declared
        before the current one (and that validated successfully) are present.
        """
        if not data:
            return None
        return data.get(self.key)


def resolve(value: Any, data: Mapping[str, Any] | None) -> Any:
    """Resolve *value* if it is a ``Ref``; literals pass through."""
    if isinstance(value, Ref):
        return value.resolve(data)
    return value
