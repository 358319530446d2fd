"""Port for turning arbitrary field values into log-safe strings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FieldSanitizerPort(Protocol):
    """Sanitise structured-log fields and messages before emission."""

    def sanitize(self, key: str, value: Any) -> str:
        """Return the log-safe representation of ``value`` stored under ``key``."""

    def sanitize_fields(self, fields: Mapping[Any, Any]) -> dict[str, str]:
        """Return a copy of ``fields`` with every value sanitised."""

    def sanitize_message(self, message: Any) -> str:
        """Return the single-line, bounded form of a free-text message."""


__all__ = ["FieldSanitizerPort"]
