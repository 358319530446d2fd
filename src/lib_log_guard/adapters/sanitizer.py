"""Rule-driven field sanitiser: the single entry point for log call sites.

Purpose
-------
Wrap a :class:`RuleRegistry` behind a total API that turns any
``(key, value)`` pair into a string that is safe to persist in a log record.

Contents
--------
* :class:`FieldSanitizer` – concrete :class:`FieldSanitizerPort`.

System Role
-----------
Built once by the composition root (:func:`lib_log_guard.runtime.init` or the
host application) and handed by reference to every consumer. It holds no
mutable state, so concurrent calls need no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lib_log_guard.application.ports.sanitizer import FieldSanitizerPort
from lib_log_guard.domain.limits import MAX_STRING_LENGTH
from lib_log_guard.domain.rules import RuleRegistry, build_default_rules
from lib_log_guard.domain.transformers import UNLOGGABLE_VALUE, sanitize_text, stringify

logger = logging.getLogger(__name__)


class FieldSanitizer(FieldSanitizerPort):
    """Sanitise structured-log fields with an immutable rule registry.

    Why
    ---
    Logging must never fail because of the data it is asked to record. Every
    failure mode (wrong type, malformed value, oversized input, unexpected
    exception) collapses into a sentinel string instead of an error.

    Parameters
    ----------
    registry:
        Ordered rules; defaults to :func:`build_default_rules`.

    Examples
    --------
    >>> sanitizer = FieldSanitizer()
    >>> sanitizer.sanitize("password", "/valid/path")
    '****'
    >>> sanitizer.sanitize("user_id", "12345678-1234-1234-1234-123456789012")
    '1234...9012'
    >>> sanitizer.sanitize("path", "/a/../b")
    '[invalid path]'
    >>> sanitizer.sanitize("count", 42)
    '42'
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else RuleRegistry(build_default_rules())

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def sanitize(self, key: str, value: Any) -> str:
        """Return the log-safe representation of ``value`` stored under ``key``."""

        name = key if isinstance(key, str) else stringify(key)
        try:
            return self._registry.sanitize(name, value)
        except Exception:
            logger.debug("sanitisation rule failed for field %r", name, exc_info=True)
            return UNLOGGABLE_VALUE

    def sanitize_fields(self, fields: Mapping[Any, Any]) -> dict[str, str]:
        """Return a copy of ``fields`` with keys stringified and values sanitised."""

        sanitized: dict[str, str] = {}
        for key, value in fields.items():
            name = key if isinstance(key, str) else stringify(key)
            sanitized[name] = self.sanitize(name, value)
        return sanitized

    def sanitize_message(self, message: Any) -> str:
        """Return the single-line, bounded form of a free-text message."""

        try:
            return sanitize_text(stringify(message), MAX_STRING_LENGTH)
        except Exception:
            logger.debug("message sanitisation failed", exc_info=True)
            return UNLOGGABLE_VALUE


__all__ = ["FieldSanitizer"]
