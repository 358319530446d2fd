"""Public package surface of the log field sanitiser.

Hosts either use the sanitiser directly (:class:`FieldSanitizer`) or the
sanitising logger runtime (:func:`init` / :func:`get`). Both share the same
rules, so a field looks identical whichever path logs it.
"""

from __future__ import annotations

from .adapters import FieldSanitizer, RichConsoleAdapter, SanitizingFilter
from .domain import LogEvent, LogLevel, Rule, RuleRegistry, SanitizeOptions, build_default_rules, is_sensitive_key, sanitize_with_options
from .lib_log_guard import summary_info
from .runtime import (
    LoggerProxy,
    RuntimeSnapshot,
    get,
    init,
    inspect_runtime,
    is_initialised,
    sanitize,
    shutdown,
    stdlib_filter,
)

__all__ = [
    "FieldSanitizer",
    "LogEvent",
    "LogLevel",
    "LoggerProxy",
    "RichConsoleAdapter",
    "Rule",
    "RuleRegistry",
    "RuntimeSnapshot",
    "SanitizeOptions",
    "SanitizingFilter",
    "build_default_rules",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "is_sensitive_key",
    "sanitize",
    "sanitize_with_options",
    "shutdown",
    "stdlib_filter",
    "summary_info",
]
