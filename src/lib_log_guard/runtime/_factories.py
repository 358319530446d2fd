"""Factories and small adapters used by the composition root."""

from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Mapping
from uuid import uuid4

from lib_log_guard.adapters import FieldSanitizer, RichConsoleAdapter
from lib_log_guard.application.ports import ClockPort, ConsolePort, FieldSanitizerPort, IdProvider
from lib_log_guard.domain import LogLevel, RuleRegistry, build_default_rules

from ._settings import RuntimeSettings


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidProvider(IdProvider):
    """Generate random hexadecimal identifiers for log events."""

    def __call__(self) -> str:
        return uuid4().hex


class LoggerProxy:
    """Lightweight facade for structured logging calls.

    Every field handed to the proxy, whether bound up front or passed with a
    single call, goes through the runtime's sanitiser before it can reach an
    adapter. Proxies are immutable: the ``bind``/``with_*`` helpers return a
    new proxy and leave the original untouched.

    Examples
    --------
    >>> calls = []
    >>> proxy = LoggerProxy("svc", lambda **kw: calls.append(kw) or {"ok": True}, FieldSanitizer())
    >>> child = proxy.with_user_id("12345678-1234-1234-1234-123456789012")
    >>> child.fields["user_id"]
    '1234...9012'
    >>> proxy.fields
    mappingproxy({})
    >>> child.info("ready", token="abc")
    {'ok': True}
    >>> sorted(calls[0]["fields"])
    ['token', 'user_id']
    """

    def __init__(
        self,
        name: str,
        process: Callable[..., dict[str, Any]],
        sanitizer: FieldSanitizerPort,
        fields: Mapping[str, str] | None = None,
    ) -> None:
        self._name = name
        self._process = process
        self._sanitizer = sanitizer
        self._fields: dict[str, str] = dict(fields or {})

    @property
    def name(self) -> str:
        return self._name

    @property
    def fields(self) -> Mapping[str, str]:
        """Read-only view of the already sanitised bound fields."""
        return MappingProxyType(self._fields)

    def debug(self, message: Any, **fields: Any) -> dict[str, Any]:
        """Emit a ``DEBUG`` message; see :meth:`_log` for return semantics."""
        return self._log(LogLevel.DEBUG, message, fields)

    def info(self, message: Any, **fields: Any) -> dict[str, Any]:
        """Emit an ``INFO`` message; see :meth:`_log` for return semantics."""
        return self._log(LogLevel.INFO, message, fields)

    def warning(self, message: Any, **fields: Any) -> dict[str, Any]:
        """Emit a ``WARNING`` message; see :meth:`_log` for return semantics."""
        return self._log(LogLevel.WARNING, message, fields)

    def error(self, message: Any, **fields: Any) -> dict[str, Any]:
        """Emit an ``ERROR`` message; see :meth:`_log` for return semantics."""
        return self._log(LogLevel.ERROR, message, fields)

    def critical(self, message: Any, **fields: Any) -> dict[str, Any]:
        """Emit a ``CRITICAL`` message; see :meth:`_log` for return semantics."""
        return self._log(LogLevel.CRITICAL, message, fields)

    def bind(self, **fields: Any) -> "LoggerProxy":
        """Return a child proxy carrying ``fields`` on every subsequent event."""
        return self.with_fields(fields)

    def with_fields(self, fields: Mapping[Any, Any]) -> "LoggerProxy":
        """Like :meth:`bind` but accepts any mapping, including non-string keys."""
        merged = dict(self._fields)
        merged.update(self._sanitizer.sanitize_fields(fields))
        return LoggerProxy(self._name, self._process, self._sanitizer, merged)

    def with_component(self, component: Any) -> "LoggerProxy":
        return self.bind(component=component)

    def with_operation(self, operation: Any) -> "LoggerProxy":
        return self.bind(operation=operation)

    def with_request_id(self, request_id: Any) -> "LoggerProxy":
        return self.bind(request_id=request_id)

    def with_user_id(self, user_id: Any) -> "LoggerProxy":
        return self.bind(user_id=user_id)

    def with_error(self, error: BaseException | None) -> "LoggerProxy":
        """Attach ``error`` under the ``error`` key; ``None`` leaves the proxy unchanged."""
        if error is None:
            return self
        return self.bind(error=error)

    def sanitize_field(self, key: Any, value: Any) -> str:
        """Expose the runtime sanitiser for ad-hoc values."""
        return self._sanitizer.sanitize(key, value)

    def _log(self, level: LogLevel, message: Any, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Delegate to the process use case.

        Bound fields come first so per-call fields override them. Bound
        values are already sanitised and pass through the sanitiser unchanged.

        Returns
        -------
        dict[str, Any]
            Diagnostic payload from :func:`create_process_log_event`.
        """
        merged: dict[str, Any] = dict(self._fields)
        merged.update(fields)
        return self._process(logger_name=self._name, level=level, message=message, fields=merged)


def create_sanitizer(settings: RuntimeSettings) -> FieldSanitizerPort:
    """Return the sanitiser for ``settings``, honouring custom rules."""

    rules = settings.rules if settings.rules is not None else build_default_rules()
    return FieldSanitizer(RuleRegistry(rules))


def create_console(settings: RuntimeSettings) -> ConsolePort:
    """Return the configured console adapter."""

    if settings.console_factory is not None:
        return settings.console_factory(settings)
    return RichConsoleAdapter(
        force_color=settings.force_color,
        no_color=settings.no_color,
        styles=dict(settings.console_styles),
    )


__all__ = [
    "LoggerProxy",
    "SystemClock",
    "UuidProvider",
    "create_console",
    "create_sanitizer",
]
