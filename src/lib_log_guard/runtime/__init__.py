"""Runtime façade that wires the sanitising logging backbone.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``sanitize``, ``shutdown``)
that host applications use instead of importing the inner layers directly.

Contents
--------
* ``init`` - composition root for assembling the logging pipeline.
* ``get`` - accessor for logger proxies.
* ``sanitize`` - direct access to the shared field sanitiser.
* ``inspect_runtime`` - read-only snapshot of the active configuration.
* ``shutdown`` - deterministic teardown.

System Role
-----------
Forms the outer shell: high-level policy depends only on abstractions, while
adapters stay hidden behind this interface so downstream services interact
with a minimal API.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from lib_log_guard.adapters import FieldSanitizer, RichConsoleAdapter, SanitizingFilter
from lib_log_guard.domain import LogLevel, Rule

from ._composition import LoggerProxy, build_runtime, coerce_level
from ._settings import ConsoleFactory, DiagnosticHook, build_runtime_settings
from ._state import clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    service: str
    environment: str
    console_level: LogLevel
    console_styles: Mapping[str, str] | None
    rule_names: tuple[str, ...]


def init(
    *,
    service: str,
    environment: str,
    console_level: str | int | LogLevel = LogLevel.INFO,
    force_color: bool = False,
    no_color: bool = False,
    console_styles: Mapping[str, str] | None = None,
    rules: Sequence[Rule] | None = None,
    diagnostic_hook: DiagnosticHook = None,
    console_factory: ConsoleFactory = None,
) -> None:
    """Compose the logging runtime according to configuration inputs.

    Why
    ---
    Hosts call ``init`` once during startup. The sanitiser built here is the
    single instance every logger proxy and the stdlib bridge share.

    Inputs
    ------
    service, environment:
        Identifiers of the host application.
    console_level:
        Minimum severity for console output; strings are coerced via
        :meth:`LogLevel.from_name`, :mod:`logging` integers via
        :meth:`LogLevel.from_python_level`.
    force_color / no_color / console_styles:
        Rich rendering options; ``LOG_*`` environment variables override them.
    rules:
        Optional ordered rules replacing the default registry. The last rule
        must match every key.
    diagnostic_hook:
        Callback receiving pipeline milestones such as ``adapter_error``.
    console_factory:
        Optional factory returning a custom :class:`ConsolePort`.

    Side Effects
    ------------
    Raises :class:`RuntimeError` if called while a runtime is already active
    and :class:`ValueError` for invalid configuration.

    Examples
    --------
    >>> import lib_log_guard as log  # doctest: +SKIP
    >>> log.init(service="svc", environment="dev")  # doctest: +SKIP
    >>> _ = log.get("docs").bind(request_id="r-1").info("ready")  # doctest: +SKIP
    >>> log.shutdown()  # doctest: +SKIP
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_guard.init() cannot be called twice without shutdown(); call lib_log_guard.shutdown() first",
        )

    settings = build_runtime_settings(
        service=service,
        environment=environment,
        console_level=console_level,
        force_color=force_color,
        no_color=no_color,
        console_styles=console_styles,
        rules=rules,
        diagnostic_hook=diagnostic_hook,
        console_factory=console_factory,
    )
    set_runtime(build_runtime(settings))


def get(name: str) -> LoggerProxy:
    """Return a logger proxy bound to the configured runtime.

    Raises :class:`RuntimeError` when ``init`` has not been called.
    """

    runtime = current_runtime()
    return LoggerProxy(name, runtime.process, runtime.sanitizer)


def sanitize(key: Any, value: Any) -> str:
    """Sanitise a single field with the runtime's sanitiser."""

    return current_runtime().sanitizer.sanitize(key, value)


def stdlib_filter() -> SanitizingFilter:
    """Return a :class:`logging.Filter` sharing the runtime's sanitiser."""

    return SanitizingFilter(current_runtime().sanitizer)


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    styles = runtime.console_styles or None
    readonly_styles: Mapping[str, str] | None
    if styles:
        readonly_styles = MappingProxyType(dict(styles))
    else:
        readonly_styles = None
    sanitizer = runtime.sanitizer
    rule_names = sanitizer.registry.names if isinstance(sanitizer, FieldSanitizer) else ()
    return RuntimeSnapshot(
        service=runtime.service,
        environment=runtime.environment,
        console_level=runtime.console_level,
        console_styles=readonly_styles,
        rule_names=tuple(rule_names),
    )


def shutdown() -> None:
    """Clear the runtime so ``init`` can be called again.

    Logger proxies obtained earlier keep working against the old pipeline;
    new calls to :func:`get` raise until the next ``init``.
    """

    clear_runtime()


__all__ = [
    "LoggerProxy",
    "RichConsoleAdapter",
    "RuntimeSnapshot",
    "SanitizingFilter",
    "coerce_level",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "sanitize",
    "shutdown",
    "stdlib_filter",
]
