"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into the live :class:`LoggingRuntime`
singleton. The sanitiser is built exactly once here and shared by reference
with the pipeline and every :class:`LoggerProxy`.

System Role
-----------
Anchors the clean-architecture boundary: outer adapters live here, while
``lib_log_guard.runtime`` exposes only the façade.
"""

from __future__ import annotations

from lib_log_guard.application.ports import ClockPort, IdProvider
from lib_log_guard.application.use_cases.process_event import create_process_log_event

from ._factories import LoggerProxy, SystemClock, UuidProvider, create_console, create_sanitizer
from ._settings import RuntimeSettings, coerce_level
from ._state import LoggingRuntime


def build_runtime(settings: RuntimeSettings) -> LoggingRuntime:
    """Assemble the logging runtime from resolved settings."""

    sanitizer = create_sanitizer(settings)
    console = create_console(settings)
    clock: ClockPort = SystemClock()
    id_provider: IdProvider = UuidProvider()

    process = create_process_log_event(
        sanitizer=sanitizer,
        console=console,
        console_level=settings.console_level,
        clock=clock,
        id_provider=id_provider,
        colorize_console=not settings.no_color,
        diagnostic=settings.diagnostic_hook,
    )

    return LoggingRuntime(
        process=process,
        sanitizer=sanitizer,
        console=console,
        service=settings.service,
        environment=settings.environment,
        console_level=settings.console_level,
        console_styles=settings.console_styles,
    )


__all__ = ["LoggerProxy", "build_runtime", "coerce_level"]
