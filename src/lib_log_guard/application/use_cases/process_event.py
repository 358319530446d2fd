"""Use case orchestrating the processing pipeline for a single log event.

Purpose
-------
Sanitise the message and fields of a log call, build the immutable
:class:`LogEvent`, apply the console threshold, and hand the event to the
console adapter.

Contents
--------
* :func:`create_process_log_event` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by :func:`lib_log_guard.init` to turn
the configured dependencies into a callable logging pipeline. Nothing reaches
an adapter before it went through :class:`FieldSanitizerPort`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from lib_log_guard.application.ports import ClockPort, ConsolePort, FieldSanitizerPort, IdProvider
from lib_log_guard.domain import LogEvent, LogLevel

logger = logging.getLogger(__name__)

DiagnosticCallback = Callable[[str, dict[str, Any]], None]
ProcessCallable = Callable[..., dict[str, Any]]


def create_process_log_event(
    *,
    sanitizer: FieldSanitizerPort,
    console: ConsolePort,
    console_level: LogLevel,
    clock: ClockPort,
    id_provider: IdProvider,
    colorize_console: bool = True,
    diagnostic: DiagnosticCallback | None = None,
) -> ProcessCallable:
    """Build the orchestrator capturing the current dependency wiring.

    Why
    ---
    The composition root decides which sanitiser and console to use; this
    factory freezes those decisions into a callable executed for every event.

    Parameters
    ----------
    sanitizer:
        Adapter implementing :class:`FieldSanitizerPort`.
    console:
        Console adapter implementing :class:`ConsolePort`.
    console_level:
        Minimum level required for console emission.
    clock:
        Provider of timezone-aware timestamps.
    id_provider:
        Callable returning unique event identifiers.
    colorize_console:
        When ``False`` the console adapter renders without colour.
    diagnostic:
        Optional callback invoked with pipeline milestones.

    Returns
    -------
    Callable[..., dict[str, Any]]
        Function accepting ``logger_name``, ``level``, ``message`` and
        optional ``fields``, returning a diagnostic dictionary.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_guard.adapters.sanitizer import FieldSanitizer
    >>> class DummyConsole(ConsolePort):
    ...     def __init__(self):
    ...         self.events = []
    ...     def emit(self, event: LogEvent, *, colorize: bool) -> None:
    ...         self.events.append(event)
    >>> class DummyClock(ClockPort):
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> class DummyId(IdProvider):
    ...     def __call__(self) -> str:
    ...         return 'event-1'
    >>> console = DummyConsole()
    >>> process = create_process_log_event(
    ...     sanitizer=FieldSanitizer(),
    ...     console=console,
    ...     console_level=LogLevel.INFO,
    ...     clock=DummyClock(),
    ...     id_provider=DummyId(),
    ... )
    >>> process(logger_name='svc', level=LogLevel.INFO, message='login', fields={'token': 'abc'})
    {'ok': True, 'event_id': 'event-1'}
    >>> console.events[0].fields
    {'token': '****'}
    >>> process(logger_name='svc', level=LogLevel.DEBUG, message='noise')
    {'ok': True, 'event_id': 'event-1', 'reason': 'below_threshold'}
    """

    toolkit = _PipelineToolkit(
        sanitizer=sanitizer,
        console=console,
        console_level=console_level,
        clock=clock,
        id_provider=id_provider,
        colorize_console=colorize_console,
        emit=_build_diagnostic_emitter(diagnostic),
    )
    return _ProcessPipeline(toolkit)


@dataclass(frozen=True)
class _PipelineToolkit:
    sanitizer: FieldSanitizerPort
    console: ConsolePort
    console_level: LogLevel
    clock: ClockPort
    id_provider: IdProvider
    colorize_console: bool
    emit: DiagnosticCallback


class _ProcessPipeline:
    def __init__(self, toolkit: _PipelineToolkit) -> None:
        self._toolkit = toolkit

    def __call__(
        self,
        *,
        logger_name: str,
        level: LogLevel,
        message: Any,
        fields: Mapping[Any, Any] | None = None,
    ) -> dict[str, Any]:
        event = _craft_event(self._toolkit, logger_name, level, message, fields)
        if level.value < self._toolkit.console_level.value:
            return {"ok": True, "event_id": event.event_id, "reason": "below_threshold"}
        return _emit_to_console(self._toolkit, event)


def _build_diagnostic_emitter(diagnostic: DiagnosticCallback | None) -> DiagnosticCallback:
    """Wrap ``diagnostic`` so a failing hook never breaks logging."""

    def emit(name: str, payload: dict[str, Any]) -> None:
        if diagnostic is None:
            return
        try:
            diagnostic(name, payload)
        except Exception:  # noqa: BLE001
            logger.debug("diagnostic hook failed for %s", name, exc_info=True)

    return emit


def _craft_event(
    toolkit: _PipelineToolkit,
    logger_name: str,
    level: LogLevel,
    message: Any,
    fields: Mapping[Any, Any] | None,
) -> LogEvent:
    return LogEvent(
        event_id=toolkit.id_provider(),
        timestamp=toolkit.clock.now(),
        logger_name=logger_name,
        level=level,
        message=toolkit.sanitizer.sanitize_message(message),
        fields=toolkit.sanitizer.sanitize_fields(fields or {}),
    )


def _emit_to_console(toolkit: _PipelineToolkit, event: LogEvent) -> dict[str, Any]:
    try:
        toolkit.console.emit(event, colorize=toolkit.colorize_console)
    except Exception as exc:  # noqa: BLE001
        toolkit.emit(
            "adapter_error",
            {"event_id": event.event_id, "adapter": type(toolkit.console).__name__, "error": str(exc)},
        )
        return {"ok": False, "event_id": event.event_id, "reason": "adapter_error"}
    toolkit.emit("emitted", {"event_id": event.event_id, "logger": event.logger_name, "level": event.level.name})
    return {"ok": True, "event_id": event.event_id}


__all__ = ["DiagnosticCallback", "ProcessCallable", "create_process_log_event"]
