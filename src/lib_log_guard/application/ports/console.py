"""Console port describing terminal emission contracts.

Purpose
-------
Define the abstraction for adapters that render sanitised log events to
interactive consoles, letting the application layer depend on a narrow
protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_guard.domain.events import LogEvent


@runtime_checkable
class ConsolePort(Protocol):
    """Render a log event to an interactive console."""

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        """Render ``event`` with optional colour control."""


__all__ = ["ConsolePort"]
