"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Render sanitised log events on a terminal with per-level styles.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAdapter` - adapter constructed by :func:`lib_log_guard.init`.

System Role
-----------
Primary human-facing sink; honours runtime overrides and environment variables
for colour control. Events reaching it are already sanitised.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.text import Text

from lib_log_guard.application.ports.console import ConsolePort
from lib_log_guard.domain.events import LogEvent
from lib_log_guard.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichConsoleAdapter(ConsolePort):
    """Render log events using Rich formatting with style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the console adapter with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color, stderr=True)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        """Print ``event`` using Rich with optional colour.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> event = LogEvent('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), 'svc', LogLevel.INFO, 'msg', {'user_id': '550e...0000'})
        >>> console = Console(file=StringIO(), record=True)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit(event, colorize=False)
        >>> 'user_id=550e...0000' in console.export_text()
        True
        """
        style = self._style_map.get(event.level, "") if colorize and not self._no_color else ""
        # Text() keeps sanitised values from being parsed as Rich markup.
        self._console.print(Text(self._format_line(event), style=style), highlight=False, soft_wrap=True)

    @staticmethod
    def _format_line(event: LogEvent) -> str:
        """Return a human-friendly console line for ``event``.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> event = LogEvent('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), 'svc', LogLevel.INFO, 'msg', {'b': '2', 'a': '1'})
        >>> RichConsoleAdapter._format_line(event).endswith('svc — msg a=1 b=2')
        True
        """
        fields = "" if not event.fields else " " + " ".join(f"{key}={value}" for key, value in sorted(event.fields.items()))
        return f"{event.timestamp.isoformat()} {event.level.icon} {event.level.severity.upper():>8} {event.logger_name} — {event.message}{fields}"


__all__ = ["RichConsoleAdapter"]
