"""Severity levels for the console threshold and the Rich renderer.

The numeric values equal the :mod:`logging` constants, so hosts can pass
``logging.WARNING`` wherever a level is accepted.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Ordered severities; compare via ``.value``."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        return self.name.lower()

    @property
    def icon(self) -> str:
        """Glyph printed in front of the level column."""

        return _ICONS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve ``name`` case-insensitively; ``warn`` is an alias.

        Examples
        --------
        >>> LogLevel.from_name(" warn ")
        <LogLevel.WARNING: 30>
        """

        normalized = name.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Map a :mod:`logging` integer onto the enum.

        Examples
        --------
        >>> import logging
        >>> LogLevel.from_python_level(logging.ERROR)
        <LogLevel.ERROR: 40>
        """

        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_ICONS = {
    LogLevel.DEBUG: "\U0001f41e",
    LogLevel.INFO: "ℹ",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.CRITICAL: "☠",
}


__all__ = ["LogLevel"]
