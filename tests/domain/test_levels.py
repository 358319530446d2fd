from __future__ import annotations

import logging

import pytest

from lib_log_guard.domain.levels import LogLevel


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARNING),
        ("warn", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        (" CRITICAL ", LogLevel.CRITICAL),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize("number", [-5, 5, 15, 25, 35, 45, 55])
def test_from_python_level_rejects_non_standard_levels(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_python_level(number)


@pytest.mark.parametrize("level", LogLevel)
def test_from_python_level_matches_stdlib_constants(level: LogLevel) -> None:
    assert LogLevel.from_python_level(getattr(logging, level.name)) is level


@pytest.mark.parametrize(
    "level, icon",
    [
        (LogLevel.DEBUG, "🐞"),
        (LogLevel.INFO, "ℹ"),
        (LogLevel.WARNING, "⚠"),
        (LogLevel.ERROR, "✖"),
        (LogLevel.CRITICAL, "☠"),
    ],
)
def test_level_icon_table(level: LogLevel, icon: str) -> None:
    assert level.icon == icon


@pytest.mark.parametrize("level", LogLevel)
def test_severity_matches_lowercase_name(level: LogLevel) -> None:
    assert level.severity == level.name.lower()
