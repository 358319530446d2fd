from __future__ import annotations

import logging

import pytest

from lib_log_guard.domain import LogLevel
from lib_log_guard.runtime._settings import (
    _env_bool,
    _merge_console_styles,
    _parse_console_styles,
    build_runtime_settings,
    coerce_level,
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_SERVICE", "LOG_ENVIRONMENT", "LOG_CONSOLE_LEVEL", "LOG_FORCE_COLOR", "LOG_NO_COLOR", "LOG_CONSOLE_STYLES"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("yes", True), ("On", True), ("0", False), ("off", False), ("nope", False)])
def test_env_bool_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("LOG_TEST_FLAG", raw)
    assert _env_bool("LOG_TEST_FLAG", default=not expected) is expected


def test_env_bool_blank_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_TEST_FLAG", "  ")
    assert _env_bool("LOG_TEST_FLAG", default=True) is True


def test_parse_console_styles_skips_malformed_chunks() -> None:
    assert _parse_console_styles("INFO=green,,broken,=red,ERROR=") == {"INFO": "green"}


def test_merge_console_styles_prefers_environment() -> None:
    assert _merge_console_styles({LogLevel.INFO: "cyan"}, {"info": "green"}) == {"INFO": "green"}  # type: ignore[dict-item]


def test_coerce_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        coerce_level("loud")


def test_coerce_level_accepts_stdlib_integers() -> None:
    assert coerce_level(logging.WARNING) is LogLevel.WARNING
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        coerce_level(25)


def test_stdlib_level_reaches_runtime_settings() -> None:
    settings = build_runtime_settings(service="svc", environment="env", console_level=logging.ERROR)
    assert settings.console_level is LogLevel.ERROR


def test_colour_flags_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FORCE_COLOR", "1")
    monkeypatch.setenv("LOG_NO_COLOR", "yes")
    settings = build_runtime_settings(service="svc", environment="env")
    assert settings.force_color is True
    assert settings.no_color is True


def test_unknown_style_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_CONSOLE_STYLES", "LOUD=red")
    with pytest.raises(ValueError, match="Unknown log level"):
        build_runtime_settings(service="svc", environment="env")


def test_rules_are_frozen_into_a_tuple() -> None:
    from lib_log_guard.domain import build_default_rules

    settings = build_runtime_settings(service="svc", environment="env", rules=list(build_default_rules()))
    assert isinstance(settings.rules, tuple)
