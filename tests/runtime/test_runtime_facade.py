from __future__ import annotations

import logging
from typing import Any

import pytest
from rich.console import Console

from lib_log_guard import get, init, inspect_runtime, is_initialised, sanitize, shutdown, stdlib_filter
from lib_log_guard.adapters import RichConsoleAdapter
from lib_log_guard.domain import LogLevel, Rule, build_default_rules
from lib_log_guard.runtime._settings import RuntimeSettings

_LOG_VARIABLES = (
    "LOG_SERVICE",
    "LOG_ENVIRONMENT",
    "LOG_CONSOLE_LEVEL",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "LOG_CONSOLE_STYLES",
)


@pytest.fixture(autouse=True)
def cradle_runtime(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _LOG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    try:
        yield
    finally:
        shutdown()


def _recording_factory(console: Console):
    def factory(settings: RuntimeSettings) -> RichConsoleAdapter:
        return RichConsoleAdapter(console=console, styles=dict(settings.console_styles))

    return factory


def test_init_and_logging_flow(record_console: Console) -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(record_console))

    result = get("tests.runtime").info("hello", password="hunter2", user_id="12345678-1234-1234-1234-123456789012")

    assert result["ok"] is True
    output = record_console.export_text()
    assert "hello" in output
    assert "password=****" in output
    assert "user_id=1234...9012" in output
    assert "hunter2" not in output


def test_bound_fields_travel_with_every_event(record_console: Console) -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(record_console))
    logger = get("tests.bind").with_component("forms").with_operation("submit").with_request_id("req-7")

    logger.warning("slow")

    output = record_console.export_text()
    assert "component=forms" in output
    assert "operation=submit" in output
    assert "request_id=req-7" in output


def test_bind_returns_new_proxy() -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(Console(record=True)))
    base = get("tests.bind")
    child = base.bind(session_cookie="abc")
    assert dict(base.fields) == {}
    assert dict(child.fields) == {"session_cookie": "****"}


def test_with_error_uses_exception_message() -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(Console(record=True)))
    logger = get("tests.err")
    assert logger.with_error(RuntimeError("db\ntimeout")).fields["error"] == "db timeout"
    assert logger.with_error(None) is logger


def test_call_fields_override_bound_fields(record_console: Console) -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(record_console))
    get("tests.override").bind(stage="bound").info("x", stage="call")
    assert "stage=call" in record_console.export_text()


def test_console_level_filters_events(record_console: Console) -> None:
    init(
        service="svc",
        environment="test",
        console_level="error",
        console_factory=_recording_factory(record_console),
    )
    result = get("tests.level").info("hidden")
    assert result["reason"] == "below_threshold"
    assert "hidden" not in record_console.export_text()


def test_environment_overrides_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_SERVICE", "env-service")
    monkeypatch.setenv("LOG_CONSOLE_LEVEL", "warning")
    monkeypatch.setenv("LOG_CONSOLE_STYLES", "info=green")
    init(service="svc", environment="test", console_styles={"ERROR": "bold red"}, console_factory=_recording_factory(Console(record=True)))

    snapshot = inspect_runtime()

    assert snapshot.service == "env-service"
    assert snapshot.environment == "test"
    assert snapshot.console_level is LogLevel.WARNING
    assert dict(snapshot.console_styles or {}) == {"ERROR": "bold red", "INFO": "green"}
    assert snapshot.rule_names == ("path", "user_agent", "uuid", "error", "default")


def test_unknown_console_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        init(service="svc", environment="test", console_level="verbose")
    assert is_initialised() is False


def test_blank_service_is_rejected() -> None:
    with pytest.raises(ValueError, match="service"):
        init(service="  ", environment="test")


def test_init_twice_without_shutdown_raises() -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(Console(record=True)))
    with pytest.raises(RuntimeError, match="cannot be called twice"):
        init(service="svc", environment="test")


def test_get_before_init_raises() -> None:
    with pytest.raises(RuntimeError, match="must be called before"):
        get("too.early")


def test_shutdown_allows_reinitialisation() -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(Console(record=True)))
    shutdown()
    assert is_initialised() is False
    init(service="svc2", environment="test", console_factory=_recording_factory(Console(record=True)))
    assert inspect_runtime().service == "svc2"


def test_module_level_sanitize_uses_runtime_rules() -> None:
    upper = Rule("upper", lambda key: key == "shout", lambda _key, value: str(value).upper())
    init(
        service="svc",
        environment="test",
        rules=[upper, *build_default_rules()],
        console_factory=_recording_factory(Console(record=True)),
    )
    assert sanitize("shout", "hey") == "HEY"
    assert sanitize("api_key", "abc") == "****"
    assert inspect_runtime().rule_names[0] == "upper"


def test_diagnostic_hook_sees_adapter_errors() -> None:
    class _Broken:
        def emit(self, event: Any, *, colorize: bool) -> None:
            raise OSError("closed")

    seen: list[str] = []
    init(
        service="svc",
        environment="test",
        console_factory=lambda settings: _Broken(),
        diagnostic_hook=lambda name, payload: seen.append(name),
    )
    result = get("tests.broken").error("boom")
    assert result["reason"] == "adapter_error"
    assert seen == ["adapter_error"]


def test_stdlib_filter_shares_runtime_sanitizer(caplog: pytest.LogCaptureFixture) -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(Console(record=True)))
    logger = logging.getLogger("tests.runtime.stdlib")
    guard = stdlib_filter()
    logger.addFilter(guard)
    try:
        with caplog.at_level(logging.INFO, logger="tests.runtime.stdlib"):
            logger.info("auth", extra={"bearer": "xyz"})
    finally:
        logger.removeFilter(guard)
    assert caplog.records[0].bearer == "****"


def test_sanitize_field_on_proxy() -> None:
    init(service="svc", environment="test", console_factory=_recording_factory(Console(record=True)))
    assert get("tests.field").sanitize_field("path", "/a//b") == "[invalid path]"
