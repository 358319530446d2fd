from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_guard import cli as cli_module
from lib_log_guard import config as log_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values without overriding call arguments."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_SERVICE=dotenv-service\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_SERVICE", raising=False)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOG_SERVICE"] == "dotenv-service"

    os.environ.pop("LOG_SERVICE", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_SERVICE=dotenv-service\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_SERVICE", "real-service")

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_SERVICE"] == "real-service"


def test_enable_dotenv_loads_only_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first.env"
    first.write_text("LOG_ENVIRONMENT=first\n")
    second = tmp_path / "second.env"
    second.write_text("LOG_ENVIRONMENT=second\n")
    monkeypatch.delenv("LOG_ENVIRONMENT", raising=False)

    assert log_config.enable_dotenv(first) == first.resolve()
    assert log_config.enable_dotenv(second) == first.resolve()
    assert os.environ["LOG_ENVIRONMENT"] == "first"

    os.environ.pop("LOG_ENVIRONMENT", None)


def test_enable_dotenv_without_file_returns_none(tmp_path: Path) -> None:
    assert log_config.enable_dotenv(tmp_path / "missing.env") is None


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (None, None, False),
        (None, "1", True),
        (None, "no", False),
        (True, None, True),
        (False, "on", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
