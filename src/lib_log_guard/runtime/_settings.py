"""Runtime settings resolved from ``init`` arguments and the environment.

Purpose
-------
Collect every configuration knob in one immutable object so the composition
root receives validated values only. Environment variables win over
arguments, which lets operators retune a deployed service without touching
code.

Contents
--------
* :class:`RuntimeSettings` - frozen bundle consumed by :func:`build_runtime`.
* :func:`build_runtime_settings` - merges arguments with ``LOG_*`` variables.
* Helpers :func:`coerce_level`, :func:`_env_bool`, :func:`_parse_console_styles`
  and :func:`_merge_console_styles`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from lib_log_guard.application.ports import ConsolePort
from lib_log_guard.domain import LogLevel, Rule

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]
ConsoleFactory = Optional[Callable[["RuntimeSettings"], ConsolePort]]


@dataclass(frozen=True)
class RuntimeSettings:
    """Validated configuration for one runtime instance.

    Attributes
    ----------
    service / environment:
        Identifiers reported by :func:`inspect_runtime`.
    console_level:
        Minimum severity printed on the console.
    force_color / no_color:
        Rich colour switches; ``no_color`` wins when both are set.
    console_styles:
        Level-name to Rich style overrides.
    rules:
        Optional ordered rules replacing the default registry.
    diagnostic_hook:
        Callback receiving pipeline milestones.
    console_factory:
        Optional factory replacing :class:`RichConsoleAdapter`.
    """

    service: str
    environment: str
    console_level: LogLevel
    force_color: bool = False
    no_color: bool = False
    console_styles: Mapping[str, str] = field(default_factory=dict)
    rules: tuple[Rule, ...] | None = None
    diagnostic_hook: DiagnosticHook = None
    console_factory: ConsoleFactory = None


def build_runtime_settings(
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
) -> RuntimeSettings:
    """Merge ``init`` arguments with ``LOG_*`` environment overrides.

    Raises
    ------
    ValueError
        When the service or environment is blank, or a level name is unknown.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_CONSOLE_LEVEL', None)
    >>> _ = os.environ.pop('LOG_SERVICE', None)
    >>> _ = os.environ.pop('LOG_ENVIRONMENT', None)
    >>> settings = build_runtime_settings(service='svc', environment='dev', console_level='warning')
    >>> settings.console_level is LogLevel.WARNING
    True
    """

    resolved_service = os.getenv("LOG_SERVICE", service).strip()
    resolved_environment = os.getenv("LOG_ENVIRONMENT", environment).strip()
    if not resolved_service:
        raise ValueError("service must not be empty")
    if not resolved_environment:
        raise ValueError("environment must not be empty")

    level = coerce_level(os.getenv("LOG_CONSOLE_LEVEL") or console_level)
    env_styles = _parse_console_styles(os.getenv("LOG_CONSOLE_STYLES"))
    merged_styles = _merge_console_styles(console_styles, env_styles)
    for name in merged_styles:
        LogLevel.from_name(name)

    return RuntimeSettings(
        service=resolved_service,
        environment=resolved_environment,
        console_level=level,
        force_color=_env_bool("LOG_FORCE_COLOR", force_color),
        no_color=_env_bool("LOG_NO_COLOR", no_color),
        console_styles=merged_styles,
        rules=tuple(rules) if rules is not None else None,
        diagnostic_hook=diagnostic_hook,
        console_factory=console_factory,
    )


def coerce_level(level: str | int | LogLevel) -> LogLevel:
    """Normalise level inputs (name, stdlib integer or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    >>> coerce_level(40) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, int):
        return LogLevel.from_python_level(level)
    return LogLevel.from_name(level)


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = 'off'
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_console_styles(raw: str | None) -> dict[str, str]:
    """Convert ``LEVEL=style`` comma-separated strings into a dictionary.

    Examples
    --------
    >>> _parse_console_styles('INFO=green, ERROR = bold red')
    {'INFO': 'green', 'ERROR': 'bold red'}
    >>> _parse_console_styles(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        result[key] = value
    return result


def _merge_console_styles(
    explicit: Mapping[str, str] | None,
    env_styles: Mapping[str, str],
) -> dict[str, str]:
    """Combine code-supplied console styles with environment overrides.

    Examples
    --------
    >>> _merge_console_styles({'INFO': 'cyan'}, {'info': 'green', 'ERROR': 'red'})
    {'INFO': 'green', 'ERROR': 'red'}
    """
    merged: dict[str, str] = {}

    def _normalise_key(key: str | LogLevel) -> str:
        if isinstance(key, LogLevel):
            return key.name
        return key.strip().upper()

    for source in (explicit or {}, env_styles):
        for key, value in source.items():
            norm = _normalise_key(key)
            if norm:
                merged[norm] = value
    return merged


__all__ = [
    "ConsoleFactory",
    "DiagnosticHook",
    "RuntimeSettings",
    "build_runtime_settings",
    "coerce_level",
]
