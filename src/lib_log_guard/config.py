"""Optional ``.env`` support for environment-driven configuration.

Purpose
-------
Let developers keep ``LOG_*`` settings in a ``.env`` file next to their
project. Loading is opt-in (CLI flag or ``LOG_USE_DOTENV``), happens at most
once per process, and never overrides variables already present in the
environment.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle variable consulted by the CLI.
* :func:`should_use_dotenv` - resolve flag/environment precedence.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_LOCK = Lock()
_ATTEMPTED = False
_LOADED_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins over the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file into :data:`os.environ`.

    Parameters
    ----------
    path:
        Explicit file to load; defaults to searching from the current working
        directory upwards.

    Returns
    -------
    Path | None
        Resolved path of the loaded file or ``None`` when no file was found.
        Subsequent calls return the result of the first call.
    """

    global _ATTEMPTED, _LOADED_PATH

    with _LOCK:
        if _ATTEMPTED:
            return _LOADED_PATH
        _ATTEMPTED = True
        candidate = str(path) if path is not None else find_dotenv(usecwd=True)
        if not candidate or not Path(candidate).is_file():
            logger.debug("no .env file found")
            return None
        resolved = Path(candidate).resolve()
        load_dotenv(resolved, override=False)
        _LOADED_PATH = resolved
        logger.debug("loaded environment from %s", resolved)
        return resolved


def _reset_dotenv_state_for_testing() -> None:
    """Forget previous :func:`enable_dotenv` calls."""

    global _ATTEMPTED, _LOADED_PATH

    with _LOCK:
        _ATTEMPTED = False
        _LOADED_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
