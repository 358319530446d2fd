"""Value transformers that turn accepted field values into log-safe strings.

Purpose
-------
Provide the formatting half of the sanitisation rules: whitespace collapsing,
truncation, partial UUID masking, exception message extraction and generic
stringification. Every transformer is a pure function and a fixed point:
feeding its output back in yields the same string.

Contents
--------
* :func:`single_line` / :func:`truncate` / :func:`sanitize_text` – text shaping.
* :func:`mask_uuid` – 4/4 identifier masking with a length placeholder.
* :func:`error_message` – message extraction for exceptions.
* :func:`stringify` – textual representation for arbitrary values.
* Sentinel constants and :func:`is_sentinel`.

System Role
-----------
Called by the rules in :mod:`lib_log_guard.domain.rules` after the
sensitivity check and the validators have run.
"""

from __future__ import annotations

import re
from typing import Any

from .limits import (
    MAX_STRING_LENGTH,
    TRUNCATION_MARKER,
    UUID_MASK_PREFIX_LENGTH,
    UUID_MASK_SUFFIX_LENGTH,
    UUID_MIN_MASK_LENGTH,
)
from .sensitivity import MASK
from .validators import is_valid_uuid

INVALID_PATH = "[invalid path]"
INVALID_PATH_TYPE = "[invalid path type]"
INVALID_USER_AGENT = "[invalid user agent]"
INVALID_USER_AGENT_TYPE = "[invalid user agent type]"
INVALID_UUID_TYPE = "[invalid uuid type]"
NONE_VALUE = "[none]"
UNLOGGABLE_VALUE = "[unloggable value]"

_SENTINELS = frozenset(
    {
        MASK,
        INVALID_PATH,
        INVALID_PATH_TYPE,
        INVALID_USER_AGENT,
        INVALID_USER_AGENT_TYPE,
        INVALID_UUID_TYPE,
        NONE_VALUE,
        UNLOGGABLE_VALUE,
    }
)
_ID_PLACEHOLDER = re.compile(r"\[id:\d+\]")

# C0 controls except the whitespace range \t..\r, plus DEL.
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0e-\x1f\x7f]")
_WHITESPACE_RUNS = re.compile(r"\s+")


def is_sentinel(value: Any) -> bool:
    """Return ``True`` when ``value`` is a placeholder produced by a rule.

    Examples
    --------
    >>> is_sentinel("[invalid path]")
    True
    >>> is_sentinel("[id:6]")
    True
    >>> is_sentinel("/forms")
    False
    """

    if not isinstance(value, str):
        return False
    return value in _SENTINELS or _ID_PLACEHOLDER.fullmatch(value) is not None


def single_line(text: str) -> str:
    """Drop control characters, collapse whitespace runs and strip the ends.

    Examples
    --------
    >>> single_line("db\\r\\n  timeout")
    'db timeout'
    >>> single_line("  padded  ")
    'padded'
    """

    return _WHITESPACE_RUNS.sub(" ", _CONTROL_CHARS.sub("", text)).strip()


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters and append the truncation marker.

    Examples
    --------
    >>> truncate("abcdef", 3)
    'abc...'
    >>> truncate("abc", 3)
    'abc'
    """

    if len(text) > limit:
        return text[:limit] + TRUNCATION_MARKER
    return text


def sanitize_text(text: str, limit: int = MAX_STRING_LENGTH) -> str:
    """Collapse ``text`` onto a single line, then bound its length."""

    return truncate(single_line(text), limit)


def mask_uuid(value: str) -> str:
    """Return ``first4...last4`` for identifiers, a length placeholder otherwise.

    Canonical UUIDs and any other string of at least
    :data:`~lib_log_guard.domain.limits.UUID_MIN_MASK_LENGTH` characters share
    the same masking; shorter strings reveal only their length.

    Examples
    --------
    >>> mask_uuid("12345678-1234-1234-1234-123456789012")
    '1234...9012'
    >>> mask_uuid("invalid-uuid")
    'inva...uuid'
    >>> mask_uuid("abc")
    '[id:3]'
    """

    if is_valid_uuid(value) or len(value) >= UUID_MIN_MASK_LENGTH:
        return value[:UUID_MASK_PREFIX_LENGTH] + TRUNCATION_MARKER + value[-UUID_MASK_SUFFIX_LENGTH:]
    return f"[id:{len(value)}]"


def error_message(error: BaseException) -> str:
    """Extract a single-line, bounded message from ``error``.

    Exceptions without a message fall back to their class name so the field
    is never empty.

    Examples
    --------
    >>> error_message(RuntimeError("db timeout"))
    'db timeout'
    >>> error_message(KeyError())
    'KeyError'
    """

    message = stringify(error).strip()
    if not message:
        message = type(error).__name__
    return sanitize_text(message)


def stringify(value: Any) -> str:
    """Return the default textual representation of ``value``.

    Examples
    --------
    >>> stringify(42)
    '42'
    >>> stringify(True)
    'True'
    >>> stringify(None)
    '[none]'
    >>> stringify(b"bytes")
    'bytes'
    """

    if value is None:
        return NONE_VALUE
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="ignore")
    try:
        return str(value)
    except Exception:
        return f"[unprintable {type(value).__name__}]"


__all__ = [
    "INVALID_PATH",
    "INVALID_PATH_TYPE",
    "INVALID_USER_AGENT",
    "INVALID_USER_AGENT_TYPE",
    "INVALID_UUID_TYPE",
    "NONE_VALUE",
    "UNLOGGABLE_VALUE",
    "error_message",
    "is_sentinel",
    "mask_uuid",
    "sanitize_text",
    "single_line",
    "stringify",
    "truncate",
]
