"""Shape checks deciding whether a raw value is acceptable to log.

Each validator accepts any value and returns a boolean verdict; non-string
input is always rejected. Validators never raise, the rules translate a
``False`` verdict into a sentinel string.
"""

from __future__ import annotations

from typing import Any

from .limits import MAX_USER_AGENT_LENGTH, UUID_LENGTH, UUID_PART_LENGTHS

_PATH_FORBIDDEN_CHARS = ("\\", "<", ">", '"', "'", "\x00", "\n", "\r")
_PATH_FORBIDDEN_SEQUENCES = ("..", "//")

_USER_AGENT_FORBIDDEN_CHARS = ("\x00", "\n", "\r", "<", ">", '"', "'")
_USER_AGENT_SUSPICIOUS_PATTERNS = ("<script", "javascript:", "vbscript:", "onload=", "onerror=")

_UUID_CHARS = frozenset("0123456789abcdefABCDEF-")


def is_valid_path(value: Any) -> bool:
    """Return ``True`` for absolute, traversal-free URL paths.

    Length is not checked here; the path rule truncates instead.

    Examples
    --------
    >>> is_valid_path("/forms/contact")
    True
    >>> is_valid_path("/forms/../admin")
    False
    >>> is_valid_path("relative/path")
    False
    """

    if not isinstance(value, str) or not value.startswith("/"):
        return False
    if any(char in value for char in _PATH_FORBIDDEN_CHARS):
        return False
    return not any(sequence in value for sequence in _PATH_FORBIDDEN_SEQUENCES)


def is_safe_user_agent(value: Any) -> bool:
    """Return ``True`` when ``value`` looks like a harmless user-agent header.

    Examples
    --------
    >>> is_safe_user_agent("Mozilla/5.0 (X11; Linux x86_64)")
    True
    >>> is_safe_user_agent("JavaScript:alert(1)")
    False
    """

    if not isinstance(value, str) or len(value) > MAX_USER_AGENT_LENGTH:
        return False
    if any(char in value for char in _USER_AGENT_FORBIDDEN_CHARS):
        return False
    lowered = value.lower()
    return not any(pattern in lowered for pattern in _USER_AGENT_SUSPICIOUS_PATTERNS)


def is_valid_uuid(value: Any) -> bool:
    """Return ``True`` for canonical 8-4-4-4-12 hexadecimal UUID strings.

    Examples
    --------
    >>> is_valid_uuid("550e8400-e29b-41d4-a716-446655440000")
    True
    >>> is_valid_uuid("550e8400e29b41d4a716446655440000")
    False
    """

    if not isinstance(value, str) or len(value) != UUID_LENGTH:
        return False
    if not set(value) <= _UUID_CHARS:
        return False
    parts = value.split("-")
    if len(parts) != len(UUID_PART_LENGTHS):
        return False
    return all(len(part) == expected for part, expected in zip(parts, UUID_PART_LENGTHS))


__all__ = ["is_safe_user_agent", "is_valid_path", "is_valid_uuid"]
