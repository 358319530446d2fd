"""Classify field names whose values must never reach log output.

Purpose
-------
Decide, from the key alone, whether a structured-log field carries a secret
(password, token, session cookie, ...) so every rule can mask it before any
type-specific handling runs.

Contents
--------
* :data:`SENSITIVE_KEY_FRAGMENTS` – canonical fragment list.
* :data:`MASK` – replacement emitted for sensitive values.
* :func:`is_sensitive_key` – case-insensitive substring classifier.

System Role
-----------
Consulted first by every rule in :mod:`lib_log_guard.domain.rules`; the
classification always wins over path/user-agent/UUID handling.
"""

from __future__ import annotations

from typing import Any

SENSITIVE_KEY_FRAGMENTS: tuple[str, ...] = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "key",
    "credential",
    "session",
    "cookie",
    "jwt",
    "oauth_",
    "bearer",
    "authorization",
    "csrf",
    "signature",
    "private",
)
"""Fragments matched against normalised keys; ``form_id`` is deliberately absent."""

MASK = "****"


def normalise_key(key: Any) -> str:
    text = key if isinstance(key, str) else str(key)
    return text.strip().lower().replace("-", "_").replace(".", "_").replace(" ", "_")


def is_sensitive_key(key: Any) -> bool:
    """Return ``True`` when ``key`` names a field whose value must be masked.

    Examples
    --------
    >>> is_sensitive_key("password")
    True
    >>> is_sensitive_key("X-Api-Key")
    True
    >>> is_sensitive_key("oauth_state")
    True
    >>> is_sensitive_key("form_id")
    False
    """

    normalised = normalise_key(key)
    for fragment in SENSITIVE_KEY_FRAGMENTS:
        if fragment in normalised:
            return True
    return False


__all__ = ["MASK", "SENSITIVE_KEY_FRAGMENTS", "is_sensitive_key", "normalise_key"]
