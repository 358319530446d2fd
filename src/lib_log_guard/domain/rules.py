"""Ordered sanitisation rules and the immutable registry that evaluates them.

Purpose
-------
Pair a key predicate with a value processor for each field class (path,
user agent, identifiers, errors, everything else) and evaluate them in a fixed
order where the first match wins.

Contents
--------
* :class:`Rule` – frozen predicate/processor pair.
* :func:`build_default_rules` – Path, UserAgent, UUID, Error, Default.
* :class:`RuleRegistry` – ordered, read-only rule container.

System Role
-----------
Owned by :class:`lib_log_guard.adapters.sanitizer.FieldSanitizer`; built once
by the composition root and shared read-only across threads.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .limits import MAX_PATH_LENGTH, MAX_STRING_LENGTH, TRUNCATION_MARKER
from .sensitivity import MASK, is_sensitive_key, normalise_key
from .transformers import (
    INVALID_PATH,
    INVALID_PATH_TYPE,
    INVALID_USER_AGENT,
    INVALID_USER_AGENT_TYPE,
    INVALID_UUID_TYPE,
    error_message,
    is_sentinel,
    mask_uuid,
    sanitize_text,
    single_line,
    stringify,
)
from .validators import is_safe_user_agent, is_valid_path


@dataclass(slots=True, frozen=True)
class Rule:
    """Predicate/processor pair describing how one class of field is logged.

    Attributes
    ----------
    name:
        Human-readable rule identifier (shown by the ``rules`` CLI command).
    matches:
        Receives the key as normalised by :func:`~lib_log_guard.domain.sensitivity.normalise_key`.
    process:
        Receives the original key and the raw value; only invoked for
        non-sensitive keys and non-sentinel values.
    """

    name: str
    matches: Callable[[str], bool]
    process: Callable[[str, Any], str]

    def apply(self, key: str, value: Any) -> str:
        """Run the sensitivity check, then the rule's own processing."""

        if is_sensitive_key(key):
            return MASK
        if is_sentinel(value):
            return value
        return self.process(key, value)


_PATH_RUN_CHARS = "./"


def _path_cut(text: str, limit: int) -> int:
    """Return the cut index for ``text``: ``limit``, moved past any ``.``/``/`` run.

    The marker never directly follows a dot or slash, so a truncated path
    cannot be confused with one that carries ``..`` or ``//`` itself.
    """

    end = limit
    while end < len(text) and text[end - 1] in _PATH_RUN_CHARS:
        end += 1
    return end


def _truncate_path(text: str) -> str:
    if len(text) <= MAX_PATH_LENGTH:
        return text
    end = _path_cut(text, MAX_PATH_LENGTH)
    if end == len(text):
        return text
    return text[:end] + TRUNCATION_MARKER


def _is_truncated_path(text: str) -> bool:
    """Return ``True`` when ``text`` is exactly what :func:`_truncate_path` emits."""

    if not text.endswith(TRUNCATION_MARKER):
        return False
    body = text[: -len(TRUNCATION_MARKER)]
    if len(body) < MAX_PATH_LENGTH or body[-1] in _PATH_RUN_CHARS:
        return False
    return _path_cut(body, MAX_PATH_LENGTH) == len(body) and is_valid_path(body)


def _process_path(_key: str, value: Any) -> str:
    if not isinstance(value, str):
        return INVALID_PATH_TYPE
    # Both the raw and the single-lined value must pass: control characters
    # must not hide "..", "//" or a forbidden character from the check.
    cleaned = single_line(value)
    if is_valid_path(value) and is_valid_path(cleaned):
        return _truncate_path(cleaned)
    if _is_truncated_path(value) and _is_truncated_path(cleaned):
        return cleaned
    return INVALID_PATH


def _process_user_agent(_key: str, value: Any) -> str:
    if not isinstance(value, str):
        return INVALID_USER_AGENT_TYPE
    cleaned = single_line(value)
    if not (is_safe_user_agent(value) and is_safe_user_agent(cleaned)):
        return INVALID_USER_AGENT
    return cleaned


def _is_uuid_key(key: str) -> bool:
    if "test" in key:
        return False
    if key in {"id", "user_id", "form_id"}:
        return True
    return key.endswith("_id") and key not in {"request_id", "session_id"}


def _process_uuid(_key: str, value: Any) -> str:
    if isinstance(value, uuid.UUID):
        value = str(value)
    if not isinstance(value, str):
        return INVALID_UUID_TYPE
    return mask_uuid(single_line(value))


def _process_default(_key: str, value: Any) -> str:
    if isinstance(value, BaseException):
        return error_message(value)
    return sanitize_text(stringify(value), MAX_STRING_LENGTH)


def _process_error(key: str, value: Any) -> str:
    if isinstance(value, BaseException):
        return error_message(value)
    return _process_default(key, value)


def _match_any(_key: str) -> bool:
    return True


def build_default_rules() -> tuple[Rule, ...]:
    """Return the built-in rules in evaluation order.

    The order encodes precedence: Path, UserAgent, UUID and Error precede the
    catch-all Default rule.

    Examples
    --------
    >>> [rule.name for rule in build_default_rules()]
    ['path', 'user_agent', 'uuid', 'error', 'default']
    """

    return (
        Rule("path", lambda key: key == "path", _process_path),
        Rule("user_agent", lambda key: key == "user_agent", _process_user_agent),
        Rule("uuid", _is_uuid_key, _process_uuid),
        Rule("error", lambda key: key in {"error", "err"}, _process_error),
        Rule("default", _match_any, _process_default),
    )


class RuleRegistry:
    """Immutable, ordered collection of rules evaluated first-match-wins.

    The final rule must be a catch-all so every key resolves to exactly one
    rule; this is checked at construction with a probe key.

    Examples
    --------
    >>> registry = RuleRegistry(build_default_rules())
    >>> registry.match("path").name
    'path'
    >>> registry.match("anything").name
    'default'
    >>> registry.match("User-Agent").name, registry.match("user.id").name
    ('user_agent', 'uuid')
    """

    __slots__ = ("_rules",)

    _PROBE_KEY = "\x00catch-all probe\x00"

    def __init__(self, rules: Iterable[Rule]) -> None:
        frozen = tuple(rules)
        if not frozen:
            raise ValueError("rule registry requires at least one rule")
        if not frozen[-1].matches(self._PROBE_KEY):
            raise ValueError(f"last rule {frozen[-1].name!r} must match every key")
        self._rules = frozen

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def match(self, key: str) -> Rule:
        """Return the first rule whose predicate accepts ``key``."""

        normalised = normalise_key(key)
        for rule in self._rules:
            if rule.matches(normalised):
                return rule
        # Unreachable while the catch-all invariant holds.
        return self._rules[-1]

    def sanitize(self, key: str, value: Any) -> str:
        """Apply the matching rule to ``value``."""

        return self.match(key).apply(key, value)


__all__ = ["Rule", "RuleRegistry", "build_default_rules"]
