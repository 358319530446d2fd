"""Length limits and masking constants shared by the sanitisation rules.

The values are fixed at import time; the rule registry reads them but never
changes them.
"""

from __future__ import annotations

MAX_STRING_LENGTH = 1000
"""Maximum length for generic string fields and log messages."""

MAX_PATH_LENGTH = 500
"""Maximum length for ``path`` fields."""

MAX_USER_AGENT_LENGTH = 1000
"""Maximum length for ``user_agent`` fields; longer values are rejected."""

UUID_LENGTH = 36
UUID_PART_LENGTHS: tuple[int, ...] = (8, 4, 4, 4, 12)

UUID_MIN_MASK_LENGTH = 8
UUID_MASK_PREFIX_LENGTH = 4
UUID_MASK_SUFFIX_LENGTH = 4

TRUNCATION_MARKER = "..."


__all__ = [
    "MAX_PATH_LENGTH",
    "MAX_STRING_LENGTH",
    "MAX_USER_AGENT_LENGTH",
    "TRUNCATION_MARKER",
    "UUID_LENGTH",
    "UUID_MASK_PREFIX_LENGTH",
    "UUID_MASK_SUFFIX_LENGTH",
    "UUID_MIN_MASK_LENGTH",
    "UUID_PART_LENGTHS",
]
