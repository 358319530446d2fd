"""Domain entities, rules and pure transformers of the sanitisation pipeline."""

from __future__ import annotations

from .events import LogEvent
from .levels import LogLevel
from .options import SanitizeOptions, sanitize_with_options
from .rules import Rule, RuleRegistry, build_default_rules
from .sensitivity import MASK, is_sensitive_key

__all__ = [
    "LogEvent",
    "LogLevel",
    "MASK",
    "Rule",
    "RuleRegistry",
    "SanitizeOptions",
    "build_default_rules",
    "is_sensitive_key",
    "sanitize_with_options",
]
