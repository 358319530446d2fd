"""Adapters implementing the application ports.

Contents
--------
* :class:`FieldSanitizer` - rule-driven sanitiser behind :class:`FieldSanitizerPort`.
* :class:`RichConsoleAdapter` - Rich console sink behind :class:`ConsolePort`.
* :class:`SanitizingFilter` - :mod:`logging` bridge reusing the sanitiser.
"""

from __future__ import annotations

from .console import RichConsoleAdapter
from .sanitizer import FieldSanitizer
from .stdlib import SanitizingFilter

__all__ = ["FieldSanitizer", "RichConsoleAdapter", "SanitizingFilter"]
