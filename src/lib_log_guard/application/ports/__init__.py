"""Ports describing the boundaries the use cases depend on."""

from __future__ import annotations

from .console import ConsolePort
from .sanitizer import FieldSanitizerPort
from .time import ClockPort, IdProvider

__all__ = ["ClockPort", "ConsolePort", "FieldSanitizerPort", "IdProvider"]
