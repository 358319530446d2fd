"""Use cases orchestrating the sanitising logger."""

from __future__ import annotations

from .process_event import create_process_log_event

__all__ = ["create_process_log_event"]
