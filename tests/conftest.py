from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_guard.adapters.sanitizer import FieldSanitizer


@pytest.fixture
def record_console() -> Console:
    """Rich console that records output instead of writing to a terminal."""

    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def sanitizer() -> FieldSanitizer:
    return FieldSanitizer()
