"""Bridge between :mod:`logging` and the field sanitiser.

Purpose
-------
Let applications that log through the standard library get the same
guarantees as the native runtime: attach :class:`SanitizingFilter` to a
handler or logger and every record is made log-safe before formatting.

Contents
--------
* :class:`SanitizingFilter` - :class:`logging.Filter` that rewrites records.

System Role
-----------
Outer adapter; depends only on :class:`FieldSanitizerPort` so hosts can reuse
the instance built by their composition root.
"""

from __future__ import annotations

import logging

from lib_log_guard.application.ports.sanitizer import FieldSanitizerPort
from lib_log_guard.domain.transformers import stringify

from .sanitizer import FieldSanitizer

#: Attributes every :class:`logging.LogRecord` carries; anything else came in via ``extra=``.
_STANDARD_ATTRIBUTES = frozenset(logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__) | {
    "message",
    "asctime",
    "taskName",
}


class SanitizingFilter(logging.Filter):
    """Sanitise the rendered message and ``extra`` fields of each record.

    The record is rewritten in place: ``msg`` becomes the sanitised rendered
    message, ``args`` is cleared so formatters cannot re-interpolate raw
    values, and every non-standard attribute is replaced by its sanitised
    string form. The filter never drops a record.

    Examples
    --------
    >>> record = logging.LogRecord("app", logging.INFO, __file__, 1, "login by %s", ("alice",), None)
    >>> record.password = "hunter2"
    >>> SanitizingFilter().filter(record)
    True
    >>> record.getMessage(), record.password
    ('login by alice', '****')
    """

    def __init__(self, sanitizer: FieldSanitizerPort | None = None, name: str = "") -> None:
        super().__init__(name)
        self._sanitizer = sanitizer if sanitizer is not None else FieldSanitizer()

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            rendered = record.getMessage()
        except (TypeError, ValueError):
            # Unformattable argument tuple: log the template alone, never the raw args.
            rendered = stringify(record.msg)
        record.msg = self._sanitizer.sanitize_message(rendered)
        record.args = None
        for key in [name for name in vars(record) if name not in _STANDARD_ATTRIBUTES]:
            setattr(record, key, self._sanitizer.sanitize(key, getattr(record, key)))
        return True


__all__ = ["SanitizingFilter"]
