"""Ad hoc text sanitisation driven by explicit options.

Independent of the rule engine: callers that need to clean free text (form
input echoed into logs, report snippets) pick trimming, HTML handling and a
length cap per call.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

_TAG_PATTERN = re.compile(r"<[^>]*>")
_SCRIPT_BLOCK_PATTERN = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)


@dataclass(slots=True, frozen=True)
class SanitizeOptions:
    """Options for :func:`sanitize_with_options`.

    Attributes
    ----------
    trim_whitespace:
        Strip leading and trailing whitespace first.
    strip_html:
        Remove markup (script/style blocks including their content) and
        unescape entities. When ``False`` the text is HTML-escaped instead.
    max_length:
        Hard cap on the result length; ``0`` disables the cap. No truncation
        marker is appended.
    """

    trim_whitespace: bool = True
    strip_html: bool = False
    max_length: int = 0

    def __post_init__(self) -> None:
        if self.max_length < 0:
            raise ValueError("max_length must be zero or positive")


def _strip_html(text: str) -> str:
    without_blocks = _SCRIPT_BLOCK_PATTERN.sub("", text)
    return html.unescape(_TAG_PATTERN.sub("", without_blocks))


def sanitize_with_options(text: str, options: SanitizeOptions | None = None) -> str:
    """Return ``text`` cleaned according to ``options``.

    Examples
    --------
    >>> sanitize_with_options("  <b>Hi</b> there  ", SanitizeOptions(strip_html=True))
    'Hi there'
    >>> sanitize_with_options("<i>x</i>")
    '&lt;i&gt;x&lt;/i&gt;'
    >>> sanitize_with_options("abcdef", SanitizeOptions(max_length=3))
    'abc'
    """

    opts = options if options is not None else SanitizeOptions()
    result = text.strip() if opts.trim_whitespace else text
    if opts.strip_html:
        result = _strip_html(result)
    else:
        result = html.escape(result, quote=True)
    if opts.max_length and len(result) > opts.max_length:
        result = result[: opts.max_length]
    return result


__all__ = ["SanitizeOptions", "sanitize_with_options"]
