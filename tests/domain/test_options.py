from __future__ import annotations

import pytest

from lib_log_guard.domain.options import SanitizeOptions, sanitize_with_options


def test_defaults_trim_and_escape() -> None:
    assert sanitize_with_options("  <b>bold</b>  ") == "&lt;b&gt;bold&lt;/b&gt;"


def test_strip_html_removes_tags_and_script_content() -> None:
    text = "Hello <script>alert('x')</script><em>world</em> &amp; more"
    assert sanitize_with_options(text, SanitizeOptions(strip_html=True)) == "Hello world & more"


def test_trim_can_be_disabled() -> None:
    assert sanitize_with_options("  padded  ", SanitizeOptions(trim_whitespace=False)) == "  padded  "


def test_max_length_cuts_without_marker() -> None:
    assert sanitize_with_options("abcdefgh", SanitizeOptions(max_length=4)) == "abcd"


def test_zero_max_length_means_unlimited() -> None:
    text = "x" * 5000
    assert sanitize_with_options(text, SanitizeOptions(max_length=0)) == text


def test_negative_max_length_is_rejected() -> None:
    with pytest.raises(ValueError, match="max_length"):
        SanitizeOptions(max_length=-1)


def test_escape_applies_before_length_cut() -> None:
    assert sanitize_with_options("<<<", SanitizeOptions(max_length=5)) == "&lt;&"
