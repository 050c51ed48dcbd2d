"""Tests for :mod:`graphgml.export.quoting`."""

from __future__ import annotations

import codecs

from graphgml.export.quoting import escape_text, quote


def test_quote_without_escaping_is_verbatim():
    assert quote('say "hi"\n') == '"say "hi"\n"'


def test_short_escapes():
    assert escape_text('a\\b"c\nd\te\rf\bg\fh') == 'a\\\\b\\"c\\nd\\te\\rf\\bg\\fh'


def test_printable_ascii_untouched():
    assert escape_text("plain text / it's") == "plain text / it's"


def test_other_code_points_become_unicode_escapes():
    assert escape_text("\x01") == "\\u0001"
    assert escape_text("\x7f") == "\x7f"
    assert escape_text("\x80") == "\\u0080"
    assert escape_text("caf\u00e9") == "caf\\u00E9"
    assert escape_text("\U0001F600") == "\\uD83D\\uDE00"


def test_escaped_quote_round_trips_through_unescaper():
    original = 'C:\\temp\\"new"\nline\ttab caf\u00e9'
    quoted = quote(original, escape=True)

    assert quoted.startswith('"') and quoted.endswith('"')
    assert codecs.decode(quoted[1:-1], "unicode_escape") == original


def test_astral_escape_round_trips_through_utf16_surrogates():
    original = "emoji \U0001F600 end"
    escaped = escape_text(original)

    assert escaped == "emoji \\uD83D\\uDE00 end"
    decoded = codecs.decode(escaped, "unicode_escape")
    assert decoded != original
    assert decoded.encode("utf-16-le", "surrogatepass").decode("utf-16-le") == original
