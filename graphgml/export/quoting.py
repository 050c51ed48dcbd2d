"""Quoting of string values written into GML documents.

Escaping follows conventional string-literal rules: backslash, double quote
and the usual control characters get short escapes, every other code point
below 0x20 or above 0x7F becomes ``\\uXXXX`` (characters beyond the BMP are
written as a UTF-16 surrogate pair, which decodes back to the original
character only with a UTF-16 aware unescaper). Single quotes and slashes are
left alone. Without escaping the text is wrapped verbatim, so a raw ``"`` or
newline in the value produces a document GML readers will reject.
"""
from __future__ import annotations

_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _escape_char(char: str) -> str:
    short = _SHORT_ESCAPES.get(char)
    if short is not None:
        return short
    code = ord(char)
    if 0x20 <= code <= 0x7F:
        return char
    if code > 0xFFFF:
        code -= 0x10000
        high = 0xD800 + (code >> 10)
        low = 0xDC00 + (code & 0x3FF)
        return f"\\u{high:04X}\\u{low:04X}"
    return f"\\u{code:04X}"


def escape_text(value: str) -> str:
    """Return ``value`` escaped for use inside a double quoted literal."""

    return "".join(_escape_char(char) for char in value)


def quote(value: str, *, escape: bool = False) -> str:
    """Wrap ``value`` in double quotes, escaping it first when ``escape`` is set."""

    if escape:
        value = escape_text(value)
    return f'"{value}"'
