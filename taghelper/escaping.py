"""Escaping helpers shared by the tag builders."""

from __future__ import annotations

import re
from typing import Any

from markupsafe import Markup

HTML_ESCAPE = {"&": "&amp;", ">": "&gt;", "<": "&lt;", '"': "&quot;"}

# An ampersand that already starts an entity (&amp; or &#38;) is left alone.
_ESCAPE_ONCE_RE = re.compile(r'["><]|&(?!(?:[a-zA-Z]+|#\d+);)')

_NAME_START_CHARS = (
    r":A-Z_a-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D\u037F-\u1FFF"
    r"\u200C-\u200D\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF\uF900-\uFDCF"
    r"\uFDF0-\uFFFD\U00010000-\U000EFFFF"
)
_NAME_CHARS = _NAME_START_CHARS + r"\-.0-9\u00B7\u0300-\u036F\u203F-\u2040"

_INVALID_NAME_START_RE = re.compile(f"[^{_NAME_START_CHARS}]")
_INVALID_NAME_CHAR_RE = re.compile(f"[^{_NAME_CHARS}]")

_INVALID_ATTRIBUTE_NAME_RE = re.compile(
    r"[\x00-\x20\x7F-\x9F\"'<>/=\uFDD0-\uFDEF\uFFFE\uFFFF]"
)

_SURROGATE_RE = re.compile(r"[\uD800-\uDFFF]")

NAME_REPLACEMENT_CHAR = "_"
REPLACEMENT_CHAR = "\uFFFD"


def clean(value: Any) -> str:
    """Return ``value`` as text with malformed sequences replaced by U+FFFD.

    Bytes are decoded as UTF-8. Each lone surrogate in a string (what
    ``surrogateescape`` decoding leaves behind) becomes one replacement
    character.
    """

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "replace")
    return _SURROGATE_RE.sub(REPLACEMENT_CHAR, str(value))


def escape_once(value: Any) -> Markup:
    """Escape ``value`` for HTML without touching entities that are already escaped.

    ``escape_once("1 < 2 &amp; 3")`` gives ``"1 &lt; 2 &amp; 3"``; running it
    again on its own output changes nothing.
    """

    text = clean(value)
    return Markup(_ESCAPE_ONCE_RE.sub(lambda match: HTML_ESCAPE[match.group(0)], text))


def xml_name_escape(name: Any) -> str:
    """Make ``name`` a valid XML ``Name`` by replacing illegal characters with ``_``."""

    text = clean(name)
    if not text:
        return NAME_REPLACEMENT_CHAR
    first = _INVALID_NAME_START_RE.sub(NAME_REPLACEMENT_CHAR, text[0])
    rest = _INVALID_NAME_CHAR_RE.sub(NAME_REPLACEMENT_CHAR, text[1:])
    return first + rest


def html_attribute_name_escape(name: Any) -> str:
    """Replace characters HTML does not allow in attribute names with ``_``."""

    text = clean(name)
    if not text:
        return NAME_REPLACEMENT_CHAR
    return _INVALID_ATTRIBUTE_NAME_RE.sub(NAME_REPLACEMENT_CHAR, text)


def quote_only_escape(value: Any) -> str:
    """Weak escape for trusted attribute values: only ``"`` becomes ``&quot;``."""

    return str(value).replace('"', "&quot;")


__all__ = [
    "HTML_ESCAPE",
    "NAME_REPLACEMENT_CHAR",
    "REPLACEMENT_CHAR",
    "clean",
    "escape_once",
    "html_attribute_name_escape",
    "quote_only_escape",
    "xml_name_escape",
]
