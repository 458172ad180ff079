"""Escaping rules for XML character data and attribute values.

Content escaping replaces the five XML special characters with their
predefined entities. Every other character, including non-ASCII text,
passes through unchanged.

Existing entity references get no special treatment: the ampersand of
``&amp;`` is escaped like any other, so ``&amp;`` becomes ``&amp;amp;``
and the original text survives a round trip through an XML parser.

Attribute values use a narrower trigger: they are only escaped when they
contain ``"``, ``&`` or ``<``. A literal ``>`` or ``'`` is valid inside a
double-quoted attribute value.

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

import re
from typing import Any

from xmlbuilder.nodes import CData, RawData, SafeText, Text

_CONTENT_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)

_CONTENT_SPECIALS = re.compile(r"[&<>\"']")
_ATTRIBUTE_SPECIALS = re.compile(r"[\"&<]")


def to_text(value: Any) -> str:
    """Stringify a scalar for output.

    Booleans render as ``true``/``false`` and None as the empty string.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, SafeText):
        return to_text(value.data)
    return str(value)


def escape_text(text: str) -> str:
    """Escape XML special characters in character data.

    Examples:
        >>> escape_text("Tom & Jerry's <show>")
        'Tom &amp; Jerry&apos;s &lt;show&gt;'
        >>> escape_text("&amp;")
        '&amp;amp;'
    """
    if not _CONTENT_SPECIALS.search(text):
        return text
    return text.translate(_CONTENT_TABLE)


def format_content(value: Any) -> str:
    """Render a scalar element content value.

    Passthrough markers bypass escaping: RawData and SafeText emit their
    payload, CData wraps it in a CDATA section.
    """
    match value:
        case RawData():
            return value.payload()
        case SafeText():
            return to_text(value.data)
        case CData():
            return f"<![CDATA[{value.data}]]>"
        case Text():
            return escape_text(value.data)
        case _:
            return escape_text(to_text(value))


def quote_attribute_value(value: Any) -> str:
    """Return an attribute value wrapped in double quotes.

    SafeText values are quoted without escaping.

    Examples:
        >>> quote_attribute_value("Developer")
        '"Developer"'
        >>> quote_attribute_value('say "hi" & <go>')
        '"say &quot;hi&quot; &amp; &lt;go&gt;"'
        >>> quote_attribute_value(1)
        '"1"'
    """
    text = to_text(value)
    if not isinstance(value, SafeText) and _ATTRIBUTE_SPECIALS.search(text):
        text = escape_text(text)
    return f'"{text}"'
