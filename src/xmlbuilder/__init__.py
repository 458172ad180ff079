"""
xmlbuilder: build XML documents from Python data

Turns loosely shaped Python values (names, tuples, lists, dicts) into an
immutable node tree and renders it as well-formed, escaped XML text.

Quick Start:
    >>> from xmlbuilder import document, element, render
    >>> render(document("person", "Josh"))
    '<?xml version="1.0" encoding="UTF-8"?>\\n<person>Josh</person>'

    >>> render(element("person", {"occupation": "Developer"}, "Josh"))
    '<person occupation="Developer">Josh</person>'

    >>> tree = element("name", [element("first", "Steve")])
    >>> render(tree)
    '<name>\\n  <first>Steve</first>\\n</name>'
    >>> render(tree, format="none")
    '<name><first>Steve</first></name>'

Doctypes:
    >>> render(document([doctype("greeting", system="hello.dtd"), ("person", "Josh")]))
    '<?xml version="1.0" encoding="UTF-8"?>\\n<!DOCTYPE greeting SYSTEM "hello.dtd">\\n<person>Josh</person>'
"""

from collections.abc import Mapping
from typing import Any

from xmlbuilder.builder import doctype, document, element, normalize
from xmlbuilder.config import (
    Format,
    RenderOptions,
    get_render_options,
    render_options_context,
    reset_render_options,
    resolve_options,
    set_render_options,
)
from xmlbuilder.errors import InvalidNodeShape, OptionError, RenderError, XmlBuilderError
from xmlbuilder.escape import escape_text
from xmlbuilder.nodes import (
    XML_DECL,
    CData,
    Doctype,
    Element,
    Node,
    NodeList,
    RawData,
    SafeText,
    Text,
    XmlDecl,
)
from xmlbuilder.renderers.protocol import NodeRenderer
from xmlbuilder.renderers.xml import XmlRenderer

__version__ = "2.4.0"


def _prepare(node: Any) -> Any:
    # Tuple shapes, alone or in a list, are accepted at the top level
    return normalize(node) if isinstance(node, (tuple, list)) else node


def render(
    node: Any,
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Render a node tree to an XML string.

    Args:
        node: A canonical node, a bare string, a tuple element shape, or a
            list of any of those
        options: RenderOptions or a mapping of option names; the context
            default when None
        **overrides: Individual options (format, encoding, standalone,
            whitespace, line_break) applied on top

    Returns:
        XML string

    Raises:
        InvalidNodeShape: If the tree contains a value that is not a node
        RenderError: If a prolog node appears below the document root
        OptionError: If an option is unknown or invalid

    Example:
        >>> render(XML_DECL, encoding="ISO-8859-1")
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
    """
    return XmlRenderer(resolve_options(options, **overrides)).render(_prepare(node))


def render_fragments(
    node: Any,
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[str]:
    """Render a node tree to a list of text fragments.

    Same arguments as ``render()``; ``"".join(render_fragments(...))`` is the
    ``render()`` result.

    Example:
        >>> render_fragments(element("person"))
        ['<', 'person', '/>']
    """
    return XmlRenderer(resolve_options(options, **overrides)).render_fragments(_prepare(node))


__all__ = [
    "XML_DECL",
    "CData",
    "Doctype",
    "Element",
    "Format",
    "InvalidNodeShape",
    "Node",
    "NodeList",
    "NodeRenderer",
    "OptionError",
    "RawData",
    "RenderError",
    "RenderOptions",
    "SafeText",
    "Text",
    "XmlBuilderError",
    "XmlDecl",
    "XmlRenderer",
    "doctype",
    "document",
    "element",
    "escape_text",
    "get_render_options",
    "normalize",
    "render",
    "render_fragments",
    "render_options_context",
    "reset_render_options",
    "resolve_options",
    "set_render_options",
]
