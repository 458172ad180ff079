"""XML renderer using StringBuilder pattern.

Walks a canonical node tree depth-first, left to right, appending text
fragments to a StringBuilder. ``render()`` joins them; ``render_fragments()``
returns them unjoined for streaming writers.

Depth starts at 0 and only drives indentation. Line breaks and indentation
come from the strategy selected by ``RenderOptions.format``.

Thread Safety:
Options are immutable and each render() call creates its own StringBuilder.
Multiple threads can safely share a single XmlRenderer instance.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from xmlbuilder.config import RenderOptions, get_render_options
from xmlbuilder.errors import InvalidNodeShape, RenderError
from xmlbuilder.escape import format_content, quote_attribute_value, to_text
from xmlbuilder.formats import formatter_for
from xmlbuilder.nodes import (
    CData,
    Doctype,
    Element,
    NodeList,
    RawData,
    SafeText,
    Text,
    XmlDecl,
    is_blank,
)
from xmlbuilder.stringbuilder import StringBuilder
from xmlbuilder.utils.logger import get_logger

logger = get_logger(__name__)

_STANDALONE = {True: ' standalone="yes"', False: ' standalone="no"'}


class XmlRenderer:
    """Render canonical nodes to XML text.

    Usage:
        >>> from xmlbuilder.nodes import Element
        >>> renderer = XmlRenderer()
        >>> renderer.render(Element("name", None, [Element("first", None, "Steve")]))
        '<name>\\n  <first>Steve</first>\\n</name>'

    Thread Safety:
        Holds only immutable options. Each render() call uses an
        independent StringBuilder.
    """

    __slots__ = ("_options", "_format")

    def __init__(self, options: RenderOptions | None = None) -> None:
        """Initialize renderer.

        Args:
            options: Render options; the context default when None
        """
        self._options = options if options is not None else get_render_options()
        self._format = formatter_for(self._options)

    @property
    def options(self) -> RenderOptions:
        return self._options

    def render(self, node: Any) -> str:
        """Render a node, or a list of nodes, to an XML string."""
        return self._render_root(node).build()

    def render_fragments(self, node: Any) -> list[str]:
        """Render a node to its list of text fragments.

        ``"".join(fragments)`` equals ``render(node)``.
        """
        return self._render_root(node).parts()

    def _render_root(self, node: Any) -> StringBuilder:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Rendering %s (format=%s)", type(node).__name__, self._options.format.value
            )
        sb = StringBuilder()
        self._render(node, 0, sb)
        return sb

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render(self, node: Any, depth: int, sb: StringBuilder) -> None:
        match node:
            case Element(name=None):
                self._render_leaf(node.content, depth, sb)
            case Element():
                self._render_element(node, depth, sb)
            case str() | Text() | SafeText() | CData() | RawData():
                self._render_leaf(node, depth, sb)
            case list():
                self._render_siblings(node, depth, sb)
            case NodeList():
                self._render_siblings(node.children, depth, sb)
            case XmlDecl():
                self._render_xml_decl(depth, sb)
            case Doctype():
                self._render_doctype(node, depth, sb)
            case tuple():
                raise InvalidNodeShape(
                    node, "tuples are element shapes; pass them through normalize() first"
                )
            case _:
                raise InvalidNodeShape(node, "expected a canonical node")

    # =========================================================================
    # Prolog
    # =========================================================================

    def _render_xml_decl(self, depth: int, sb: StringBuilder) -> None:
        if depth != 0:
            logger.debug("Rejected XML declaration at depth %d", depth)
            raise RenderError("XML declaration is only allowed at the document root")
        sb.append('<?xml version="1.0" encoding="')
        sb.append(self._options.encoding)
        sb.append('"')
        sb.append(_STANDALONE.get(self._options.standalone, ""))
        sb.append("?>")

    def _render_doctype(self, node: Doctype, depth: int, sb: StringBuilder) -> None:
        if depth != 0:
            logger.debug("Rejected DOCTYPE %r at depth %d", node.name, depth)
            raise RenderError("DOCTYPE declaration is only allowed at the document root")
        sb.append("<!DOCTYPE ").append(node.name)
        if node.public_id is None:
            sb.append(' SYSTEM "').append(node.system_id).append('">')
        else:
            sb.append(' PUBLIC "').append(node.public_id)
            sb.append('" "').append(node.system_id).append('">')

    # =========================================================================
    # Tree
    # =========================================================================

    def _render_leaf(self, content: Any, depth: int, sb: StringBuilder) -> None:
        """Render tagless content: raw payloads, bare strings, markers."""
        if isinstance(content, RawData):
            sb.append(content.payload())
            return
        sb.append(self._format.indentation(depth, self._options))
        if isinstance(content, (Text, SafeText, CData)):
            sb.append(format_content(content))
        else:
            # Bare strings are document text written by the caller, not escaped
            sb.append(to_text(content))

    def _render_element(self, node: Element, depth: int, sb: StringBuilder) -> None:
        indent = self._format.indentation(depth, self._options)
        name = node.name

        if is_blank(node.attrs) and is_blank(node.content):
            sb.append(indent).append("<").append(name).append("/>")
            return

        sb.append(indent).append("<").append(name)
        if not is_blank(node.attrs):
            sb.append(" ").append(self._format_attributes(node.attrs))
        sb.append(">")

        if node.has_children:
            line_break = self._format.line_break(self._options)
            sb.append(line_break)
            self._render_siblings(node.content, depth + 1, sb)
            sb.append(line_break).append(indent)
        elif not is_blank(node.content):
            sb.append(format_content(node.content))

        sb.append("</").append(name).append(">")

    def _render_siblings(self, children: Iterable[Any], depth: int, sb: StringBuilder) -> None:
        line_break = self._format.line_break(self._options)
        first = True
        for child in children:
            if is_blank(child):
                continue
            if not first:
                sb.append(line_break)
            self._render(child, depth, sb)
            first = False

    def _format_attributes(self, attrs: Mapping[str, Any]) -> str:
        return " ".join(f"{key}={quote_attribute_value(value)}" for key, value in attrs.items())
