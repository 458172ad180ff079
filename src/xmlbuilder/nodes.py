"""Canonical XML nodes for xmlbuilder.

All nodes are frozen dataclasses with slots for:
- Immutability: Safe sharing across threads, rendering never mutates input
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: the renderer dispatches with a single match statement

Node Kinds:
├── Element       tag with optional attributes and content
│                 (name=None wraps a text or passthrough leaf)
├── Text          escaped character data
├── SafeText      character data emitted verbatim
├── RawData       literal payload, bypasses all processing
├── CData         <![CDATA[ ... ]]> section
├── XmlDecl       <?xml ... ?> prolog (singleton XML_DECL)
├── Doctype       <!DOCTYPE ...> declaration
└── NodeList      sibling sequence without a wrapping tag

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Any, TypeAlias

from xmlbuilder.errors import InvalidNodeShape

# =============================================================================
# Passthrough markers
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Character data, escaped on render."""

    data: str


@dataclass(frozen=True, slots=True)
class SafeText:
    """Character data the caller has already made safe.

    Emitted verbatim; non-string payloads are stringified.

    """

    data: Any


@dataclass(frozen=True, slots=True)
class CData:
    """CDATA section.

    XML: <![CDATA[data]]>

    The payload is not escaped and must not contain ``]]>``.

    """

    data: str


@dataclass(frozen=True, slots=True)
class RawData:
    """Literal payload that bypasses escaping, indentation and tags.

    ``data`` may be a string, UTF-8 bytes, or a (nested) iterable of those.
    It is flattened and decoded once, on construction, and stored as a str.

    """

    data: str | bytes | Iterable[Any]

    def __post_init__(self) -> None:
        if not isinstance(self.data, str):
            object.__setattr__(self, "data", "".join(_flatten_raw(self.data)))

    def payload(self) -> str:
        """Return the payload as a single string."""
        return self.data


def _flatten_raw(data: Any) -> Iterable[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, (bytes, bytearray, memoryview)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidNodeShape(bytes(data), f"raw bytes must be valid UTF-8 ({e.reason})") from e
        yield text
    elif isinstance(data, Iterable):
        for item in data:
            yield from _flatten_raw(item)
    else:
        raise InvalidNodeShape(data, "raw data must be str, bytes, or an iterable of those")


# PEP 695 type aliases
Scalar: TypeAlias = str | int | float | Decimal
Marker: TypeAlias = Text | SafeText | CData | RawData

SCALAR_TYPES = (str, int, float, Decimal)
MARKER_TYPES = (Text, SafeText, CData, RawData)


# =============================================================================
# Prolog nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class XmlDecl:
    """XML declaration.

    XML: <?xml version="1.0" encoding="UTF-8"?>

    Encoding and standalone are render options, not node fields.

    """


XML_DECL = XmlDecl()


@dataclass(frozen=True, slots=True)
class Doctype:
    """DOCTYPE declaration.

    System form: <!DOCTYPE name SYSTEM "system_id">
    Public form: <!DOCTYPE name PUBLIC "public_id" "system_id">

    """

    name: str
    system_id: str
    public_id: str | None = None

    @property
    def kind(self) -> str:
        """Return ``"public"`` or ``"system"``."""
        return "system" if self.public_id is None else "public"


# =============================================================================
# Tree nodes
# =============================================================================


def is_blank(value: object) -> bool:
    """True for None, an empty mapping, an empty list/tuple, or an empty NodeList."""
    if value is None:
        return True
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) == 0
    if isinstance(value, NodeList):
        return len(value.children) == 0
    return False


def _check_children(children: Iterable[Any], parent: str) -> tuple[Any, ...]:
    """Validate child entries. Nested lists become NodeList siblings."""
    checked: list[Any] = []
    for child in children:
        match child:
            case None | str() | Element() | NodeList() | XmlDecl() | Doctype():
                checked.append(child)
            case Text() | SafeText() | CData() | RawData():
                checked.append(child)
            case list():
                checked.append(NodeList(tuple(child)))
            case tuple():
                raise InvalidNodeShape(
                    child, f"children of {parent} cannot be tuple shapes; build them with element()"
                )
            case _:
                raise InvalidNodeShape(
                    child, f"children of {parent} must be nodes, strings, or lists of those"
                )
    return tuple(checked)


@dataclass(frozen=True, slots=True)
class Element:
    """An XML element.

    ``content`` is either a single scalar/marker or a tuple of child nodes.
    Blank attrs and blank content render self-closing (``<name/>``).
    Attributes are stored as a read-only mapping.

    An anonymous element (``name=None``) wraps a text or passthrough leaf
    and renders without any tag.

    """

    name: str | None
    attrs: Mapping[str, Any] | None = None
    content: Any = None

    def __post_init__(self) -> None:
        if self.name is not None and not isinstance(self.name, str):
            raise InvalidNodeShape(self.name, "element name must be a str")

        if self.attrs is not None:
            if not isinstance(self.attrs, Mapping):
                raise InvalidNodeShape(self.attrs, "attributes must be a mapping or None")
            attrs: dict[str, Any] = {}
            for key, value in self.attrs.items():
                if not isinstance(key, str):
                    raise InvalidNodeShape(key, "attribute names must be str")
                if value is not None and not isinstance(value, (*SCALAR_TYPES, SafeText)):
                    raise InvalidNodeShape(value, f"attribute {key!r} must have a scalar value")
                attrs[key] = value
            object.__setattr__(self, "attrs", MappingProxyType(attrs))

        content = self.content
        if isinstance(content, (list, tuple)):
            parent = "an anonymous element" if self.name is None else f"<{self.name}>"
            object.__setattr__(self, "content", _check_children(content, parent))
        elif not (content is None or isinstance(content, (*SCALAR_TYPES, *MARKER_TYPES))):
            raise InvalidNodeShape(
                content, "content must be a scalar, a passthrough marker, or a list of nodes"
            )

        if self.name is None:
            if not is_blank(self.attrs):
                raise InvalidNodeShape(self.attrs, "an anonymous element cannot have attributes")
            if is_blank(self.content) or isinstance(self.content, tuple):
                raise InvalidNodeShape(
                    self.content, "an anonymous element needs text or passthrough content"
                )

    @property
    def has_children(self) -> bool:
        """True when content is a non-empty sequence of child nodes."""
        return isinstance(self.content, tuple) and len(self.content) > 0


@dataclass(frozen=True, slots=True)
class NodeList:
    """Ordered sibling nodes rendered without a wrapping tag.

    ``None`` entries are dropped on construction; nested lists become
    NodeLists.

    """

    children: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        children = _check_children(self.children, "a NodeList")
        object.__setattr__(self, "children", tuple(c for c in children if c is not None))


Node: TypeAlias = Element | XmlDecl | Doctype | NodeList | Marker
