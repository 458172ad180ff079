"""Build canonical node trees from permissive caller input.

``normalize()`` accepts the loose shapes callers like to write and returns
canonical nodes:

    "text"                      -> anonymous text leaf
    ("person",)                 -> <person/>
    ("person", {"id": 1})       -> person with attributes, no content
    ("person", "Josh")          -> <person>Josh</person>
    ("person", {"id": 1}, [...]) -> element with children
    [shape, None, shape]        -> list of nodes, None dropped

``element()`` is the call form of the same rules, where the first argument
is always a tag name. ``document()`` prepends the XML declaration and
``doctype()`` builds a DOCTYPE declaration.

Malformed input raises InvalidNodeShape here rather than during rendering.

"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from xmlbuilder.errors import InvalidNodeShape
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
from xmlbuilder.utils.logger import get_logger

logger = get_logger(__name__)

_MISSING: Any = object()

_SHAPES = "a str, a node, a list, or a (name,), (name, attrs|content) or (name, attrs, content) tuple"


def normalize(value: Any) -> Node | list[Node]:
    """Convert caller input into canonical nodes.

    Args:
        value: Any accepted input shape (see module docstring)

    Returns:
        A canonical node, or a list of canonical nodes for list input

    Raises:
        InvalidNodeShape: If the input matches none of the accepted shapes

    Example:
        >>> normalize(["intro", ("b", "bold")])
        [Element(name=None, attrs=None, content='intro'), Element(name='b', attrs=None, content='bold')]
    """
    match value:
        case str():
            return Element(None, None, value)
        case Element() | Doctype() | XmlDecl() | NodeList():
            return value
        case Text() | SafeText() | CData() | RawData():
            return Element(None, None, value)
        case list():
            return [normalize(item) for item in value if item is not None]
        case tuple():
            return _from_tuple(value)
        case _:
            raise InvalidNodeShape(value, f"expected {_SHAPES}")


def _from_tuple(shape: tuple[Any, ...]) -> Element:
    match shape:
        case (name,):
            return _build(name, None, None)
        case (name, Mapping() as attrs):
            return _build(name, attrs, None)
        case (name, content):
            return _build(name, None, content)
        case (name, attrs, content):
            return _build(name, attrs, content)
        case _:
            raise InvalidNodeShape(shape, "element tuples must have one to three members")


def _build(name: Any, attrs: Any, content: Any) -> Element:
    if not isinstance(name, str):
        raise InvalidNodeShape(name, "element name must be a str")
    if attrs is not None and not isinstance(attrs, Mapping):
        raise InvalidNodeShape(attrs, f"attributes of <{name}> must be a mapping or None")
    if isinstance(content, tuple):
        raise InvalidNodeShape(
            content, f"children of <{name}> must be given as a list, not a tuple"
        )
    if isinstance(content, list):
        content = tuple(normalize(content))
    return Element(name, attrs, content)


def element(name: Any, attrs_or_content: Any = _MISSING, content: Any = _MISSING) -> Any:
    """Create an XML element.

    The second positional argument is treated as attributes when it is a
    mapping and as content otherwise. A list as the only argument is
    normalized member by member.

    Examples:
        >>> element("person")
        Element(name='person', attrs=None, content=None)
        >>> element("person", "data")
        Element(name='person', attrs=None, content='data')
        >>> element("person", {"id": 1})
        Element(name='person', attrs=mappingproxy({'id': 1}), content=None)
        >>> element("person", {"id": 1}, [element("first", "Steve")])
        Element(name='person', attrs=mappingproxy({'id': 1}), content=(Element(name='first', attrs=None, content='Steve'),))
    """
    if attrs_or_content is _MISSING:
        if isinstance(name, str):
            return _build(name, None, None)
        return normalize(name)
    if content is _MISSING:
        if isinstance(attrs_or_content, Mapping):
            return _build(name, attrs_or_content, None)
        return _build(name, None, attrs_or_content)
    return _build(name, attrs_or_content, content)


def doctype(
    name: str,
    *,
    system: str | None = None,
    public: Sequence[str] | None = None,
) -> Doctype:
    """Create a DOCTYPE declaration with a system or public identifier.

    Examples:
        >>> doctype("greeting", system="hello.dtd")
        Doctype(name='greeting', system_id='hello.dtd', public_id=None)
        >>> doctype("html", public=["-//W3C//DTD XHTML 1.0 Transitional//EN",
        ...                         "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd"])
        Doctype(name='html', system_id='http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd', public_id='-//W3C//DTD XHTML 1.0 Transitional//EN')
    """
    if (system is None) == (public is None):
        raise InvalidNodeShape(
            {"system": system, "public": public},
            "doctype() takes exactly one of system= or public=",
        )
    if system is not None:
        return Doctype(str(name), str(system))
    if isinstance(public, (str, bytes)) or len(public) != 2:
        raise InvalidNodeShape(public, "public= must be a (public_id, system_id) pair")
    public_id, system_id = public
    return Doctype(str(name), str(system_id), str(public_id))


def document(
    elements: Any, attrs_or_content: Any = _MISSING, content: Any = _MISSING
) -> list[Node]:
    """Create an XML document: the XML declaration followed by its nodes.

    ``document(name)``, ``document(name, attrs_or_content)`` and
    ``document(name, attrs, content)`` wrap a single element.
    ``document([...])`` normalizes a list of nodes, where the first member
    may be a DOCTYPE declaration.

    Examples:
        >>> document("person", "Josh")
        [XmlDecl(), Element(name='person', attrs=None, content='Josh')]
    """
    if attrs_or_content is not _MISSING:
        return [XML_DECL, element(elements, attrs_or_content, content)]

    if isinstance(elements, list):
        members = [item for item in elements if item is not None]
        nodes: list[Any] = []
        for index, item in enumerate(members):
            if isinstance(item, Doctype):
                if index > 0:
                    raise InvalidNodeShape(item, "a DOCTYPE may only be the first document node")
                logger.debug("Document prolog uses DOCTYPE %r", item.name)
                nodes.append(item)
                continue
            nodes.append(normalize(item))
        return [XML_DECL, *nodes]

    node = element(elements) if isinstance(elements, str) else normalize(elements)
    return [XML_DECL, node]
