"""NodeRenderer protocol: the stable interface for node renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``XmlRenderer`` is the reference implementation.

Example:
    from xmlbuilder.renderers.protocol import NodeRenderer

    def write_document(renderer: NodeRenderer, nodes: list[Node], out: TextIO) -> None:
        out.write(renderer.render(nodes))

"""

from typing import Any, Protocol


class NodeRenderer(Protocol):
    """Protocol for node renderers.

    Implementations accept a canonical node (or a list of them) and return
    a rendered string. The built-in ``XmlRenderer`` conforms to this protocol.

    """

    def render(self, node: Any) -> str:
        """Render a node tree to a string.

        Args:
            node: A canonical node or list of canonical nodes.

        Returns:
            Rendered string output.

        """
        ...
