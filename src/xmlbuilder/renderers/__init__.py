"""xmlbuilder renderers.

Renderers convert canonical node trees into text.

Available Renderers:
- XmlRenderer: Renders nodes to XML using StringBuilder pattern

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from xmlbuilder.renderers.protocol import NodeRenderer
from xmlbuilder.renderers.xml import XmlRenderer

__all__ = ["NodeRenderer", "XmlRenderer"]
