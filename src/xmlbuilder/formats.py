"""Line-break and indentation strategies.

Two interchangeable policies, selected by ``RenderOptions.format``:

- IndentedFormat: newline between lines, ``whitespace * depth`` indentation
- NoFormat: no line breaks and no indentation (compact output)

``RenderOptions.line_break`` overrides the line-break string of either
policy without changing its indentation.

Thread Safety:
Strategies are stateless. Safe to share across threads.

"""

from typing import Protocol

from xmlbuilder.config import Format, RenderOptions


class LineFormat(Protocol):
    """Protocol for line-break/indentation strategies."""

    def line_break(self, options: RenderOptions) -> str:
        """Return the string placed between sibling lines."""
        ...

    def indentation(self, depth: int, options: RenderOptions) -> str:
        """Return the prefix for a line at the given depth."""
        ...


class IndentedFormat:
    """Pretty-printed output: one node per line, indented by depth."""

    __slots__ = ()

    def line_break(self, options: RenderOptions) -> str:
        return "\n" if options.line_break is None else options.line_break

    def indentation(self, depth: int, options: RenderOptions) -> str:
        return options.whitespace * depth


class NoFormat:
    """Compact output with zero added whitespace."""

    __slots__ = ()

    def line_break(self, options: RenderOptions) -> str:
        return "" if options.line_break is None else options.line_break

    def indentation(self, depth: int, options: RenderOptions) -> str:
        return ""


INDENTED = IndentedFormat()
NONE = NoFormat()

_FORMATS: dict[Format, LineFormat] = {
    Format.INDENTED: INDENTED,
    Format.NONE: NONE,
}


def formatter_for(options: RenderOptions) -> LineFormat:
    """Select the strategy named by ``options.format``."""
    return _FORMATS[options.format]
