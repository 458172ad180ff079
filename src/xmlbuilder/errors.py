"""Exception classes for xmlbuilder.

Provides standardized exceptions for error handling throughout xmlbuilder.
"""

from __future__ import annotations


class XmlBuilderError(Exception):
    """Base exception for all xmlbuilder errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidNodeShape(XmlBuilderError, TypeError):
    """Caller input that cannot be turned into a canonical node.

    Raised eagerly by the builder helpers and by node constructors, and by the
    renderer when it meets a value that is not a canonical node.
    """

    def __init__(self, value: object, expected: str) -> None:
        """Initialize shape error.

        Args:
            value: The offending value
            expected: Description of the accepted shape
        """
        self.value = value
        self.expected = expected
        super().__init__(f"{expected}, got {value!r}")


class RenderError(XmlBuilderError):
    """Error during XML rendering.

    Raised when a well-formed node appears where it cannot be rendered,
    such as an XML declaration below the document root.
    """

    pass


class OptionError(XmlBuilderError, ValueError):
    """Invalid render option.

    Raised when RenderOptions receives an unknown format or a value
    of the wrong type.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize option error.

        Args:
            option: Name of the offending option (e.g., "format")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
