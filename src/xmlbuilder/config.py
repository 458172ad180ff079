"""ContextVar-based render configuration for xmlbuilder.

Provides thread-local default render options using Python's ContextVars
(PEP 567). Options passed explicitly to ``render()`` always win; the
context default is used when none are given.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from xmlbuilder import render, element
    from xmlbuilder.config import RenderOptions, render_options_context

    render(element("person"), format="none")

    with render_options_context(RenderOptions(format="none")):
        render(element("person"))  # compact output

"""

import dataclasses
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from xmlbuilder.errors import OptionError


class Format(str, Enum):
    """Line-break and indentation policy."""

    INDENTED = "indented"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        format: ``"indented"`` (newline + per-level indent) or ``"none"``
            (no added whitespace)
        encoding: Encoding named in the XML declaration
        standalone: ``True``/``False`` adds ``standalone="yes"``/``"no"``
            to the XML declaration; ``None`` omits it
        whitespace: Indentation unit per nesting level (indented format only)
        line_break: Overrides the format's line-break string when not None

    """

    format: Format = Format.INDENTED
    encoding: str = "UTF-8"
    standalone: bool | None = None
    whitespace: str = "  "
    line_break: str | None = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "format", Format(self.format))
        except ValueError:
            allowed = ", ".join(repr(f.value) for f in Format)
            raise OptionError("format", f"expected one of {allowed}, got {self.format!r}") from None

        if not isinstance(self.encoding, str):
            raise OptionError("encoding", f"expected str, got {self.encoding!r}")
        if self.standalone is not None and not isinstance(self.standalone, bool):
            raise OptionError("standalone", f"expected True, False or None, got {self.standalone!r}")
        if not isinstance(self.whitespace, str):
            raise OptionError("whitespace", f"expected str, got {self.whitespace!r}")
        if self.line_break is not None and not isinstance(self.line_break, str):
            raise OptionError("line_break", f"expected str or None, got {self.line_break!r}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "RenderOptions":
        """Create RenderOptions from a mapping.

        Only includes keys that are valid RenderOptions fields; unknown keys
        are silently ignored.

        Example:
            >>> options = RenderOptions.from_dict({"format": "none", "unknown": 1})
            >>> options.format
            <Format.NONE: 'none'>

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def replace(self, **overrides: Any) -> "RenderOptions":
        """Return a copy with the given fields replaced.

        Raises:
            OptionError: If an override names an unknown option
        """
        valid_fields = {f.name for f in fields(self)}
        for key in overrides:
            if key not in valid_fields:
                raise OptionError(key, "unknown render option")
        return dataclasses.replace(self, **overrides) if overrides else self


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: RenderOptions = RenderOptions()

_render_options: ContextVar[RenderOptions] = ContextVar(
    "render_options",
    default=_DEFAULT_OPTIONS,
)


def get_render_options() -> RenderOptions:
    """Get current default render options (thread-local)."""
    return _render_options.get()


def set_render_options(options: RenderOptions) -> None:
    """Set default render options for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_options.set(options)


def reset_render_options() -> None:
    """Reset to the module-level default options."""
    _render_options.set(_DEFAULT_OPTIONS)


@contextmanager
def render_options_context(options: RenderOptions) -> Iterator[None]:
    """Context manager for temporary default options.

    Example:
        >>> with render_options_context(RenderOptions(format="none")):
        ...     render(element("a", [element("b")]))
        '<a><b/></a>'

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        options even if an exception is raised.

    """
    previous = _render_options.get()
    _render_options.set(options)
    try:
        yield
    finally:
        _render_options.set(previous)


def resolve_options(
    options: RenderOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> RenderOptions:
    """Combine explicit options, keyword overrides and the context default.

    Args:
        options: RenderOptions, a mapping of option names, or None for the
            context default
        **overrides: Individual option values applied last

    Returns:
        The effective RenderOptions
    """
    if options is None:
        base = get_render_options()
    elif isinstance(options, RenderOptions):
        base = options
    elif isinstance(options, Mapping):
        base = RenderOptions.from_dict(options)
    else:
        raise OptionError("options", f"expected RenderOptions or a mapping, got {options!r}")
    return base.replace(**overrides)


__all__ = [
    "Format",
    "RenderOptions",
    "get_render_options",
    "render_options_context",
    "reset_render_options",
    "resolve_options",
    "set_render_options",
]
