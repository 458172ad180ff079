"""Tests for ContextVar-based render configuration.

Validates option validation, thread isolation and context manager behavior.
"""

from threading import Thread

import pytest

from xmlbuilder import (
    Format,
    RenderOptions,
    element,
    get_render_options,
    render,
    render_options_context,
    reset_render_options,
    resolve_options,
    set_render_options,
)
from xmlbuilder.errors import OptionError


class TestRenderOptionsDataclass:
    """Test RenderOptions frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Defaults match the indented UTF-8 output."""
        options = RenderOptions()
        assert options.format is Format.INDENTED
        assert options.encoding == "UTF-8"
        assert options.standalone is None
        assert options.whitespace == "  "
        assert options.line_break is None

    def test_immutability(self) -> None:
        """Options are frozen and cannot be modified."""
        options = RenderOptions()
        with pytest.raises(AttributeError):
            options.encoding = "latin-1"  # type: ignore[misc]

    def test_format_string_coerced(self) -> None:
        assert RenderOptions(format="none").format is Format.NONE

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(OptionError, match="format"):
            RenderOptions(format="pretty")

    def test_standalone_must_be_bool(self) -> None:
        with pytest.raises(OptionError, match="standalone"):
            RenderOptions(standalone="yes")  # type: ignore[arg-type]

    def test_encoding_must_be_str(self) -> None:
        with pytest.raises(OptionError, match="encoding"):
            RenderOptions(encoding=8)  # type: ignore[arg-type]

    def test_replace(self) -> None:
        options = RenderOptions().replace(format="none", encoding="ISO-8859-1")
        assert options.format is Format.NONE
        assert options.encoding == "ISO-8859-1"

    def test_replace_unknown_option(self) -> None:
        with pytest.raises(OptionError):
            RenderOptions().replace(indent=4)

    def test_replace_without_changes_returns_self(self) -> None:
        options = RenderOptions()
        assert options.replace() is options


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_render_options()

    def test_default_options(self) -> None:
        assert get_render_options() == RenderOptions()

    def test_set_and_get(self) -> None:
        options = RenderOptions(format="none")
        set_render_options(options)
        assert get_render_options() is options

    def test_reset(self) -> None:
        set_render_options(RenderOptions(format="none"))
        reset_render_options()
        assert get_render_options() == RenderOptions()

    def test_render_uses_context_default(self) -> None:
        set_render_options(RenderOptions(format="none"))
        assert render(element("a", [element("b")])) == "<a><b/></a>"

    def test_explicit_options_win(self) -> None:
        set_render_options(RenderOptions(format="none"))
        tree = element("a", [element("b")])
        assert render(tree, RenderOptions()) == "<a>\n  <b/>\n</a>"
        assert render(tree, format="indented") == "<a>\n  <b/>\n</a>"


class TestContextManager:
    """Test render_options_context."""

    def test_context_sets_and_restores(self) -> None:
        before = get_render_options()
        with render_options_context(RenderOptions(encoding="ISO-8859-1")):
            assert get_render_options().encoding == "ISO-8859-1"
        assert get_render_options() is before

    def test_context_restores_on_exception(self) -> None:
        before = get_render_options()
        with pytest.raises(RuntimeError):
            with render_options_context(RenderOptions(format="none")):
                raise RuntimeError("boom")
        assert get_render_options() is before

    def test_nested_contexts(self) -> None:
        with render_options_context(RenderOptions(format="none")):
            with render_options_context(RenderOptions(whitespace="\t")):
                assert get_render_options().whitespace == "\t"
                assert get_render_options().format is Format.INDENTED
            assert get_render_options().format is Format.NONE


class TestResolveOptions:
    """Combining explicit options, mappings and overrides."""

    def test_mapping(self) -> None:
        assert resolve_options({"format": "none"}).format is Format.NONE

    def test_overrides_applied_last(self) -> None:
        options = resolve_options(RenderOptions(format="none"), format="indented")
        assert options.format is Format.INDENTED

    def test_invalid_options_type(self) -> None:
        with pytest.raises(OptionError):
            resolve_options(["format", "none"])  # type: ignore[arg-type]


class TestThreadIsolation:
    """Context defaults do not leak between threads."""

    def test_thread_sees_default(self) -> None:
        seen: list[RenderOptions] = []
        with render_options_context(RenderOptions(format="none")):
            thread = Thread(target=lambda: seen.append(get_render_options()))
            thread.start()
            thread.join()
        assert seen == [RenderOptions()]

    def test_thread_changes_stay_local(self) -> None:
        def worker() -> None:
            set_render_options(RenderOptions(format="none"))

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert get_render_options() == RenderOptions()
