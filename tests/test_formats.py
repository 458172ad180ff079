"""Tests for line-break and indentation strategies."""

from xmlbuilder.config import Format, RenderOptions
from xmlbuilder.formats import INDENTED, NONE, IndentedFormat, NoFormat, formatter_for


class TestIndentedFormat:
    """Newline and per-depth indentation."""

    def test_line_break(self) -> None:
        assert IndentedFormat().line_break(RenderOptions()) == "\n"

    def test_indentation_scales_with_depth(self) -> None:
        options = RenderOptions()
        assert INDENTED.indentation(0, options) == ""
        assert INDENTED.indentation(1, options) == "  "
        assert INDENTED.indentation(3, options) == "      "

    def test_custom_whitespace(self) -> None:
        assert INDENTED.indentation(2, RenderOptions(whitespace="\t")) == "\t\t"

    def test_line_break_override(self) -> None:
        assert INDENTED.line_break(RenderOptions(line_break="\r\n")) == "\r\n"


class TestNoFormat:
    """Compact output."""

    def test_no_line_break(self) -> None:
        assert NoFormat().line_break(RenderOptions(format="none")) == ""

    def test_no_indentation_at_any_depth(self) -> None:
        options = RenderOptions(format="none", whitespace="    ")
        assert all(NONE.indentation(depth, options) == "" for depth in range(5))

    def test_line_break_override(self) -> None:
        assert NONE.line_break(RenderOptions(format="none", line_break=" ")) == " "


class TestFormatterFor:
    """Strategy selection."""

    def test_default_is_indented(self) -> None:
        assert formatter_for(RenderOptions()) is INDENTED

    def test_none(self) -> None:
        assert formatter_for(RenderOptions(format=Format.NONE)) is NONE
        assert formatter_for(RenderOptions(format="none")) is NONE
