"""Tests for host helpers: whitespace rewriting, repeat tracking, Indenter."""

import pytest

from nesfab_mode import (
    IndentConfig,
    Indenter,
    RepeatTracker,
    RequestKind,
    SourceBuffer,
    apply_indent,
    indent_config_context,
)


class TestApplyIndent:
    @pytest.mark.parametrize(
        "line,column,expected",
        [
            ("x = 1", 4, "    x = 1"),
            ("        x = 1", 4, "    x = 1"),
            ("\tx", 2, "  x"),
            ("  x", 0, "x"),
            ("   ", 2, "  "),
            ("x", -3, "x"),
        ],
    )
    def test_spaces(self, line: str, column: int, expected: str) -> None:
        assert apply_indent(line, column) == expected

    def test_tabs(self) -> None:
        assert apply_indent("x", 10, use_tabs=True, tab_width=4) == "\t\t  x"

    def test_keeps_trailing_content(self) -> None:
        assert apply_indent("  if x  // c", 0) == "if x  // c"


class TestRepeatTracker:
    def test_first_request_is_fresh(self) -> None:
        assert RepeatTracker().kind_for(["x"], 0) is RequestKind.FRESH

    def test_same_unchanged_line_repeats(self) -> None:
        tracker = RepeatTracker()
        lines = ["fn f()", "    x"]
        tracker.record(lines, 1)
        assert tracker.kind_for(lines, 1) is RequestKind.REPEAT

    def test_other_line_is_fresh(self) -> None:
        tracker = RepeatTracker()
        lines = ["fn f()", "    x", "y"]
        tracker.record(lines, 1)
        assert tracker.kind_for(lines, 2) is RequestKind.FRESH

    def test_edited_line_is_fresh(self) -> None:
        tracker = RepeatTracker()
        lines = ["fn f()", "    x"]
        tracker.record(lines, 1)
        lines[1] = "    xy"
        assert tracker.kind_for(lines, 1) is RequestKind.FRESH

    def test_reset(self) -> None:
        tracker = RepeatTracker()
        lines = ["x"]
        tracker.record(lines, 0)
        tracker.reset()
        assert tracker.kind_for(lines, 0) is RequestKind.FRESH

    def test_out_of_range(self) -> None:
        tracker = RepeatTracker()
        tracker.record(["x"], 0)
        tracker.record(["x"], 5)
        assert tracker.kind_for(["x"], 0) is RequestKind.FRESH
        assert tracker.kind_for(["x"], 5) is RequestKind.FRESH

    def test_accepts_source_buffer(self) -> None:
        tracker = RepeatTracker()
        buf = SourceBuffer(("a", "b"))
        tracker.record(buf, 1)
        assert tracker.kind_for(buf, 1) is RequestKind.REPEAT


class TestIndenter:
    def test_column_for(self) -> None:
        assert Indenter().column_for(["fn main()", "x"], 1) == 4

    def test_explicit_config(self) -> None:
        indenter = Indenter(IndentConfig(indent_width=2))
        assert indenter.column_for(["fn main()", "x"], 1) == 2

    def test_context_config(self) -> None:
        indenter = Indenter()
        with indent_config_context(IndentConfig(indent_width=3)):
            assert indenter.column_for(["fn main()", "x"], 1) == 3

    def test_else_closing_outer_if(self) -> None:
        lines = [
            "fn f()",
            "    if a",
            "        if b",
            "            x",
            "        else",
            "            y",
            "else",
        ]
        assert Indenter().column_for(lines, 6) == 4

    def test_indent_line(self) -> None:
        assert Indenter().indent_line(["if x", "y"], 1) == "    y"

    def test_indent_line_with_tabs(self) -> None:
        indenter = Indenter(IndentConfig(indent_width=4, tab_width=4, use_tabs=True))
        assert indenter.indent_line(["fn f()", "    if x", "y"], 2) == "\t\ty"

    def test_indent_line_out_of_range(self) -> None:
        assert Indenter().indent_line(["x"], 4) == ""

    def test_progressive_dedent_cycle(self) -> None:
        """Repeated requests walk the line left, then wrap to structure."""
        indenter = Indenter()
        tracker = RepeatTracker()
        lines = ["fn main()", "    if x", "            y"]
        seen = []
        for _ in range(5):
            kind = tracker.kind_for(lines, 2)
            lines[2] = indenter.indent_line(lines, 2, kind)
            tracker.record(lines, 2)
            seen.append(len(lines[2]) - len(lines[2].lstrip()))
        assert seen == [8, 4, 0, 8, 4]

    def test_indent_region(self) -> None:
        source = [
            "fn main()",
            "if x",
            "// comment",
            "y = 1",
            "   ",
            "else",
            "y = 2",
            ": label",
            "z",
        ]
        assert Indenter().indent_region(source) == [
            "fn main()",
            "    if x",
            "        // comment",
            "        y = 1",
            "",
            "    else",
            "        y = 2",
            "    : label",
            "        z",
        ]

    def test_indent_region_partial(self) -> None:
        source = ["fn main()", "x", "y"]
        assert Indenter().indent_region(source, 2) == ["fn main()", "x", "    y"]
