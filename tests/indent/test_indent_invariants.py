"""Property-based tests for indentation engine invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the buffer, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from nesfab_mode.buffer import SourceBuffer
from nesfab_mode.comments import CommentSpans
from nesfab_mode.indent import IndentRequest, RequestKind, compute_indent
from nesfab_mode.keywords import BLOCK_OPENERS

WIDTH = 4
OPENERS = sorted(BLOCK_OPENERS)

statements = st.sampled_from(["x = 1", "foo()", "return", "U y = $10", "break", "a += b"])
openers = st.sampled_from(OPENERS).map(lambda kw: f"{kw} cond")
fillers = st.sampled_from(["", "   ", "// note", "    // note", "/* block */", "/* a", "b */"])
levels = st.integers(min_value=0, max_value=4)


def indented(level: int, text: str) -> str:
    return " " * (level * WIDTH) + text


def compute(
    lines: list[str],
    index: int,
    kind: RequestKind = RequestKind.FRESH,
    *,
    continuations: dict | None = None,
) -> int:
    buf = SourceBuffer(tuple(lines))
    return compute_indent(
        IndentRequest(buf, index, WIDTH, kind),
        CommentSpans.for_buffer(buf),
        BLOCK_OPENERS,
        tab_width=8,
        continuations=continuations,
    )


def balanced_fillers(items: list[str]) -> list[str]:
    """Drop unmatched block-comment halves so fillers never swallow code."""
    result = []
    open_comment = False
    for item in items:
        if item == "/* a":
            if open_comment:
                continue
            open_comment = True
        elif item == "b */":
            if not open_comment:
                continue
            open_comment = False
        result.append(item)
    if open_comment:
        result.append("b */")
    return result


class TestRobustness:
    """The engine always answers."""

    @given(st.lists(st.text(max_size=40), max_size=12), st.integers(-3, 15), st.booleans())
    @settings(max_examples=200)
    def test_never_negative_never_raises(self, lines: list[str], index: int, repeat: bool) -> None:
        lines = [line.replace("\n", " ") for line in lines] or [""]
        kind = RequestKind.REPEAT if repeat else RequestKind.FRESH
        assert compute(lines, index, kind) >= 0

    @given(st.lists(st.text(alphabet="/*\"'` \tfnif:\\x", max_size=20), min_size=1, max_size=10))
    @settings(max_examples=200)
    def test_comment_and_string_soup(self, lines: list[str]) -> None:
        for index in range(len(lines)):
            assert compute(lines, index) >= 0


class TestStructuralInvariants:
    """Invariants of the non-repeat path."""

    @given(st.lists(st.tuples(levels, statements), min_size=1, max_size=10))
    @settings(max_examples=100)
    def test_top_level_is_zero(self, rows: list[tuple[int, str]]) -> None:
        lines = [indented(level, text) for level, text in rows]
        for index in range(len(lines)):
            assert compute(lines, index) == 0

    @given(levels, openers, levels, statements)
    @settings(max_examples=200)
    def test_line_after_opener_nests(
        self, opener_level: int, opener: str, level: int, stmt: str
    ) -> None:
        lines = ["x = 0", indented(opener_level, opener), indented(level, stmt)]
        assert compute(lines, 2, continuations={}) == opener_level * WIDTH + WIDTH

    @given(levels, openers, levels, st.sampled_from([": loop", ":attr", ": label x"]))
    @settings(max_examples=100)
    def test_annotation_aligns_with_opener(
        self, opener_level: int, opener: str, level: int, annotation: str
    ) -> None:
        lines = [indented(opener_level, opener), indented(level, annotation)]
        assert compute(lines, 1) == opener_level * WIDTH

    @given(st.lists(st.one_of(statements, openers, fillers), min_size=1, max_size=12))
    @settings(max_examples=100)
    def test_idempotent(self, lines: list[str]) -> None:
        for index in range(len(lines)):
            assert compute(lines, index) == compute(lines, index)

    @given(levels, openers, st.lists(fillers, max_size=6), statements)
    @settings(max_examples=200)
    def test_fillers_are_transparent(
        self, opener_level: int, opener: str, filler: list[str], stmt: str
    ) -> None:
        head = [indented(opener_level, opener)]
        without = head + [stmt]
        with_fillers = head + balanced_fillers(filler) + [stmt]
        assert compute(without, len(without) - 1) == compute(with_fillers, len(with_fillers) - 1)


class TestRepeatInvariants:
    """Repeat requests step one unit left."""

    @given(st.integers(min_value=1, max_value=8), st.lists(st.one_of(statements, openers), max_size=6))
    @settings(max_examples=100)
    def test_steps_down_one_unit(self, k: int, above: list[str]) -> None:
        lines = above + [indented(k, "x = 1")]
        assert compute(lines, len(lines) - 1, RequestKind.REPEAT) == (k - 1) * WIDTH

    @given(st.lists(st.one_of(statements, openers), max_size=6))
    @settings(max_examples=100)
    def test_zero_falls_back_to_fresh(self, above: list[str]) -> None:
        lines = above + ["x = 1"]
        index = len(lines) - 1
        assert compute(lines, index, RequestKind.REPEAT) == compute(lines, index)
