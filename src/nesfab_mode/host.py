"""Host-side helpers for driving the indentation engine.

The engine itself only returns a column. Hosts still need to rewrite the
line's leading whitespace and to decide whether a request repeats the
previous one. Both live here, as explicit objects owned by the caller
rather than global editor state.

Usage:
    >>> from nesfab_mode.host import Indenter, RepeatTracker
    >>> indenter = Indenter()
    >>> tracker = RepeatTracker()
    >>> lines = ["fn main()", "x = 1"]
    >>> lines[1] = indenter.indent_line(lines, 1, tracker.kind_for(lines, 1))
    >>> tracker.record(lines, 1)
    >>> lines[1]
    '    x = 1'

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from nesfab_mode.buffer import SourceBuffer, calc_indent
from nesfab_mode.comments import CommentSpans
from nesfab_mode.config import IndentConfig, get_indent_config
from nesfab_mode.indent.calculator import IndentRequest, RequestKind, compute_indent
from nesfab_mode.utils.logger import get_logger

logger = get_logger(__name__)


def apply_indent(line: str, column: int, *, use_tabs: bool = False, tab_width: int = 8) -> str:
    """Replace the leading whitespace of ``line`` so its content starts at ``column``.

    Args:
        line: Line text (without newline)
        column: Target column, clamped to 0
        use_tabs: Fill with tabs first, then spaces
        tab_width: Tab stop distance when ``use_tabs`` is set

    Returns:
        The re-indented line. A whitespace-only line becomes just the indent.
    """
    column = max(column, 0)
    _, content_start = calc_indent(line, tab_width)
    if use_tabs:
        tabs, spaces = divmod(column, tab_width)
        prefix = "\t" * tabs + " " * spaces
    else:
        prefix = " " * column
    return prefix + line[content_start:]


def _as_buffer(lines: SourceBuffer | Iterable[str]) -> SourceBuffer:
    if isinstance(lines, SourceBuffer):
        return lines
    return SourceBuffer.from_lines(lines)


def _line_at(lines: SourceBuffer | Sequence[str], line_index: int) -> str:
    if isinstance(lines, SourceBuffer):
        return lines.line(line_index)
    return lines[line_index]


@dataclass(slots=True)
class RepeatTracker:
    """Caller-owned memory of the last indent request.

    A request is a repeat iff the previous request was for the same line
    and that line still holds the text the engine left there. Any edit to
    the line, or a request on another line, starts a fresh cycle.

    """

    _last_index: int | None = field(default=None, init=False)
    _last_text: str | None = field(default=None, init=False)

    def kind_for(self, lines: SourceBuffer | Sequence[str], line_index: int) -> RequestKind:
        """Decide the request kind for an indent request on ``line_index``."""
        if self._last_index != line_index or self._last_text is None:
            return RequestKind.FRESH
        if not 0 <= line_index < len(lines):
            return RequestKind.FRESH
        if _line_at(lines, line_index) != self._last_text:
            return RequestKind.FRESH
        return RequestKind.REPEAT

    def record(self, lines: SourceBuffer | Sequence[str], line_index: int) -> None:
        """Remember the line as it stands after the engine rewrote it."""
        if not 0 <= line_index < len(lines):
            self.reset()
            return
        self._last_index = line_index
        self._last_text = _line_at(lines, line_index)

    def reset(self) -> None:
        """Forget history; the next request is FRESH."""
        self._last_index = None
        self._last_text = None


class Indenter:
    """Facade binding the engine to an :class:`IndentConfig`.

    Builds the comment oracle for each buffer snapshot, so callers only
    deal with lines.

    Thread Safety:
        Holds only an immutable config; safe to share.

    """

    __slots__ = ("_config",)

    def __init__(self, config: IndentConfig | None = None) -> None:
        """Initialize the indenter.

        Args:
            config: Configuration to use; the active context config when None.
        """
        self._config = config

    @property
    def config(self) -> IndentConfig:
        return self._config if self._config is not None else get_indent_config()

    def column_for(
        self,
        lines: SourceBuffer | Iterable[str],
        line_index: int,
        kind: RequestKind = RequestKind.FRESH,
        *,
        oracle: CommentSpans | None = None,
    ) -> int:
        """Compute the target column for one line."""
        config = self.config
        buffer = _as_buffer(lines)
        if oracle is None:
            oracle = CommentSpans.for_buffer(buffer)
        request = IndentRequest(buffer, line_index, config.indent_width, kind)
        column = compute_indent(
            request,
            oracle,
            config.block_openers,
            tab_width=config.tab_width,
            continuations=config.continuations,
        )
        logger.debug("line %d (%s) -> column %d", line_index, kind.name, column)
        return column

    def indent_line(
        self,
        lines: SourceBuffer | Iterable[str],
        line_index: int,
        kind: RequestKind = RequestKind.FRESH,
    ) -> str:
        """Return ``lines[line_index]`` re-indented.

        Out-of-range indices return an empty string.
        """
        buffer = _as_buffer(lines)
        column = self.column_for(buffer, line_index, kind)
        if not buffer.in_range(line_index):
            return ""
        config = self.config
        return apply_indent(
            buffer.line(line_index),
            column,
            use_tabs=config.use_tabs,
            tab_width=config.tab_width,
        )

    def indent_region(
        self,
        lines: SourceBuffer | Iterable[str],
        start: int = 0,
        end: int | None = None,
    ) -> list[str]:
        """Re-indent lines ``start`` to ``end`` (exclusive) top to bottom.

        Each line is indented against the already re-indented lines above
        it. Blank lines inside the region are emptied.

        Returns:
            The full list of lines with the region rewritten.
        """
        buffer = _as_buffer(lines)
        if end is None or end > buffer.line_count:
            end = buffer.line_count
        start = max(start, 0)

        config = self.config
        for index in range(start, end):
            line = buffer.line(index)
            if not line.strip():
                buffer = buffer.replace_line(index, "")
                continue
            column = self.column_for(buffer, index)
            new_line = apply_indent(
                line, column, use_tabs=config.use_tabs, tab_width=config.tab_width
            )
            if new_line != line:
                buffer = buffer.replace_line(index, new_line)
        return list(buffer.lines)
