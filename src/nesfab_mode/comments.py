"""Comment span scanner for NESFab source.

Implements the comment oracle consumed by the line classifier. The scanner
walks the text once as a small state machine:

- ``//`` starts a line comment extending to end of line
- ``/*`` starts a block comment ending at the matching ``*/``; block
  comments nest
- ``"``, ``'`` and `````` delimit strings with ``\\`` escapes; comment
  markers inside strings are ignored, and a string never spans lines

No regex. O(n) in the length of the text.

Thread Safety:
CommentSpans is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

from nesfab_mode.keywords import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    ESCAPE_CHAR,
    LINE_COMMENT,
    STRING_DELIMITERS,
)

if TYPE_CHECKING:
    from nesfab_mode.buffer import SourceBuffer


class CommentOracle(Protocol):
    """Answers whether a character position lies inside a comment.

    Positions are absolute offsets into ``SourceBuffer.text``.
    """

    def is_inside_comment(self, position: int) -> bool: ...


class ScanState(Enum):
    """Scanner states."""

    CODE = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    STRING = auto()


@dataclass(frozen=True, slots=True)
class CommentSpans:
    """Sorted, non-overlapping half-open ``(start, end)`` comment spans.

    Implements :class:`CommentOracle` with binary search.

    Usage:
        >>> spans = scan_comments("x = 1 // one")
        >>> spans.is_inside_comment(8)
        True
        >>> spans.is_inside_comment(2)
        False

    """

    spans: tuple[tuple[int, int], ...] = ()

    @classmethod
    def for_buffer(cls, buffer: SourceBuffer) -> CommentSpans:
        """Scan a whole buffer."""
        return scan_comments(buffer.text)

    def is_inside_comment(self, position: int) -> bool:
        if position < 0 or not self.spans:
            return False
        idx = bisect_right(self.spans, (position, float("inf"))) - 1
        if idx < 0:
            return False
        start, end = self.spans[idx]
        return start <= position < end

    def __len__(self) -> int:
        return len(self.spans)


def scan_comments(text: str) -> CommentSpans:
    """Scan text and return every comment span, delimiters included.

    An unterminated block comment extends to end of text.
    """
    spans: list[tuple[int, int]] = []
    text_len = len(text)
    state = ScanState.CODE
    pos = 0
    span_start = 0
    depth = 0
    quote = ""

    while pos < text_len:
        char = text[pos]

        if state is ScanState.CODE:
            if text.startswith(LINE_COMMENT, pos):
                state = ScanState.LINE_COMMENT
                span_start = pos
                pos += len(LINE_COMMENT)
            elif text.startswith(BLOCK_COMMENT_OPEN, pos):
                state = ScanState.BLOCK_COMMENT
                span_start = pos
                depth = 1
                pos += len(BLOCK_COMMENT_OPEN)
            elif char in STRING_DELIMITERS:
                state = ScanState.STRING
                quote = char
                pos += 1
            else:
                pos += 1

        elif state is ScanState.LINE_COMMENT:
            # Newline itself is not part of the comment
            line_end = text.find("\n", pos)
            if line_end == -1:
                line_end = text_len
            spans.append((span_start, line_end))
            state = ScanState.CODE
            pos = line_end

        elif state is ScanState.BLOCK_COMMENT:
            if text.startswith(BLOCK_COMMENT_OPEN, pos):
                depth += 1
                pos += len(BLOCK_COMMENT_OPEN)
            elif text.startswith(BLOCK_COMMENT_CLOSE, pos):
                depth -= 1
                pos += len(BLOCK_COMMENT_CLOSE)
                if depth == 0:
                    spans.append((span_start, pos))
                    state = ScanState.CODE
            else:
                pos += 1

        else:  # ScanState.STRING
            if char == ESCAPE_CHAR and text[pos + 1 : pos + 2] not in ("", "\n"):
                pos += 2
            elif char == quote or char == "\n":
                state = ScanState.CODE
                pos += 1
            else:
                pos += 1

    # Close comments still open at end of text
    if state is ScanState.LINE_COMMENT or state is ScanState.BLOCK_COMMENT:
        spans.append((span_start, text_len))

    return CommentSpans(tuple(spans))


__all__ = [
    "CommentOracle",
    "CommentSpans",
    "ScanState",
    "scan_comments",
]
