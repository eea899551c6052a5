"""Line classification for the indentation engine.

Classifiers are pure functions of (buffer, line index, comment oracle).
They never mutate the buffer and hold no state between calls.
"""

from __future__ import annotations

from enum import Enum, auto

from nesfab_mode.buffer import SourceBuffer, calc_indent
from nesfab_mode.comments import CommentOracle
from nesfab_mode.errors import InvalidLineIndex
from nesfab_mode.keywords import ANNOTATION_MARKER, BLOCK_COMMENT_OPEN, LINE_COMMENT


class LineKind(Enum):
    """Classification of a single line.

    - BLANK: only whitespace (also the beginning-of-buffer sentinel)
    - COMMENT_ONLY: nothing but comment text after the indentation
    - SOURCE: anything else
    """

    BLANK = auto()
    COMMENT_ONLY = auto()
    SOURCE = auto()


def _content(buffer: SourceBuffer, line_index: int) -> tuple[str, int]:
    """Return (line content after indentation, index of first content char)."""
    if not buffer.in_range(line_index):
        raise InvalidLineIndex(line_index, buffer.line_count)
    line = buffer.lines[line_index]
    _, content_start = calc_indent(line)
    return line[content_start:], content_start


def classify(buffer: SourceBuffer, line_index: int, oracle: CommentOracle) -> LineKind:
    """Classify a line as blank, comment-only or source.

    Args:
        buffer: Source buffer
        line_index: 0-indexed line; negative indices are the buffer-start
            sentinel and classify as BLANK
        oracle: Comment oracle for continuation lines of block comments

    Returns:
        LineKind for the line.

    Raises:
        InvalidLineIndex: If ``line_index`` is past the end of the buffer.
    """
    if line_index < 0:
        return LineKind.BLANK
    if line_index >= buffer.line_count:
        raise InvalidLineIndex(line_index, buffer.line_count)

    content, content_start = _content(buffer, line_index)
    if not content or content.isspace():
        return LineKind.BLANK

    if content.startswith(LINE_COMMENT) or content.startswith(BLOCK_COMMENT_OPEN):
        return LineKind.COMMENT_ONLY

    # Inside a block comment opened on an earlier line
    if oracle.is_inside_comment(buffer.line_offset(line_index) + content_start):
        return LineKind.COMMENT_ONLY

    return LineKind.SOURCE


def first_token(buffer: SourceBuffer, line_index: int) -> str:
    """Return the run of non-whitespace characters starting the line.

    Empty string for blank lines.
    """
    content, _ = _content(buffer, line_index)
    end = 0
    content_len = len(content)
    while end < content_len and not content[end].isspace():
        end += 1
    return content[:end]


def is_annotation_line(buffer: SourceBuffer, line_index: int) -> bool:
    """True iff the first non-whitespace character is ``:``."""
    content, _ = _content(buffer, line_index)
    return content.startswith(ANNOTATION_MARKER)
