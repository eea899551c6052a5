"""Backward block scanner.

Walks backward from a line to find the nearest preceding source line and
the nearest preceding block opener. Both walks are bounded by the start of
the buffer and never wrap.
"""

from __future__ import annotations

from collections.abc import Iterator

from nesfab_mode.buffer import SourceBuffer
from nesfab_mode.comments import CommentOracle
from nesfab_mode.indent.classify import LineKind, classify, first_token


def previous_source_line(
    buffer: SourceBuffer, from_index: int, oracle: CommentOracle
) -> int | None:
    """Find the nearest source line strictly before ``from_index``.

    Blank and comment-only lines are skipped. An index past the end of the
    buffer scans from the last line.

    Returns:
        Line index, or None when the start of the buffer is reached.
    """
    if from_index <= 0:
        return None

    index = min(from_index, buffer.line_count) - 1
    while index >= 0:
        if classify(buffer, index, oracle) is LineKind.SOURCE:
            return index
        index -= 1
    return None


def iter_block_openers(
    buffer: SourceBuffer,
    from_index: int,
    oracle: CommentOracle,
    openers: frozenset[str],
) -> Iterator[int]:
    """Yield block opener lines walking backward from ``from_index``.

    Lazily; stopping early costs nothing for the lines not yet visited.
    """
    index = previous_source_line(buffer, from_index, oracle)
    while index is not None:
        if first_token(buffer, index) in openers:
            yield index
        index = previous_source_line(buffer, index, oracle)


def previous_block_opener(
    buffer: SourceBuffer,
    from_index: int,
    oracle: CommentOracle,
    openers: frozenset[str],
) -> int | None:
    """Find the nearest block opener line before ``from_index``.

    Returns:
        Line index, or None for the root case (no enclosing block).
    """
    return next(iter_block_openers(buffer, from_index, oracle, openers), None)
