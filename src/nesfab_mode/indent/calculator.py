"""Indent calculator: the decision procedure of the indentation engine.

Given a line, the backward scan results and the request kind, computes the
target indentation column. Each call is a pure function of its arguments
and the active configuration; nothing persists between calls.

Decision order:
1. Root: no enclosing opener -> 0
2. Annotation (``:`` line): align with the enclosing opener
3. Continuation (``else``, ``case``, ``default``): align with a peer opener
4. Nested: enclosing opener indentation + indent width

A REPEAT request instead dedents the line's current indentation by one
unit, falling back to the structural answer once that would go negative.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto

from nesfab_mode.buffer import SourceBuffer
from nesfab_mode.comments import CommentOracle
from nesfab_mode.config import Continuation, get_indent_config
from nesfab_mode.errors import ConfigError, InvalidLineIndex
from nesfab_mode.indent.classify import first_token, is_annotation_line
from nesfab_mode.indent.scan import iter_block_openers, previous_block_opener
from nesfab_mode.utils.logger import get_logger

logger = get_logger(__name__)


class RequestKind(Enum):
    """Whether an indent request repeats the previous one on the same line."""

    FRESH = auto()
    REPEAT = auto()


@dataclass(frozen=True, slots=True)
class IndentRequest:
    """A single "what indentation should this line have?" question.

    Attributes:
        buffer: Buffer snapshot
        line_index: 0-indexed line to indent
        indent_width: Columns per nesting level (positive)
        kind: FRESH or REPEAT

    """

    buffer: SourceBuffer
    line_index: int
    indent_width: int
    kind: RequestKind = RequestKind.FRESH

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise ConfigError("indent_width", f"must be a positive integer, got {self.indent_width!r}")

    @property
    def repeat(self) -> bool:
        return self.kind is RequestKind.REPEAT


def compute_indent(
    request: IndentRequest,
    oracle: CommentOracle,
    openers: frozenset[str] | None = None,
    *,
    tab_width: int | None = None,
    continuations: Mapping[str, Continuation] | None = None,
) -> int:
    """Compute the indentation column for ``request.line_index``.

    Args:
        request: The indent request
        oracle: Comment oracle for the buffer
        openers: Block opener tokens (defaults to the active config)
        tab_width: Tab stop distance (defaults to the active config)
        continuations: Continuation rules (defaults to the active config);
            pass an empty mapping to disable peer alignment

    Returns:
        Non-negative column count. Out-of-range lines get 0.

    Raises:
        ConfigError: If an explicit ``tab_width`` is not positive.
    """
    config = get_indent_config()
    if openers is None:
        openers = config.block_openers
    if tab_width is None:
        tab_width = config.tab_width
    if continuations is None:
        continuations = config.continuations
    if tab_width < 1:
        raise ConfigError("tab_width", f"must be a positive integer, got {tab_width!r}")

    buffer = request.buffer
    if not buffer.in_range(request.line_index):
        logger.debug(
            "line %d outside buffer of %d lines; using root indentation",
            request.line_index,
            buffer.line_count,
        )
        return 0

    try:
        if request.repeat:
            candidate = buffer.indentation(request.line_index, tab_width) - request.indent_width
            if candidate >= 0:
                return candidate
        return _base_indent(request, oracle, openers, tab_width, continuations)
    except InvalidLineIndex as exc:
        logger.debug("%s; using root indentation", exc)
        return 0


def _base_indent(
    request: IndentRequest,
    oracle: CommentOracle,
    openers: frozenset[str],
    tab_width: int,
    continuations: Mapping[str, Continuation],
) -> int:
    """Structural indentation, ignoring the line's current indentation."""
    buffer = request.buffer
    line_index = request.line_index

    opener = previous_block_opener(buffer, line_index, oracle, openers)
    if opener is None:
        return 0

    opener_indent = buffer.indentation(opener, tab_width)
    if is_annotation_line(buffer, line_index):
        return opener_indent

    rule = continuations.get(first_token(buffer, line_index))
    if rule is not None:
        peer = _find_peer(buffer, line_index, oracle, openers, tab_width, rule)
        if peer is not None:
            return buffer.indentation(peer, tab_width)

    return opener_indent + request.indent_width


def _find_peer(
    buffer: SourceBuffer,
    line_index: int,
    oracle: CommentOracle,
    openers: frozenset[str],
    tab_width: int,
    rule: Continuation,
) -> int | None:
    """Walk enclosing openers outward looking for a line to align with.

    The walk only moves outward: a peer no shallower than every opener
    already passed belongs to a sibling block and is ignored. A terminal
    peer (plain ``else``) has closed its chain and only lowers the ceiling.
    """
    ceiling: int | None = None
    for index in iter_block_openers(buffer, line_index, oracle, openers):
        token = first_token(buffer, index)
        indent = buffer.indentation(index, tab_width)
        if _continues_chain(buffer, index, token, rule) and (ceiling is None or indent < ceiling):
            return index
        if token in rule.stops:
            return None
        ceiling = indent if ceiling is None else min(ceiling, indent)
    return None


def _continues_chain(buffer: SourceBuffer, index: int, token: str, rule: Continuation) -> bool:
    """True if the opener at ``index`` can still take the continuation."""
    if token not in rule.peers:
        return False
    if token not in rule.terminal:
        return True
    # ``else if``: the chain goes on when a peer follows the terminal token
    words = buffer.lines[index].split(None, 2)
    return len(words) > 1 and words[1] in rule.peers
