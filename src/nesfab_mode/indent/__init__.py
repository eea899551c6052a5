"""Line-based indentation engine for NESFab source.

Answers one question per call, "what indentation should this line have?",
from line-level textual heuristics only. No parse tree, no persistent
indent stack.

Architecture:
indent/
├── __init__.py      # Re-exports
├── classify.py      # LineKind, classify, first_token, is_annotation_line
├── scan.py          # previous_source_line, previous_block_opener
└── calculator.py    # IndentRequest, RequestKind, compute_indent

Usage:
    >>> from nesfab_mode.buffer import SourceBuffer
    >>> from nesfab_mode.comments import CommentSpans
    >>> from nesfab_mode.indent import IndentRequest, compute_indent
    >>> buf = SourceBuffer(("fn foo()", "return 1"))
    >>> compute_indent(IndentRequest(buf, 1, 2), CommentSpans.for_buffer(buf))
    2

"""

from nesfab_mode.indent.calculator import IndentRequest, RequestKind, compute_indent
from nesfab_mode.indent.classify import LineKind, classify, first_token, is_annotation_line
from nesfab_mode.indent.scan import (
    iter_block_openers,
    previous_block_opener,
    previous_source_line,
)

__all__ = [
    "IndentRequest",
    "LineKind",
    "RequestKind",
    "classify",
    "compute_indent",
    "first_token",
    "is_annotation_line",
    "iter_block_openers",
    "previous_block_opener",
    "previous_source_line",
]
