"""
nesfab-mode: editor tooling for the NESFab language

Syntax highlighting through Pygments and a line-based indentation engine
that infers a line's indentation from the block openers above it, without
parsing.

Quick Start:
    >>> from nesfab_mode import Indenter
    >>> Indenter().column_for(["fn main()", "x = 1"], 1)
    4

    >>> # Repeated requests dedent one unit at a time
    >>> from nesfab_mode import RequestKind
    >>> Indenter().column_for(["fn main()", "        x = 1"], 1, RequestKind.REPEAT)
    4

Configuration:
    >>> from nesfab_mode import IndentConfig, indent_config_context
    >>> with indent_config_context(IndentConfig(indent_width=2)):
    ...     Indenter().column_for(["if x", "y"], 1)
    2

Installation:
    pip install nesfab-mode
"""

from nesfab_mode.buffer import SourceBuffer
from nesfab_mode.comments import CommentOracle, CommentSpans, scan_comments
from nesfab_mode.config import (
    Continuation,
    IndentConfig,
    get_indent_config,
    indent_config_context,
    reset_indent_config,
    set_indent_config,
)
from nesfab_mode.errors import ConfigError, InvalidLineIndex, NesfabModeError
from nesfab_mode.host import Indenter, RepeatTracker, apply_indent
from nesfab_mode.indent import (
    IndentRequest,
    LineKind,
    RequestKind,
    classify,
    compute_indent,
    first_token,
    is_annotation_line,
    previous_block_opener,
    previous_source_line,
)
from nesfab_mode.keywords import BLOCK_OPENERS

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 grouped by category
    "__version__",
    # Buffer and comments
    "SourceBuffer",
    "CommentOracle",
    "CommentSpans",
    "scan_comments",
    # Indentation engine
    "BLOCK_OPENERS",
    "IndentRequest",
    "LineKind",
    "RequestKind",
    "classify",
    "compute_indent",
    "first_token",
    "is_annotation_line",
    "previous_block_opener",
    "previous_source_line",
    # Host helpers
    "Indenter",
    "RepeatTracker",
    "apply_indent",
    # Configuration (ContextVar-based)
    "Continuation",
    "IndentConfig",
    "get_indent_config",
    "set_indent_config",
    "reset_indent_config",
    "indent_config_context",
    # Errors
    "ConfigError",
    "InvalidLineIndex",
    "NesfabModeError",
]
