"""Keyword and type sets for the NESFab language.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from nesfab_mode.keywords import BLOCK_OPENERS

    if token in BLOCK_OPENERS:  # O(1) lookup
        ...
"""

from __future__ import annotations

# Leading tokens that open an indented block
BLOCK_OPENERS: frozenset[str] = frozenset(
    {
        "asm",
        "case",
        "data",
        "default",
        "do",
        "else",
        "fn",
        "for",
        "if",
        "irq",
        "label",
        "mode",
        "nmi",
        "omni",
        "struct",
        "switch",
        "vars",
        "while",
    }
)

# Continuation keywords: (peers they align with, openers that end the search,
# peers that close their chain unless another peer follows on the same line)
CONTINUATION_PEERS: dict[str, tuple[frozenset[str], frozenset[str], frozenset[str]]] = {
    "else": (
        frozenset({"if", "else"}),
        frozenset({"fn", "mode", "nmi", "irq", "struct", "vars", "data", "omni", "asm"}),
        frozenset({"else"}),
    ),
    "case": (frozenset({"case", "default"}), frozenset({"switch"}), frozenset()),
    "default": (frozenset({"case", "default"}), frozenset({"switch"}), frozenset()),
}

KEYWORDS: frozenset[str] = frozenset(
    {
        "audio",
        "break",
        "charmap",
        "chrrom",
        "continue",
        "ct",
        "employs",
        "fence",
        "file",
        "goto",
        "len",
        "nmi_counter",
        "preserves",
        "read",
        "ready",
        "return",
        "sizeof",
        "state",
        "stows",
        "swap",
        "system",
        "write",
    }
)

TYPES: frozenset[str] = frozenset(
    {
        "AA",
        "Bool",
        "CC",
        "F",
        "FF",
        "FFF",
        "Fn",
        "Int",
        "MM",
        "PP",
        "Real",
        "S",
        "SS",
        "SSS",
        "SSSS",
        "U",
        "UU",
        "UUU",
        "UUUU",
        "Void",
    }
)

CONSTANTS: frozenset[str] = frozenset({"false", "nullptr", "true"})

# Line/block comment markers recognised at the start of a line
LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"

STRING_DELIMITERS: frozenset[str] = frozenset("\"'`")
ESCAPE_CHAR = "\\"

ANNOTATION_MARKER = ":"
