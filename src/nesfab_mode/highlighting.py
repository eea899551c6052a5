"""Syntax highlighting for NESFab source via Pygments.

Provides a Pygments ``RegexLexer`` for NESFab and a small classification
layer mapping Pygments token types onto editor display categories.

Usage:
    from nesfab_mode.highlighting import NesfabLexer, classify_tokens, highlight

    html = highlight("fn main()\\n    return 0")
    for category, text in classify_tokens("U x = $10"):
        ...

The lexer is also registered as a Pygments plugin, so
``pygmentize -l nesfab file.fab`` works once the package is installed.
"""

from __future__ import annotations

from pygments import highlight as _pygments_highlight
from pygments.formatter import Formatter
from pygments.formatters import HtmlFormatter
from pygments.lexer import RegexLexer, bygroups, words
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Text,
    Whitespace,
    _TokenType,
)

from nesfab_mode.keywords import BLOCK_OPENERS, CONSTANTS, KEYWORDS, TYPES


class NesfabLexer(RegexLexer):
    """Pygments lexer for the NESFab programming language."""

    name = "NESFab"
    aliases = ["nesfab", "fab"]
    filenames = ["*.fab"]
    mimetypes = ["text/x-nesfab"]

    tokens = {
        "root": [
            # Annotations / labels at line start
            (r"(^[ \t]*)(:)([ \t]*)([A-Za-z_]\w*)", bygroups(Whitespace, Punctuation, Whitespace, Name.Label)),
            (r"\n", Whitespace),
            (r"[ \t\f\v\r]+", Whitespace),
            # Comments
            (r"//.*?$", Comment.Single),
            (r"/\*", Comment.Multiline, "comment"),
            # Strings
            (r'"', String.Double, "dq-string"),
            (r"'", String.Single, "sq-string"),
            (r"`", String.Backtick, "bt-string"),
            # Keywords
            (words(tuple(sorted(BLOCK_OPENERS)), prefix=r"\b", suffix=r"\b"), Keyword),
            (words(tuple(sorted(KEYWORDS)), prefix=r"\b", suffix=r"\b"), Keyword),
            (words(tuple(sorted(CONSTANTS)), prefix=r"\b", suffix=r"\b"), Keyword.Constant),
            # Types, including fixed-point spellings like UU.F or SS.FF
            (words(tuple(sorted(TYPES, key=len, reverse=True)), prefix=r"\b", suffix=r"(\.[F]+)?\b"), Keyword.Type),
            # Group paths: /name
            (r"/[A-Za-z_]\w*", Name.Namespace),
            # Numbers
            (r"\$[0-9A-Fa-f]+(\.[0-9A-Fa-f]+)?", Number.Hex),
            (r"0[xX][0-9A-Fa-f]+(\.[0-9A-Fa-f]+)?", Number.Hex),
            (r"%[01]+(\.[01]+)?", Number.Bin),
            (r"0[bB][01]+(\.[01]+)?", Number.Bin),
            (r"[0-9]+\.[0-9]+", Number.Float),
            (r"[0-9]+", Number.Integer),
            # Identifiers
            (r"[A-Za-z_]\w*", Name),
            # Operators and punctuation
            (r"->|<<=|>>=|==|!=|<=|>=|&&|\|\||<<|>>|\+=|-=|&=|\|=|\^=|\+\+|--", Operator),
            (r"[-+*/%&|^~!<>=@.]", Operator),
            (r"[()\[\]{},;:]", Punctuation),
            (r".", Text),
        ],
        "comment": [
            (r"[^*/]+", Comment.Multiline),
            (r"/\*", Comment.Multiline, "#push"),
            (r"\*/", Comment.Multiline, "#pop"),
            (r"[*/]", Comment.Multiline),
        ],
        "dq-string": [
            (r'\\.', String.Escape),
            (r'"', String.Double, "#pop"),
            (r"\n", Whitespace, "#pop"),
            (r'[^"\\\n]+', String.Double),
        ],
        "sq-string": [
            (r"\\.", String.Escape),
            (r"'", String.Single, "#pop"),
            (r"\n", Whitespace, "#pop"),
            (r"[^'\\\n]+", String.Single),
        ],
        "bt-string": [
            (r"\\.", String.Escape),
            (r"`", String.Backtick, "#pop"),
            (r"\n", Whitespace, "#pop"),
            (r"[^`\\\n]+", String.Backtick),
        ],
    }


# Most specific first: Keyword.Type and Keyword.Constant before Keyword
_CATEGORIES: tuple[tuple[_TokenType, str], ...] = (
    (Comment, "comment"),
    (String, "string"),
    (Keyword.Type, "type"),
    (Keyword.Constant, "constant"),
    (Keyword, "keyword"),
    (Number, "number"),
    (Name.Namespace, "group"),
    (Name.Label, "label"),
    (Name, "identifier"),
    (Operator, "operator"),
    (Punctuation, "punctuation"),
    (Whitespace, "whitespace"),
)


def token_category(token_type: _TokenType) -> str:
    """Map a Pygments token type to a display category name."""
    for parent, category in _CATEGORIES:
        if token_type in parent:
            return category
    return "text"


def classify_tokens(code: str) -> list[tuple[str, str]]:
    """Split code into ``(category, text)`` pairs for colorization.

    Adjacent tokens of the same category are merged. Concatenating the
    texts reproduces the input, apart from the trailing newline Pygments
    adds when the input lacks one.
    """
    result: list[tuple[str, str]] = []
    for token_type, value in NesfabLexer(stripnl=False).get_tokens(code):
        if not value:
            continue
        category = token_category(token_type)
        if result and result[-1][0] == category:
            result[-1] = (category, result[-1][1] + value)
        else:
            result.append((category, value))
    return result


def highlight(code: str, formatter: Formatter | None = None) -> str:
    """Highlight NESFab code.

    Args:
        code: Source code to highlight
        formatter: Pygments formatter; HTML with CSS classes when None

    Returns:
        Formatted output from the formatter.
    """
    if formatter is None:
        formatter = HtmlFormatter(cssclass="highlight nesfab")
    result: str = _pygments_highlight(code, NesfabLexer(), formatter)
    return result


__all__ = [
    "NesfabLexer",
    "classify_tokens",
    "highlight",
    "token_category",
]
