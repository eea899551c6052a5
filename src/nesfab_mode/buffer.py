"""Immutable line buffer consumed by the indentation engine.

Thread Safety:
SourceBuffer is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SourceBuffer:
    """Ordered, 0-indexed sequence of text lines.

    Lines never contain the ``\\n`` separator. Offsets refer to
    :attr:`text`, the lines joined by ``\\n``.

    Usage:
        >>> buf = SourceBuffer.from_text("fn main()\\n    x = 1")
        >>> buf.line_count
        2
        >>> buf.line_offset(1)
        10

    """

    lines: tuple[str, ...]
    # Cache field - excluded from repr and comparison
    _offsets: tuple[int, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        offsets = []
        offset = 0
        for line in self.lines:
            offsets.append(offset)
            offset += len(line) + 1
        object.__setattr__(self, "_offsets", tuple(offsets))

    @classmethod
    def from_text(cls, text: str) -> SourceBuffer:
        """Split text on newlines; a trailing newline yields a final empty line."""
        return cls(tuple(text.split("\n")))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> SourceBuffer:
        """Build from any iterable of lines, dropping trailing ``\\r``/``\\n``."""
        return cls(tuple(line.rstrip("\r\n") for line in lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def in_range(self, line_index: int) -> bool:
        return 0 <= line_index < len(self.lines)

    def line(self, line_index: int) -> str:
        """Return the line at ``line_index`` (no negative indexing)."""
        if not self.in_range(line_index):
            raise IndexError(line_index)
        return self.lines[line_index]

    def line_offset(self, line_index: int) -> int:
        """Absolute offset of the first character of a line in :attr:`text`."""
        if not self.in_range(line_index):
            raise IndexError(line_index)
        return self._offsets[line_index]

    def indentation(self, line_index: int, tab_width: int = 8) -> int:
        """Column of the first non-whitespace character of a line.

        Spaces count as 1, tabs advance to the next multiple of ``tab_width``.
        A whitespace-only line measures the whole run.
        """
        return calc_indent(self.line(line_index), tab_width)[0]

    def replace_line(self, line_index: int, new_line: str) -> SourceBuffer:
        """Return a copy with one line replaced."""
        if not self.in_range(line_index):
            raise IndexError(line_index)
        lines = list(self.lines)
        lines[line_index] = new_line
        return SourceBuffer(tuple(lines))


def calc_indent(line: str, tab_width: int = 8) -> tuple[int, int]:
    """Calculate indent level and content start position.

    Args:
        line: Line content
        tab_width: Column stop distance for tabs

    Returns:
        (indent_columns, content_start_index)
    """
    indent = 0
    pos = 0
    line_len = len(line)
    while pos < line_len:
        char = line[pos]
        if char == " ":
            indent += 1
            pos += 1
        elif char == "\t":
            indent += tab_width - (indent % tab_width)
            pos += 1
        elif char in "\f\v\r":
            pos += 1
        elif char.isspace():
            # Unicode spaces (no-break space and friends) are one column wide
            indent += 1
            pos += 1
        else:
            break
    return indent, pos
