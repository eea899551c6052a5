"""Exception classes for nesfab-mode.

Provides standardized exceptions for error handling throughout nesfab-mode.
"""

from __future__ import annotations


class NesfabModeError(Exception):
    """Base exception for all nesfab-mode errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidLineIndex(NesfabModeError, IndexError):
    """Line index outside the buffer.

    Raised by the line classifier. The indent calculator recovers from it
    locally and answers with the root-case indentation.
    """

    def __init__(self, line_index: int, line_count: int) -> None:
        """Initialize with the offending index.

        Args:
            line_index: Requested line index (0-indexed)
            line_count: Number of lines in the buffer
        """
        self.line_index = line_index
        self.line_count = line_count
        super().__init__(f"line index {line_index} out of range for buffer of {line_count} lines")


class ConfigError(NesfabModeError):
    """Invalid indentation configuration."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"Config '{field_name}': {message}")
