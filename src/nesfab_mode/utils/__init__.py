"""Utility modules for nesfab-mode.

Provides:
- logger: get_logger for logging
"""

from nesfab_mode.utils.logger import get_logger

__all__ = [
    "get_logger",
]
