"""
Exceptions raised at the edges of exprc.

The compilation pipeline itself never raises for malformed source; these
are only used when reading input and validating configuration.
"""

from pathlib import Path
from typing import Optional


class ExprcError(Exception):
    """Base exception for exprc."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SourceError(ExprcError):
    """Raised when a source file cannot be read."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(self._format_message(message, path))

    @staticmethod
    def _format_message(message: str, path: Optional[Path]) -> str:
        if path is not None:
            return f"{path}: {message}"
        return message
