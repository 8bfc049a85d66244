"""Structured parsing/format errors.

Malformed page content is never an error (cells default, rows get dropped);
these cover broken column mappings and unreadable snapshot files.
"""

from __future__ import annotations
from typing import Any


class ParsingError(Exception):
    """Base class for parsing related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ColumnMismatchError(ParsingError):
    """Raised when a column mapping does not fit the table it describes."""


class SnapshotFormatError(ParsingError):
    """Raised when a persisted snapshot or index lacks required keys."""
