"""Exception types raised by grid parsing and search."""

from __future__ import annotations

from typing import Any, Optional


class CrucibleError(Exception):
    """Base class for all errors raised by :mod:`crucible`."""


class ParseError(CrucibleError, ValueError):
    """Grid text is malformed (non-digit character or ragged rows)."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        if line is not None:
            location = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({location})"
        super().__init__(message)
        self.line = line
        self.column = column


class OutOfBoundsError(CrucibleError, IndexError):
    """A coordinate lies outside the grid."""


class NoPathError(CrucibleError, LookupError):
    """The frontier was exhausted before a valid goal state was popped."""

    def __init__(self, message: str, policy: Any = None, stats: Any = None) -> None:
        super().__init__(message)
        self.policy = policy
        self.stats = stats


__all__ = ["CrucibleError", "ParseError", "OutOfBoundsError", "NoPathError"]
