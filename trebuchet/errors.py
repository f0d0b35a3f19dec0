"""
Error Taxonomy
==============
Exceptions raised by the puzzle solvers.

Every parsing error is surfaced immediately: the first malformed line
aborts the whole solve for that puzzle part. Only the CLI catches these.
"""

from __future__ import annotations

from typing import Any, Optional


class PuzzleError(Exception):
    """Base exception for all solver errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MalformedInputError(PuzzleError):
    """A line is missing an expected separator (space, colon, '|', ';')."""


class ParseFailureError(PuzzleError):
    """A numeric field is not a valid non-negative integer."""

    def __init__(self, field: str, what: str, line_number: Optional[int] = None):
        details: dict[str, Any] = {"field": field}
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__(f"invalid {what}: {field!r}", details)
        self.field = field


class EmptyResultError(PuzzleError):
    """A line yields no digits or number words where one is required."""


class InvariantViolationError(PuzzleError):
    """A schematic character was classified as both digit and symbol."""


class UnknownPuzzleError(PuzzleError):
    """No solver is registered for the requested day."""

    def __init__(self, day: int):
        super().__init__(f"Solver not implemented for day {day}", {"day": day})
        self.day = day
