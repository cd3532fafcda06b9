# -*- coding: utf-8 -*-
"""
Input validation errors.

All errors derive from ``TopsisInputError`` which is a ``ValueError``,
so callers that only expect ``ValueError`` keep working.
"""

from typing import Any, Optional


class TopsisInputError(ValueError):
    """Base class for every validation failure raised before ranking."""


class ParseError(TopsisInputError):
    """A weight or impact token could not be parsed."""

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.token = token


class ShapeMismatch(TopsisInputError):
    """Weights, impacts and criteria counts disagree, or a row is ragged."""


class ShapeTooSmall(TopsisInputError):
    """The table has fewer rows or columns than TOPSIS needs."""


class NonNumericCell(TopsisInputError):
    """
    A criterion cell is not a real number.

    ``row`` and ``column`` are 1-based display coordinates that count the
    header row and the identifier column, as a spreadsheet would show them.
    """

    def __init__(self, row: int, column: int, value: Any = None):
        super().__init__(f"Non-numeric value found at row {row}, column {column}")
        self.row = row
        self.column = column
        self.value = value


__all__ = [
    'TopsisInputError',
    'ParseError',
    'ShapeMismatch',
    'ShapeTooSmall',
    'NonNumericCell',
]
