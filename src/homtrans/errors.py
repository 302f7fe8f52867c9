"""Exception types raised by homtrans.

Both concrete errors also derive from the matching builtin exception so
callers that already catch ``ValueError`` or ``ZeroDivisionError`` keep
working.
"""

from __future__ import annotations


class TransformError(Exception):
    """Base class for all homtrans errors."""


class InvalidArgumentError(TransformError, ValueError):
    """Wrong matrix/vector shape, or a zero-length rotation axis."""


class DivideByZeroError(TransformError, ZeroDivisionError):
    """Zero homogeneous scale encountered while transforming points."""

    def __init__(self, message: str, columns: list[int] | None = None):
        super().__init__(message)
        self.columns = columns or []
