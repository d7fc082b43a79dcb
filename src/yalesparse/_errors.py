"""
Error handling for yalesparse.

The matrix itself has no failure path in normal operation: out-of-range
reads return the zero sentinel and writes past the last row grow the
matrix. The errors below cover caller mistakes that would otherwise
corrupt the packed arrays silently (negative or non-integer write
coordinates, malformed subscripts, non-callable callbacks).
"""

from __future__ import annotations

import operator
from typing import Any, Optional


# =============================================================================
# Error Codes
# =============================================================================

YALE_OK = 0

# General errors (1-9)
YALE_ERROR_UNKNOWN = 1
YALE_ERROR_INTERNAL = 2

# Argument errors (10-19)
YALE_ERROR_INVALID_ARGUMENT = 10
YALE_ERROR_INDEX_OUT_OF_BOUNDS = 14

# Type errors (20-29)
YALE_ERROR_TYPE_ERROR = 20


_ERROR_MESSAGES = {
    YALE_OK: "Success",
    YALE_ERROR_UNKNOWN: "Unknown error",
    YALE_ERROR_INTERNAL: "Internal error",
    YALE_ERROR_INVALID_ARGUMENT: "Invalid argument",
    YALE_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    YALE_ERROR_TYPE_ERROR: "Type error",
}


# =============================================================================
# Exception Classes
# =============================================================================

class SparseMatrixError(Exception):
    """
    Base exception for all yalesparse errors.

    Attributes:
        code: One of the YALE_ERROR_* codes.
        message: Human readable description.
    """

    OK = YALE_OK
    ERROR_UNKNOWN = YALE_ERROR_UNKNOWN
    ERROR_INTERNAL = YALE_ERROR_INTERNAL
    ERROR_INVALID_ARGUMENT = YALE_ERROR_INVALID_ARGUMENT
    ERROR_INDEX_OUT_OF_BOUNDS = YALE_ERROR_INDEX_OUT_OF_BOUNDS
    ERROR_TYPE_ERROR = YALE_ERROR_TYPE_ERROR

    default_code = YALE_ERROR_UNKNOWN

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        if code is None:
            code = self.default_code
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(f"Yale Error {code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "SparseMatrixError":
        """Create the matching exception for an error code, with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        error_cls = _ERROR_CLASSES.get(code, cls)
        return error_cls(msg, code)


class IndexOutOfBoundsError(SparseMatrixError, IndexError):
    """A write coordinate is negative."""

    default_code = YALE_ERROR_INDEX_OUT_OF_BOUNDS


class InvalidArgumentError(SparseMatrixError, ValueError):
    """An argument has the right type but an unusable value."""

    default_code = YALE_ERROR_INVALID_ARGUMENT


class IndexTypeError(SparseMatrixError, TypeError):
    """A coordinate or subscript is not an integer (pair)."""

    default_code = YALE_ERROR_TYPE_ERROR


_ERROR_CLASSES = {
    YALE_ERROR_INDEX_OUT_OF_BOUNDS: IndexOutOfBoundsError,
    YALE_ERROR_INVALID_ARGUMENT: InvalidArgumentError,
    YALE_ERROR_TYPE_ERROR: IndexTypeError,
}


# =============================================================================
# Checking Functions
# =============================================================================

def as_index(value: Any, name: str) -> int:
    """
    Return ``value`` as a plain int.

    Accepts anything implementing ``__index__`` (numpy integers included)
    except bool.

    Raises:
        IndexTypeError: If ``value`` is not an integer.
    """
    if isinstance(value, bool):
        raise IndexTypeError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise IndexTypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def check_coordinate(value: Any, name: str) -> int:
    """
    Validate a write coordinate and return it as a plain int.

    Raises:
        IndexTypeError: If ``value`` is not an integer.
        IndexOutOfBoundsError: If ``value`` is negative.
    """
    index = as_index(value, name)
    if index < 0:
        raise IndexOutOfBoundsError(f"{name} must be non-negative, got {index}")
    return index


def check_callable(func: Any, name: str) -> None:
    """Raise InvalidArgumentError unless ``func`` is callable."""
    if not callable(func):
        raise InvalidArgumentError(
            f"{name} must be callable, got {type(func).__name__}"
        )
