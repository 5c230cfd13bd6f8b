"""Exceptions raised when a Result is used against its tag.

A failure carried inside ``Err`` is never raised by the library on its own.
These exceptions only surface when a caller asks a Result for something it
does not hold.
"""

from __future__ import annotations

from typing import Any


class ResultError(Exception):
    """Base class for Result misuse."""


class UnwrapError(ResultError):
    """``unwrap()`` was called on an Err whose payload is not an exception.

    The original payload is kept unchanged on ``error``.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(f"Called unwrap on Err: {error!r}")
        self.error = error


class NotAnErrorError(ResultError):
    """``unwrap_err()`` was called on an Ok."""

    def __init__(self, value: Any, description: str) -> None:
        super().__init__(f"Result value is not an error: {description}")
        self.value = value
