"""Result type for explicit error handling without exceptions.

Provides a Rust-inspired Result[T, E] pattern for operations that can fail.
Forces callers to handle both success and error cases explicitly.

Both variants are frozen, slotted dataclasses, so the tag (the class) and the
payload reference are fixed at construction. Every transformation returns a
new instance. Structural pattern matching works out of the box::

    match result:
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, NoReturn, TypeVar, Union

from src.resultkit.config import describe
from src.resultkit.errors import NotAnErrorError, UnwrapError

log = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def match(self, ok: Callable[[T], R], err: Callable[[Any], R]) -> R:
        return ok(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise NotAnErrorError(self.value, describe(self.value))

    def unwrap_or_else(self, recover: Callable[[Any], U]) -> T:
        return self.value

    def unwrap_or_default(self, default: U) -> T:
        return self.value

    def map_ok(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], U]) -> Ok[T]:
        return Ok(self.value)


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def match(self, ok: Callable[[Any], R], err: Callable[[E], R]) -> R:
        return err(self.error)

    def unwrap(self) -> NoReturn:
        """Raise the carried error.

        Exceptions are raised as-is so their identity and traceback survive.
        Any other payload is wrapped in ``UnwrapError`` and kept on ``.error``.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or_else(self, recover: Callable[[E], U]) -> U:
        return recover(self.error)

    def unwrap_or_default(self, default: U) -> U:
        return default

    def map_ok(self, fn: Callable[[Any], U]) -> Err[E]:
        return Err(self.error)

    def map_err(self, fn: Callable[[E], U]) -> Err[U]:
        return Err(fn(self.error))


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    """Wrap ``value`` as a success."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Wrap ``error`` as a failure."""
    return Err(error)


def is_result(value: object) -> bool:
    """Return True only for values built as ``Ok`` or ``Err``.

    Look-alike objects exposing ``value``/``error`` attributes are rejected.
    """
    return isinstance(value, (Ok, Err))


async def from_awaitable(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await ``awaitable`` once and capture its outcome as a Result.

    An ``Exception`` raised by the awaitable becomes ``Err(exc)``. Anything
    that is not an ``Exception`` (``asyncio.CancelledError`` included) is
    left to propagate.
    """
    try:
        value = await awaitable
    except Exception as e:
        log.debug("Awaitable failed, returning Err: %s: %s", type(e).__name__, e)
        return Err(e)
    return Ok(value)


def try_call(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call ``fn(*args, **kwargs)`` and capture its outcome as a Result."""
    try:
        value = fn(*args, **kwargs)
    except Exception as e:
        log.debug("Call to %r failed, returning Err: %s: %s", fn, type(e).__name__, e)
        return Err(e)
    return Ok(value)
