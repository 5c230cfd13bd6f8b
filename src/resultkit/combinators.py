"""Free-function forms of the Result operations.

Each function takes the Result first and defers to the method of the same
name, for call sites that prefer ``map_ok(result, fn)`` over
``result.map_ok(fn)``.
"""

from __future__ import annotations

from typing import Callable, TypeGuard, TypeVar

from src.resultkit.result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    return result.is_err()


def match(
    result: Result[T, E], *, ok: Callable[[T], R], err: Callable[[E], R]
) -> R:
    """Call exactly one of ``ok``/``err`` with the payload and return its value."""
    return result.match(ok=ok, err=err)


def unwrap(result: Result[T, E]) -> T:
    return result.unwrap()


def unwrap_err(result: Result[T, E]) -> E:
    return result.unwrap_err()


def unwrap_or_else(result: Result[T, E], recover: Callable[[E], U]) -> T | U:
    return result.unwrap_or_else(recover)


def unwrap_or_default(result: Result[T, E], default: U) -> T | U:
    return result.unwrap_or_default(default)


def map_ok(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    return result.map_ok(fn)


def map_err(result: Result[T, E], fn: Callable[[E], U]) -> Result[T, U]:
    return result.map_err(fn)


__all__ = [
    "is_ok",
    "is_err",
    "match",
    "unwrap",
    "unwrap_err",
    "unwrap_or_else",
    "unwrap_or_default",
    "map_ok",
    "map_err",
]
