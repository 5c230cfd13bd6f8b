"""resultkit - a small Result[T, E] type and its combinators."""

from src.resultkit.combinators import (
    is_err,
    is_ok,
    map_err,
    map_ok,
    match,
    unwrap,
    unwrap_err,
    unwrap_or_default,
    unwrap_or_else,
)
from src.resultkit.config import ResultSettings, get_settings
from src.resultkit.errors import NotAnErrorError, ResultError, UnwrapError
from src.resultkit.result import (
    Err,
    Ok,
    Result,
    err,
    from_awaitable,
    is_result,
    ok,
    try_call,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "ok",
    "err",
    "from_awaitable",
    "try_call",
    "is_result",
    "is_ok",
    "is_err",
    "match",
    "unwrap",
    "unwrap_err",
    "unwrap_or_else",
    "unwrap_or_default",
    "map_ok",
    "map_err",
    "ResultError",
    "UnwrapError",
    "NotAnErrorError",
    "ResultSettings",
    "get_settings",
]
