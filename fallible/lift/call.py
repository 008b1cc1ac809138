"""
Calling functions with automatic lifting.

Call-site and decorator forms of from_: run a function that may raise and
get a Result back.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable
from functools import wraps

from .._types import AsyncResult
from ..result import Result
from .up import from_


def call[T, E](
    func: Callable[..., T | Awaitable[T]],
    *args: typing.Any,
    fallback: E = None,
    **kwargs: typing.Any,
) -> Result[T, E] | AsyncResult[T, E]:
    """
    Call func with arguments and lift the outcome into Result.

    **When to use:** This is the preferred pattern for locality! Keep the
    function exception-based and lift at the call site, without lambda
    boilerplate.

    Example:
        from fallible import lift as L

        port = L.call(int, raw_port, fallback="invalid port")
        user = await L.call(client.get_user, 42, fallback=None)

        # vs verbose alternative:
        # port = L.up.from_(lambda: int(raw_port), fallback="invalid port")

    **Grammar:** `L.call(func, *args, **kwargs)` reads as "call function with args"

    NOTE: `fallback` is keyword-only and consumed here; it is never passed to func.
    """
    return from_(lambda: func(*args, **kwargs), fallback)


def lifted(
    func: Callable[..., typing.Any] | None = None,
    /,
    *,
    fallback: typing.Any = None,
) -> typing.Any:
    """
    Decorator: the decorated function returns a Result instead of raising.

    Coroutine functions stay coroutine functions and resolve to a Result.

    Example:
        from fallible import lift as L

        @L.lifted
        def parse_port(raw: str) -> int:
            return int(raw)

        @L.lifted(fallback="fetch failed")
        async def fetch_user(user_id: int) -> User:
            return await client.get_user(user_id)

        parse_port("80")             # Ok(80)
        await fetch_user(42)         # Ok(User(...)) or Err("fetch failed")

    **Grammar:** `@L.lifted` reads as "lifted function"
    """

    def decorate(fn: Callable[..., typing.Any]) -> Callable[..., typing.Any]:
        if inspect.iscoroutinefunction(fn):

            @wraps(fn)
            async def async_wrapper(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
                return await from_(lambda: fn(*args, **kwargs), fallback)

            return async_wrapper

        @wraps(fn)
        def wrapper(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
            return from_(lambda: fn(*args, **kwargs), fallback)

        return wrapper

    if func is None:
        return decorate
    if not callable(func):
        raise TypeError(
            f"lifted() expects a callable, got {type(func).__name__}; pass the fallback as lifted(fallback=...)"
        )
    return decorate(func)


__all__ = (
    "call",
    "lifted",
)
