"""
Bridge to kungfu results.

Converts between fallible containers and kungfu's Result / LazyCoroResult,
so Results produced here can run through kungfu-based pipelines
(retry, timeout, fallback, ...) and come back.

Requires the optional extra: pip install fallible[kungfu]
"""

from __future__ import annotations

import typing

import kungfu

from ..result import Result
from .generic import from_lazyM, from_resultM, to_lazyM, to_resultM


def unpack(result: kungfu.Result[typing.Any, typing.Any]) -> tuple[bool, typing.Any]:
    """Split a kungfu Result into (is_ok, payload)."""
    match result:
        case kungfu.Ok(value):
            return True, value
        case kungfu.Error(error):
            return False, error
        case _:
            raise TypeError(f"from_kungfu() expects a kungfu Result, got {type(result).__name__}")


def to_kungfu[T, E](result: Result[T, E]) -> kungfu.Result[T, E]:
    """
    Convert to kungfu Result. Ok -> kungfu.Ok, Err -> kungfu.Error.

    NOTE: kungfu.Error carries a single payload, the origin is dropped.
    """
    return to_resultM(result, ok=kungfu.Ok, error=kungfu.Error)


def from_kungfu[T, E](
    result: kungfu.Result[T, E],
    origin: BaseException | str | None = None,
) -> Result[T, E]:
    """
    Convert from kungfu Result.

    An exception payload of kungfu.Error doubles as origin unless origin
    is given explicitly.
    """
    return from_resultM(result, unpack=unpack, origin=origin)


def to_lazy[T, E](result: Result[T, E]) -> kungfu.LazyCoroResult[T, E]:
    """
    Lift already-computed Result into kungfu LazyCoroResult.

    Example:
        from fallible.interop import kungfu as K

        pipeline = retry(K.to_lazy(parse(raw)), times=3)
    """
    return to_lazyM(result, ok=kungfu.Ok, error=kungfu.Error, wrap=kungfu.LazyCoroResult)


async def from_lazy[T, E](
    lazy: kungfu.LazyCoroResult[T, E],
    origin: BaseException | str | None = None,
) -> Result[T, E]:
    """Run a kungfu LazyCoroResult and convert its outcome."""
    return await from_lazyM(lazy, unpack=unpack, origin=origin)


__all__ = (
    "unpack",
    "to_kungfu",
    "from_kungfu",
    "to_lazy",
    "from_lazy",
)
