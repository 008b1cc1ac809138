"""Generic bridge combinators

Convert between fallible containers and any other Result library with the
extract + wrap pattern: the foreign library is described by its
constructors (ok / error), an unpack function, and a wrap function for
its lazy async form. Library bridges (see interop.kungfu) are sugar over
these functions."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from ..result import Err, Ok, Result

# unpack: foreign result -> (is_ok, payload). Raises TypeError on foreign values it does not know.
type Unpack[Raw] = Callable[[Raw], tuple[bool, typing.Any]]


def to_resultM[T, E, Raw](
    result: Result[T, E],
    *,
    ok: Callable[[T], Raw],
    error: Callable[[E], Raw],
) -> Raw:
    """
    Convert to a foreign result via its constructors.

    NOTE: the origin is dropped, foreign errors carry a single payload.
    """
    match result:
        case Ok(value):
            return ok(value)
        case Err(err_value):
            return error(err_value)
        case _:
            raise TypeError(f"to_resultM() expects Ok or Err, got {type(result).__name__}")


def from_resultM[Raw, T, E](
    raw: Raw,
    *,
    unpack: Unpack[Raw],
    origin: BaseException | str | None = None,
) -> Result[T, E]:
    """
    Convert from a foreign result.

    An exception error payload doubles as origin unless origin is given explicitly.
    """
    is_ok, payload = unpack(raw)
    if is_ok:
        return Ok(payload)
    if origin is None and isinstance(payload, BaseException):
        return Err(payload, payload)
    return Err(payload, origin)


def to_lazyM[M, T, E, Raw](
    result: Result[T, E],
    *,
    ok: Callable[[T], Raw],
    error: Callable[[E], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """Lift already-computed Result into a foreign lazy async container."""

    async def run() -> Raw:
        return to_resultM(result, ok=ok, error=error)

    return wrap(run)


async def from_lazyM[Raw, T, E](
    interp: Callable[[], typing.Awaitable[Raw]],
    *,
    unpack: Unpack[Raw],
    origin: BaseException | str | None = None,
) -> Result[T, E]:
    """Run a foreign lazy container (call, then await) and convert its outcome."""
    raw = await interp()
    return from_resultM(raw, unpack=unpack, origin=origin)


__all__ = (
    "Unpack",
    "to_resultM",
    "from_resultM",
    "to_lazyM",
    "from_lazyM",
)
