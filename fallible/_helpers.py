"""Internal helpers for fallible.

Common functions used by the container and the adapters.
These are not part of the stable API but can be used when building custom adapters."""

from __future__ import annotations

import json
import typing
from collections.abc import Awaitable, Callable

from ._errors import OriginError


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def is_awaitable(value: object) -> typing.TypeGuard[Awaitable[typing.Any]]:
    """Nominal check for an asynchronous value (coroutine, Task, Future, ...)."""
    return isinstance(value, Awaitable)


def serialize(payload: object) -> str:
    """
    Render an arbitrary payload as a diagnostic message.

    JSON when the payload is serializable, repr() otherwise.
    """
    try:
        return json.dumps(payload)
    except (TypeError, ValueError):
        return repr(payload)


def as_origin(obj: object) -> BaseException:
    """
    Normalize anything into an exception usable as Err.origin.

    - exception: kept as is (its __cause__ chain included)
    - None: OriginError("Unspecified error")
    - str: OriginError(message)
    - anything else: OriginError carrying its serialized form
    """
    match obj:
        case BaseException():
            return obj
        case None:
            return OriginError()
        case str():
            return OriginError(obj)
        case _:
            return OriginError(serialize(obj))


def possibly_async_try_catch[T](
    fn: Callable[[], T | Awaitable[T]],
    catch_fn: Callable[[Exception], T],
) -> T | Awaitable[T]:
    """
    Call fn and route any exception through catch_fn.

    If fn returns an awaitable, returns a coroutine that awaits it and
    applies catch_fn to an exception raised while awaiting. Works for any
    T, not only Result.

    Example:
        value = possibly_async_try_catch(lambda: int(raw), lambda e: 0)
        value = await possibly_async_try_catch(lambda: fetch(), lambda e: None)
    """
    try:
        result = fn()
    except Exception as exc:
        return catch_fn(exc)

    if is_awaitable(result):
        return _await_catching(result, catch_fn)
    return result


async def _await_catching[T](
    awaitable: Awaitable[T],
    catch_fn: Callable[[Exception], T],
) -> T:
    try:
        return await awaitable
    except Exception as exc:
        return catch_fn(exc)


__all__ = (
    "identity",
    "is_awaitable",
    "serialize",
    "as_origin",
    "possibly_async_try_catch",
)
