"""
Lifting exception-based code into Result.

Adapters that run arbitrary sync or async code and turn anything it
raises into an Err. They are the only places where raised exceptions
become values.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable

from .._helpers import is_awaitable, possibly_async_try_catch
from .._types import AsyncResult, OnCatch, Thunk
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)


def from_[T, E](
    source: Thunk[T] | Awaitable[T],
    fallback: E = None,
) -> Result[T, E] | AsyncResult[T, E]:
    """
    Run source and wrap its outcome: Ok(value) or Err(fallback, origin).

    **When to use:** Bridge between exception-based code and Result. For
    sync callables, async callables, and awaitables alike.

    - callable returning a value: Ok(value)
    - callable raising: Err(fallback) with the exception as origin
    - callable returning an awaitable, or an awaitable itself: a coroutine
      resolving to Ok(data) or Err(fallback, origin)

    Example:
        from fallible import lift as L

        parsed = L.up.from_(lambda: json.loads(raw), fallback="invalid json")
        user = await L.up.from_(client.get_user(42), fallback=UserNotFound(42))

    **Grammar:** `L.up.from_(thunk)` reads as "lift up from thunk"

    NOTE: Catches Exception subclasses only. KeyboardInterrupt, SystemExit
          and asyncio.CancelledError propagate.
    """
    if is_awaitable(source):
        return _from_awaitable(source, fallback)
    if not callable(source):
        raise TypeError(f"from_() expects a callable or an awaitable, got {type(source).__name__}")

    try:
        value = source()
    except Exception as exc:
        return _caught("from_", exc, fallback)

    if is_awaitable(value):
        return _from_awaitable(value, fallback)
    return Ok(value)


def try_catch[T, E](
    fn: Thunk[Result[T, E]],
    on_catch: OnCatch[E] = None,
) -> Result[T, E] | AsyncResult[T, E]:
    """
    Run fn, which already returns a Result, guarding against exceptions.

    **When to use:** For your own Result-returning functions that may still
    raise (bugs, third-party calls inside). The Result fn returns is passed
    through unchanged.

    If fn raises, or its awaitable raises, the exception becomes origin and
    the error value is on_catch(exception) when on_catch is callable,
    on_catch itself otherwise.

    Example:
        from fallible import lift as L

        result = L.up.try_catch(lambda: load_user(42), on_catch="storage failure")
        result = await L.up.try_catch(
            lambda: load_user_async(42),
            on_catch=lambda e: StorageError(str(e)),
        )

    **Grammar:** `L.up.try_catch(fn, on_catch=...)` reads as "lift up, try, catch with"
    """

    def catch(exc: Exception) -> Result[T, E]:
        err_value = on_catch(exc) if callable(on_catch) else on_catch
        return _caught("try_catch", exc, err_value)

    return possibly_async_try_catch(fn, catch)


async def _from_awaitable[T, E](awaitable: Awaitable[T], fallback: E) -> Result[T, E]:
    try:
        data = await awaitable
    except Exception as exc:
        return _caught("from_", exc, fallback)
    return Ok(data)


def _caught[E](adapter: str, exc: Exception, err_value: E) -> Err[E]:
    logger.debug("%s: %s converted into Err(%r)", adapter, type(exc).__name__, err_value, exc_info=exc)
    return Err(err_value, exc)


__all__ = (
    "from_",
    "try_catch",
)
