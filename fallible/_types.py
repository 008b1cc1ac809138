"""
Core type definitions for fallible.

Aliases used across the library.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine
import typing

from .result import Result

# ============================================================================
# Type aliases
# ============================================================================

# AsyncResult = pending Result, what the async paths of the adapters return
type AsyncResult[T, E] = Coroutine[typing.Any, typing.Any, Result[T, E]]

# Thunk = zero-arg callable, sync or async
type Thunk[T] = Callable[[], T | Awaitable[T]]

# OnCatch = error value for try_catch: fixed fallback or built from the exception
type OnCatch[E] = E | Callable[[Exception], E]

__all__ = (
    "AsyncResult",
    "Thunk",
    "OnCatch",
)
