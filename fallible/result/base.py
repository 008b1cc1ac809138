"""
ResultBase - common surface of Ok and Err
=========================================
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Awaitable, Callable


class ResultBase[T, E](abc.ABC):
    """
    Outcome of a computation: exactly one of Ok[T] or Err[E].

    Discriminate with is_ok()/is_err(), isinstance, or pattern matching:

        match parse(raw):
            case Ok(value):
                ...
            case Err(err_value, origin):
                ...

    Combinators never mutate: they return a new container, or self when
    they do not apply to the variant (map on Err, map_err on Ok, ...).
    """

    __slots__ = ()

    # Discrimination

    @abc.abstractmethod
    def is_ok(self) -> bool:
        """True for Ok."""

    @abc.abstractmethod
    def is_err(self) -> bool:
        """True for Err."""

    # Extraction

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Contained Ok value. Raises UnwrapError (caused by origin) on Err."""

    @abc.abstractmethod
    def unwrap_err(self) -> E:
        """Contained Err value. Raises UnwrapError on Ok."""

    @abc.abstractmethod
    def unwrap_or[D](self, default: D) -> T | D:
        """Contained Ok value or default."""

    @abc.abstractmethod
    def unwrap_or_none(self) -> T | None:
        """Contained Ok value or None."""

    @abc.abstractmethod
    def unwrap_or_else[D](self, fn: Callable[[E], D]) -> T | D:
        """Contained Ok value or fn(err_value)."""

    @abc.abstractmethod
    def expect(self, message: str) -> T:
        """Contained Ok value. Raises ExpectError(message) on Err."""

    @abc.abstractmethod
    def expect_err(self, message: str) -> E:
        """Contained Err value. Raises ExpectError(message) on Ok."""

    # Transformation

    @abc.abstractmethod
    def map[U](self, fn: Callable[[T], U], /) -> ResultBase[U, E]:
        """Functor fmap - apply fn to the Ok value, leave Err untouched."""

    @abc.abstractmethod
    def map_err[F](self, fn: Callable[[E], F], /) -> ResultBase[T, F]:
        """Apply fn to the Err value (origin preserved), leave Ok untouched."""

    @abc.abstractmethod
    def and_then[R](self, fn: Callable[[T], R], /) -> R | typing.Self:
        """
        Monadic bind (>>=).

        - On Ok: returns fn(value) as is. If fn is async the result is an
          awaitable and the chain continues after awaiting it.
        - On Err: short-circuit, fn is never called and self is returned.

        NOTE: Err is not awaitable, so `await r.and_then(async_fn)` raises
              TypeError when r is an Err. Use and_then_async for async
              continuations.
        """

    @abc.abstractmethod
    def and_then_async[U, F](
        self,
        fn: Callable[[T], ResultBase[U, F] | Awaitable[ResultBase[U, F]]],
        /,
    ) -> Awaitable[ResultBase[U, F] | typing.Self]:
        """Monadic bind that is always awaitable, whatever the variant."""

    @abc.abstractmethod
    def match[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Call exactly one handler depending on the variant."""

    # Effects

    @abc.abstractmethod
    def tap(self, fn: Callable[[T], typing.Any], /) -> typing.Self:
        """Execute side effect on Ok value, pass through unchanged."""

    @abc.abstractmethod
    def tap_err(self, fn: Callable[[E], typing.Any], /) -> typing.Self:
        """Execute side effect on Err value, pass through unchanged."""


__all__ = ("ResultBase",)
