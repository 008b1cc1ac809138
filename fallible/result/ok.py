"""
Ok - successful outcome
=======================
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from .._errors import ExpectError, UnwrapError
from .._helpers import is_awaitable
from .base import ResultBase


class Ok[T](ResultBase[T, typing.Never]):
    """Success case containing a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        """The wrapped value."""
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> typing.Never:
        raise UnwrapError("Cannot unwrap an Ok as an Err", self)

    def unwrap_or[D](self, default: D) -> T:
        return self._value

    def unwrap_or_none(self) -> T:
        return self._value

    def unwrap_or_else[D](self, fn: Callable[[typing.Never], D]) -> T:
        return self._value

    def expect(self, message: str) -> T:
        return self._value

    def expect_err(self, message: str) -> typing.Never:
        raise ExpectError(message, self)

    def map[U](self, fn: Callable[[T], U], /) -> Ok[U]:
        return Ok(fn(self._value))

    def map_err[F](self, fn: Callable[[typing.Never], F], /) -> typing.Self:
        return self

    def and_then[R](self, fn: Callable[[T], R], /) -> R:
        return fn(self._value)

    async def and_then_async[U, F](
        self,
        fn: Callable[[T], ResultBase[U, F] | Awaitable[ResultBase[U, F]]],
        /,
    ) -> ResultBase[U, F]:
        result = fn(self._value)
        if is_awaitable(result):
            return await result
        return result

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[typing.Never], U]) -> U:
        return ok(self._value)

    def tap(self, fn: Callable[[T], typing.Any], /) -> typing.Self:
        fn(self._value)
        return self

    def tap_err(self, fn: Callable[[typing.Never], typing.Any], /) -> typing.Self:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ok):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


def ok[T](value: T) -> Ok[T]:
    """Create an Ok result."""
    return Ok(value)


__all__ = ("Ok", "ok")
