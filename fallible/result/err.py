"""
Err - failed outcome
====================
"""

from __future__ import annotations

import traceback
import typing
from collections.abc import Awaitable, Callable

from .._errors import ExpectError, UnwrapError
from .._helpers import as_origin
from .base import ResultBase


class Err[E](ResultBase[typing.Never, E]):
    """
    Error case containing an error value and its origin.

    - err_value: the caller-supplied payload (any type, None included)
    - origin: the underlying cause, always an exception instance.
      Synthesized as OriginError when no exception was available.
    """

    __slots__ = ("_err_value", "_origin")
    __match_args__ = ("err_value", "origin")

    def __init__(self, err_value: E = None, origin: object = None) -> None:
        self._err_value = err_value
        self._origin = as_origin(origin)

    @property
    def err_value(self) -> E:
        """The logical error payload."""
        return self._err_value

    @property
    def origin(self) -> BaseException:
        """The diagnostic cause."""
        return self._origin

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> typing.Never:
        raise UnwrapError("Cannot unwrap an Err", self) from self._origin

    def unwrap_err(self) -> E:
        return self._err_value

    def unwrap_or[D](self, default: D) -> D:
        return default

    def unwrap_or_none(self) -> None:
        return None

    def unwrap_or_else[D](self, fn: Callable[[E], D]) -> D:
        return fn(self._err_value)

    def expect(self, message: str) -> typing.Never:
        raise ExpectError(message, self) from self._origin

    def expect_err(self, message: str) -> E:
        return self._err_value

    def map[U](self, fn: Callable[[typing.Never], U], /) -> typing.Self:
        return self

    def map_err[F](self, fn: Callable[[E], F], /) -> Err[F]:
        return Err(fn(self._err_value), self._origin)

    def and_then[R](self, fn: Callable[[typing.Never], R], /) -> typing.Self:
        return self

    async def and_then_async[U, F](
        self,
        fn: Callable[[typing.Never], ResultBase[U, F] | Awaitable[ResultBase[U, F]]],
        /,
    ) -> typing.Self:
        return self

    def match[U](self, *, ok: Callable[[typing.Never], U], err: Callable[[E], U]) -> U:
        return err(self._err_value)

    def tap(self, fn: Callable[[typing.Never], typing.Any], /) -> typing.Self:
        return self

    def tap_err(self, fn: Callable[[E], typing.Any], /) -> typing.Self:
        fn(self._err_value)
        return self

    def format_origin(self) -> str:
        """Origin rendered like an uncaught exception: cause chain, traceback, message."""
        return "".join(traceback.format_exception(self._origin)).rstrip("\n")

    def __eq__(self, other: object) -> bool:
        # NOTE: origin is a diagnostic and does not take part in equality.
        if not isinstance(other, Err):
            return NotImplemented
        return self._err_value == other._err_value

    def __hash__(self) -> int:
        return hash((Err, self._err_value))

    def __repr__(self) -> str:
        return f"Err({self._err_value!r})"

    def __str__(self) -> str:
        return f"{self!r}\n{self.format_origin()}"


def err[E](err_value: E = None, origin: BaseException | str | None = None) -> Err[E]:
    """
    Create an Err result.

    origin may be an exception (kept as is), a message (wrapped in
    OriginError) or omitted (OriginError("Unspecified error")).
    """
    return Err(err_value, origin)


__all__ = ("Err", "err")
