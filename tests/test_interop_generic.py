"""Tests for interop.generic: bridging to any Result library via extract + wrap."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

import pytest

from fallible import Err, Ok, OriginError, err, ok
from fallible.interop.generic import from_lazyM, from_resultM, to_lazyM, to_resultM


# A minimal foreign Result library, shaped like kungfu: Success / Failure
# values and a lazy container that runs when called.
@dataclass(frozen=True, slots=True)
class Success:
    value: typing.Any


@dataclass(frozen=True, slots=True)
class Failure:
    error: typing.Any


class Deferred:
    """Lazy async container: call it to get a coroutine. Not awaitable itself."""

    def __init__(self, run: Callable[[], Coroutine[typing.Any, typing.Any, Success | Failure]]) -> None:
        self.run = run
        self.calls = 0

    def __call__(self) -> Coroutine[typing.Any, typing.Any, Success | Failure]:
        self.calls += 1
        return self.run()


def unpack(raw: Success | Failure) -> tuple[bool, typing.Any]:
    match raw:
        case Success(value):
            return True, value
        case Failure(error):
            return False, error
        case _:
            raise TypeError(f"not a foreign result: {type(raw).__name__}")


class TestToResultM:
    def test_ok(self) -> None:
        assert to_resultM(ok(1), ok=Success, error=Failure) == Success(1)

    def test_err_drops_origin(self) -> None:
        assert to_resultM(err("bad", "cause"), ok=Success, error=Failure) == Failure("bad")

    def test_rejects_non_result(self) -> None:
        with pytest.raises(TypeError, match="expects Ok or Err"):
            to_resultM(Success(1), ok=Success, error=Failure)  # type: ignore[arg-type]


class TestFromResultM:
    def test_ok(self) -> None:
        assert from_resultM(Success("v"), unpack=unpack) == Ok("v")

    def test_plain_error_payload(self) -> None:
        result = from_resultM(Failure("bad"), unpack=unpack)
        assert result == Err("bad")
        assert isinstance(result.origin, OriginError)

    def test_explicit_origin(self) -> None:
        result = from_resultM(Failure("bad"), unpack=unpack, origin="upstream timeout")
        assert str(result.origin) == "upstream timeout"

    def test_exception_payload_doubles_as_origin(self) -> None:
        cause = TimeoutError("slow")
        result = from_resultM(Failure(cause), unpack=unpack)
        assert result.err_value is cause
        assert result.origin is cause

    def test_unpack_errors_propagate(self) -> None:
        with pytest.raises(TypeError, match="not a foreign result"):
            from_resultM("plain", unpack=unpack)  # type: ignore[arg-type]


class TestLazyM:
    @pytest.mark.asyncio
    async def test_to_lazy_wraps_thunk(self) -> None:
        lazy = to_lazyM(ok(3), ok=Success, error=Failure, wrap=Deferred)
        assert isinstance(lazy, Deferred)
        assert await lazy() == Success(3)

    @pytest.mark.asyncio
    async def test_from_lazy_calls_container_before_awaiting(self) -> None:
        async def run() -> Success | Failure:
            return Failure("remote failure")

        lazy = Deferred(run)
        result = await from_lazyM(lazy, unpack=unpack, origin="rpc")
        assert lazy.calls == 1
        assert result == Err("remote failure")
        assert str(result.origin) == "rpc"

    @pytest.mark.asyncio
    async def test_round_trip(self) -> None:
        for original in (ok(3), err("e")):
            lazy = to_lazyM(original, ok=Success, error=Failure, wrap=Deferred)
            assert await from_lazyM(lazy, unpack=unpack) == original
