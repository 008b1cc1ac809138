"""Tests for the kungfu bridge (skipped without the kungfu extra)."""

from __future__ import annotations

import pytest

kungfu = pytest.importorskip("kungfu")
if not hasattr(kungfu, "LazyCoroResult"):
    pytest.skip("installed kungfu is not the Result library", allow_module_level=True)

from fallible import Err, Ok, OriginError, err, ok  # noqa: E402
from fallible.interop import kungfu as K  # noqa: E402


class TestToKungfu:
    def test_ok(self) -> None:
        match K.to_kungfu(ok(1)):
            case kungfu.Ok(value):
                assert value == 1
            case other:
                pytest.fail(f"Expected kungfu.Ok, got {other!r}")

    def test_err(self) -> None:
        match K.to_kungfu(err("not found")):
            case kungfu.Error(error):
                assert error == "not found"
            case other:
                pytest.fail(f"Expected kungfu.Error, got {other!r}")


class TestFromKungfu:
    def test_ok(self) -> None:
        assert K.from_kungfu(kungfu.Ok("v")) == Ok("v")

    def test_error_with_plain_payload(self) -> None:
        result = K.from_kungfu(kungfu.Error("bad"))
        assert result == Err("bad")
        assert isinstance(result.origin, OriginError)

    def test_error_with_explicit_origin(self) -> None:
        result = K.from_kungfu(kungfu.Error("bad"), "upstream timeout")
        assert str(result.origin) == "upstream timeout"

    def test_exception_payload_doubles_as_origin(self) -> None:
        cause = TimeoutError("slow")
        result = K.from_kungfu(kungfu.Error(cause))
        assert result.err_value is cause
        assert result.origin is cause

    def test_rejects_foreign_values(self) -> None:
        with pytest.raises(TypeError, match="expects a kungfu Result"):
            K.from_kungfu(ok(1))  # type: ignore[arg-type]


class TestLazy:
    @pytest.mark.asyncio
    async def test_round_trip_ok(self) -> None:
        assert await K.from_lazy(K.to_lazy(ok(3))) == Ok(3)

    @pytest.mark.asyncio
    async def test_round_trip_err(self) -> None:
        assert await K.from_lazy(K.to_lazy(err("e"))) == Err("e")

    @pytest.mark.asyncio
    async def test_from_lazy_coro_result(self) -> None:
        async def run() -> kungfu.Result[int, str]:
            return kungfu.Error("remote failure")

        result = await K.from_lazy(kungfu.LazyCoroResult(run), "rpc")
        assert result == Err("remote failure")
        assert str(result.origin) == "rpc"
