from __future__ import annotations

from _infra import APIException, FakeHTTPClient, Failure, User, banner, run

from fallible import Err, Ok, Result, err, lift as L, ok


# ============================================================================
# Approach 1: L.call (function-based lifting)
# ============================================================================


async def fetch_user_with_call(client: FakeHTTPClient, user_id: int) -> Result[User, Failure]:
    """Lift exception-raising coroutine into Result using L.call."""
    return await L.call(client.get_user, user_id, fallback=Failure("API error", transient=True))


# ============================================================================
# Approach 2: @L.lifted decorator (for your own functions)
# ============================================================================


class SafeUserService:
    """Your service layer that wraps exception-raising client."""

    def __init__(self, client: FakeHTTPClient) -> None:
        self.client = client

    @L.lifted(fallback=Failure("service error"))
    async def get_user(self, user_id: int) -> User:
        return await self.client.get_user(user_id)


# ============================================================================
# Approach 3: L.up.try_catch (for functions that already return Result)
# ============================================================================


async def load_active_user(client: FakeHTTPClient, user_id: int) -> Result[User, Failure]:
    # Returns Result for expected failures, but get_user may still raise.
    user = await client.get_user(user_id)
    if not user.is_active:
        return err(Failure(f"user {user.id} is inactive"))
    return ok(user)


async def main() -> None:
    banner("02_async_catching: lift exception-raising async code into Result")

    print("\n[Demo 1: L.call for exception-raising functions]")
    result1 = await fetch_user_with_call(FakeHTTPClient(fail_count=1, delay_seconds=0.01), 42)
    match result1:
        case Ok(user):
            print(f"  ✓ Success: {user.name}")
        case Err(failure, origin):
            print(f"  ✗ Error: {failure.message} ({origin})")

    print("\n[Demo 2: @L.lifted decorator for your service layer]")
    service = SafeUserService(FakeHTTPClient(fail_count=0, delay_seconds=0.01))
    result2 = await service.get_user(42)
    print(f"  → {result2.map(lambda user: user.name.upper())!r}")

    print("\n[Demo 3: try_catch guarding a Result-returning coroutine]")
    client = FakeHTTPClient(fail_count=1)
    result3 = await L.up.try_catch(
        lambda: load_active_user(client, 7),
        on_catch=lambda e: Failure(f"guarded: {e}", transient=isinstance(e, APIException) and e.status >= 500),
    )
    print(f"  → {result3!r}")

    print("\n[Demo 4: and_then_async chaining]")
    result4 = await ok(42).and_then_async(lambda user_id: fetch_user_with_call(client, user_id))
    print(f"  → {result4.unwrap_or_none()}")


if __name__ == "__main__":
    run(main)
