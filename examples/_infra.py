from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure:
    message: str
    transient: bool = False


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


class APIException(Exception):
    """Simulates HTTP client exception (like aiohttp.ClientError)."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


class FakeHTTPClient:
    """Third-party style client: raises instead of returning Result."""

    def __init__(self, *, fail_count: int = 0, delay_seconds: float = 0.0) -> None:
        self.fail_count = fail_count
        self.delay_seconds = delay_seconds

    async def get_user(self, user_id: int) -> User:
        await asyncio.sleep(self.delay_seconds)
        if self.fail_count > 0:
            self.fail_count -= 1
            raise APIException(status=503, message="Service Unavailable")
        return User(id=user_id, name=f"user:{user_id}@http-api")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
