from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .result.base import ResultBase


class UnwrapError(Exception):
    """Value extracted from the wrong variant."""

    result: ResultBase[typing.Any, typing.Any]

    def __init__(self, message: str, result: ResultBase[typing.Any, typing.Any]) -> None:
        self.result = result
        super().__init__(message)


class ExpectError(UnwrapError):
    """expect / expect_err called on the wrong variant."""


class OriginError(Exception):
    """Synthesized origin for an Err whose cause was not an exception."""

    UNSPECIFIED: typing.ClassVar[str] = "Unspecified error"

    def __init__(self, message: str = UNSPECIFIED) -> None:
        super().__init__(message)


__all__ = ("ExpectError", "OriginError", "UnwrapError")
