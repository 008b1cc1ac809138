"""
Result container for composing fallible computations.

A computation either succeeds with a value (Ok) or fails with an error
value (Err). Combinators chain such outcomes without raising for ordinary
control flow; exceptions are reserved for caller misuse (unwrap on Err).

Architecture:
- Result[T, E] = Ok[T] | Err[E] with map / map_err / and_then / match
- Adapters (from_, try_catch) turn exception-based sync and async code into Result
- Call-site lifting (call, @lifted) for functions that raise
"""

# Core types
from .result import Err, Ok, Result, ResultBase, err, ok
from ._types import AsyncResult, OnCatch, Thunk

# Internal helpers (for custom adapters)
from . import _helpers
from ._helpers import possibly_async_try_catch

# Lift helpers
from . import lift
from .lift import call, from_, lifted, try_catch

# Errors
from ._errors import ExpectError, OriginError, UnwrapError

__all__ = (
    # Types
    "Result",
    "ResultBase",
    "Ok",
    "Err",
    "AsyncResult",
    "OnCatch",
    "Thunk",
    # Constructors
    "ok",
    "err",
    # Internal helpers (for custom adapters)
    "_helpers",
    "possibly_async_try_catch",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "from_",
    "try_catch",
    "call",
    "lifted",
    # Errors
    "ExpectError",
    "OriginError",
    "UnwrapError",
)
