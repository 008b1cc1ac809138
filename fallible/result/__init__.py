"""
Result container
================

Result[T, E] = Ok[T] | Err[E]

Both variants are slot-backed, read-only and pattern-matchable.
"""

from .base import ResultBase
from .err import Err, err
from .ok import Ok, ok

type Result[T, E] = Ok[T] | Err[E]

__all__ = (
    "Result",
    "ResultBase",
    "Ok",
    "Err",
    "ok",
    "err",
)
