"""Result types for railway-oriented attribute access.

Attribute lookups on structured errors can fail in two well-defined ways
(key absent, value of the wrong type). Instead of raising, every accessor
returns a Result so the caller decides how to react at the point of call.

Usage:
    result = error.attr_int("retries")
    match result:
        case Success(value=retries):
            print(f"Retries: {retries}")
        case Failure(error=AttributeNotFoundError()):
            print("No retry count recorded")
        case Failure(error=failure):
            print(f"Unusable retry count: {failure}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful lookup.

    Attributes:
        value: The narrowed attribute value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed lookup.

    Attributes:
        error: The attribute access error describing the failure.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
