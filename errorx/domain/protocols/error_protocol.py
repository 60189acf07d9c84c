"""Error capability protocol.

Structural contract for structured errors: anything exposing a code, a
message, an attribute mapping, the wrapped cause and a list of nested errors
is an ``Error``, whether or not it shares a base class with ``BaseError``.

The contract is read-only. Mutation (adding attributes, appending nested
errors) belongs to concrete types such as ``BaseError``.

Usage:
    from errorx.domain.protocols.error_protocol import Error

    def describe(err: Error) -> str:
        return f"[{err.code()}] {err.message()}"

    isinstance(candidate, Error)  # structural check, no inheritance needed
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Error(Protocol):
    """Protocol for structured error values.

    Implementations guarantee that ``cause()`` is never None and that
    ``attributes()`` and ``nested_errors()`` never return None.
    """

    def attributes(self) -> Mapping[str, Any]:
        """Return the attributes attached to the error.

        Returns:
            Read-only mapping; empty when no attribute was set.
        """
        ...

    def code(self) -> int:
        """Return the error code set at construction."""
        ...

    def message(self) -> str:
        """Return the string representation of the error."""
        ...

    def cause(self) -> BaseException:
        """Return the wrapped underlying error (never None)."""
        ...

    def nested_errors(self) -> list[Error]:
        """Return the nested errors in insertion order.

        Returns:
            Possibly empty list, never None.
        """
        ...
