"""Composable base error.

``BaseError`` is the reference implementation of the ``Error`` capability.
It wraps a root cause with an opaque integer code, a mapping of attributes
and an ordered list of nested errors, and offers typed attribute accessors
that return ``Result`` values instead of raising.

Invariants established by the constructor:
- ``cause()`` is never None (a synthetic ``UnknownCauseError`` embedding the
  code replaces a missing cause)
- ``attributes()`` and ``nested_errors()`` never return None

Attributes and nested errors only grow; there is no removal operation.

Instances are not synchronized. Build an error completely on one thread,
then share it for reading.

Usage:
    error = BaseError(500, ConnectionError("db down"))
    error.with_attr("retries", 3)
    error.append(BaseError(2, TimeoutError("replica timed out")))

    match error.attr_int("retries"):
        case Success(value=retries):
            ...
        case Failure(error=failure):
            ...

Domain types compose over ``BaseError`` instead of subclassing it; see
``errorx.domain.errors.generic_error``.
"""

import copy
from collections.abc import Mapping
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Any

from errorx.core.enums import ErrorCode
from errorx.core.errors import (
    AttributeAccessError,
    AttributeNotFoundError,
    AttributeTypeMismatchError,
)
from errorx.core.result import Failure, Result, Success
from errorx.domain.attribute_types import AttributeType, narrows_to
from errorx.domain.protocols.error_protocol import Error

MESSAGE_PREFIX = "error: "


def owned_copy(error: Error) -> Error:
    """Return an independent copy of ``error`` for a parent to own.

    Structured errors copy their own attribute mapping and nested tree via
    ``snapshot()`` and keep sharing the (immutable) cause. Other Error
    implementations are deep-copied.
    """
    snapshot = getattr(error, "snapshot", None)
    if callable(snapshot):
        return snapshot()
    return copy.deepcopy(error)


def _same_cause(a: BaseException, b: BaseException) -> bool:
    return a is b or (type(a) is type(b) and a.args == b.args)


class UnknownCauseError(Exception):
    """Synthetic cause used when a structured error is built without one.

    Attributes:
        code: Code of the structured error it stands in for.
    """

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"an unknown error occurred (code={self.code})"


class BaseError(Exception):
    """Structured error with code, attributes, cause and nested errors.

    Args:
        code: Opaque error code, interpreted by the caller's domain.
        cause: Underlying failure. ``None`` is replaced by an
            ``UnknownCauseError`` carrying ``code``.
    """

    def __init__(self, code: int, cause: BaseException | None = None) -> None:
        if cause is None:
            cause = UnknownCauseError(code)
        super().__init__(code, cause)
        self._code = code
        self._cause = cause
        self._attrs: dict[str, Any] = {}
        self._nested: list[Error] = []
        self.__cause__ = cause

    # ------------------------------------------------------------------
    # Error capability
    # ------------------------------------------------------------------

    def attributes(self) -> Mapping[str, Any]:
        """Return a read-only view of the attributes."""
        return MappingProxyType(self._attrs)

    def code(self) -> int:
        """Return the error code."""
        return self._code

    def message(self) -> str:
        """Return the cause's message behind a fixed prefix.

        Richer rendering (code, attributes, nested tree) belongs to the
        composing domain type.
        """
        return f"{MESSAGE_PREFIX}{self._cause}"

    def cause(self) -> BaseException:
        """Return the wrapped cause."""
        return self._cause

    def nested_errors(self) -> list[Error]:
        """Return copies of the nested errors in insertion order.

        The parent keeps ownership of its tree; mutating a returned error
        does not change the parent.
        """
        return [owned_copy(nested) for nested in self._nested]

    def snapshot(self) -> "BaseError":
        """Return an independent copy (attributes and nested tree copied)."""
        clone = copy.copy(self)
        clone._attrs = dict(self._attrs)
        clone._nested = [owned_copy(nested) for nested in self._nested]
        return clone

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def with_attr(self, key: str, value: Any) -> None:
        """Set an attribute, overwriting any previous value for ``key``."""
        self._attrs[key] = value

    def with_attrs(self, attrs: Mapping[str, Any]) -> None:
        """Set every attribute of ``attrs`` (last write wins per key)."""
        for key, value in attrs.items():
            self.with_attr(key, value)

    def append(self, *errors: Error | None) -> None:
        """Append copies of nested errors in call order, skipping ``None``.

        Each argument is copied as it is at call time, so later changes to
        it are not seen by this error and nested errors always form a tree
        (appending an error to itself nests a copy of its current state).

        Raises:
            TypeError: If an argument does not satisfy the Error capability.
        """
        for err in errors:
            if err is None:
                continue
            if not isinstance(err, Error):
                raise TypeError(
                    f"nested errors must implement Error, got {type(err).__name__}"
                )
            self._nested.append(owned_copy(err))

    # ------------------------------------------------------------------
    # Typed attribute accessors
    # ------------------------------------------------------------------

    def attr(self, key: str) -> Result[Any, AttributeAccessError]:
        """Return the raw attribute value for ``key``.

        Returns:
            Success with the stored value, or Failure with
            AttributeNotFoundError when the key is absent.
        """
        if key not in self._attrs:
            return Failure(
                error=AttributeNotFoundError(
                    code=ErrorCode.ATTRIBUTE_NOT_FOUND,
                    message=f"'{key}': attribute not found",
                    key=key,
                )
            )
        return Success(value=self._attrs[key])

    def _attr_as(
        self, key: str, attribute_type: AttributeType
    ) -> Result[Any, AttributeAccessError]:
        result = self.attr(key)
        if isinstance(result, Failure):
            return result
        value = result.value
        if not narrows_to(value, attribute_type):
            return Failure(
                error=AttributeTypeMismatchError(
                    code=ErrorCode.ATTRIBUTE_TYPE_MISMATCH,
                    message=(
                        f"'{key}': cannot convert attribute value to "
                        f"{attribute_type.value}"
                    ),
                    key=key,
                    expected_type=attribute_type.value,
                    actual_type=type(value).__name__,
                )
            )
        return result

    def attr_int(self, key: str) -> Result[int, AttributeAccessError]:
        """Return the attribute as an integer."""
        return self._attr_as(key, AttributeType.INT)

    def attr_int64(self, key: str) -> Result[int, AttributeAccessError]:
        """Return the attribute as a signed 64-bit integer."""
        return self._attr_as(key, AttributeType.INT64)

    def attr_uint(self, key: str) -> Result[int, AttributeAccessError]:
        """Return the attribute as an unsigned integer."""
        return self._attr_as(key, AttributeType.UINT)

    def attr_uint64(self, key: str) -> Result[int, AttributeAccessError]:
        """Return the attribute as an unsigned 64-bit integer."""
        return self._attr_as(key, AttributeType.UINT64)

    def attr_string(self, key: str) -> Result[str, AttributeAccessError]:
        """Return the attribute as a string."""
        return self._attr_as(key, AttributeType.STRING)

    def attr_duration(self, key: str) -> Result[timedelta, AttributeAccessError]:
        """Return the attribute as a duration."""
        return self._attr_as(key, AttributeType.DURATION)

    def attr_time(self, key: str) -> Result[datetime, AttributeAccessError]:
        """Return the attribute as a timestamp."""
        return self._attr_as(key, AttributeType.TIME)

    def __str__(self) -> str:
        return self.message()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, cause={self._cause!r})"

    def __eq__(self, other: object) -> bool:
        # Value equality: nested errors are stored as copies.
        if not isinstance(other, BaseError) or type(other) is not type(self):
            return NotImplemented
        return (
            self._code == other._code
            and _same_cause(self._cause, other._cause)
            and self._attrs == other._attrs
            and self._nested == other._nested
        )

    __hash__ = None  # type: ignore[assignment]
