"""Generic domain error composed over BaseError.

``GenericError`` shows how domain error types are built: it holds a
``BaseError`` and delegates every capability operation, mutator and typed
accessor to it explicitly, overriding only ``code()`` and ``message()``.

Rendered message layout::

    db down (code=500) [ retries=3 host=primary ]
       replica timed out (code=2)
          socket closed (code=7)

- the cause message followed by the code (or the synthetic unknown-cause
  message alone when no cause was given)
- attributes in insertion order, bracketed
- one line per nested error, indented once per nesting level
"""

import copy
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from errorx.core.config import get_settings
from errorx.core.errors import AttributeAccessError
from errorx.core.result import Result
from errorx.domain.errors.base_error import BaseError, UnknownCauseError
from errorx.domain.protocols.error_protocol import Error


class GenericError(Exception):
    """Catch-all domain error with full message rendering.

    Args:
        cause: Underlying failure, optional.
        code: Error code. None or 0 falls back to
            ``Settings.generic_error_code``.
    """

    def __init__(
        self, cause: BaseException | None = None, *, code: int | None = None
    ) -> None:
        if not code:
            code = get_settings().generic_error_code
        self._base = BaseError(code, cause)
        # args mirror the constructor so copy and pickle can rebuild the
        # instance; the composed BaseError is restored from __dict__.
        super().__init__(self._base.cause())
        self.__cause__ = self._base.cause()

    @property
    def base(self) -> BaseError:
        """The composed BaseError value."""
        return self._base

    def attributes(self) -> Mapping[str, Any]:
        return self._base.attributes()

    def code(self) -> int:
        return self._base.code()

    def cause(self) -> BaseException:
        return self._base.cause()

    def nested_errors(self) -> list[Error]:
        return self._base.nested_errors()

    def snapshot(self) -> "GenericError":
        """Return an independent copy (attributes and nested tree copied)."""
        clone = copy.copy(self)
        clone._base = self._base.snapshot()
        return clone

    def message(self) -> str:
        """Render code, attributes and the nested error tree."""
        cause = self._base.cause()
        if isinstance(cause, UnknownCauseError) and cause.code == self.code():
            parts = [str(cause)]
        else:
            parts = [f"{cause} (code={self.code()})"]

        attrs = self._base.attributes()
        if attrs:
            pairs = "".join(f" {key}={value}" for key, value in attrs.items())
            parts.append(f" [{pairs} ]")

        indent = " " * get_settings().nested_error_indent
        for nested in self._base.nested_errors():
            for line in nested.message().splitlines():
                parts.append(f"\n{indent}{line}")
        return "".join(parts)

    def with_attr(self, key: str, value: Any) -> None:
        self._base.with_attr(key, value)

    def with_attrs(self, attrs: Mapping[str, Any]) -> None:
        self._base.with_attrs(attrs)

    def append(self, *errors: Error | None) -> None:
        self._base.append(*errors)

    def attr(self, key: str) -> Result[Any, AttributeAccessError]:
        return self._base.attr(key)

    def attr_int(self, key: str) -> Result[int, AttributeAccessError]:
        return self._base.attr_int(key)

    def attr_int64(self, key: str) -> Result[int, AttributeAccessError]:
        return self._base.attr_int64(key)

    def attr_uint(self, key: str) -> Result[int, AttributeAccessError]:
        return self._base.attr_uint(key)

    def attr_uint64(self, key: str) -> Result[int, AttributeAccessError]:
        return self._base.attr_uint64(key)

    def attr_string(self, key: str) -> Result[str, AttributeAccessError]:
        return self._base.attr_string(key)

    def attr_duration(self, key: str) -> Result[timedelta, AttributeAccessError]:
        return self._base.attr_duration(key)

    def attr_time(self, key: str) -> Result[datetime, AttributeAccessError]:
        return self._base.attr_time(key)

    def __str__(self) -> str:
        return self.message()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenericError) or type(other) is not type(self):
            return NotImplemented
        return self._base == other._base

    __hash__ = None  # type: ignore[assignment]
