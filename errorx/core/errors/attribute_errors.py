"""Attribute access failures.

The typed attribute accessors of ``BaseError`` can fail in exactly two ways,
and callers frequently need to branch differently on each:

- AttributeNotFoundError: the key was never set
- AttributeTypeMismatchError: the key is set, but its value cannot be
  narrowed to the requested type

Usage:
    from errorx.core.result import Failure

    return Failure(
        error=AttributeNotFoundError(
            code=ErrorCode.ATTRIBUTE_NOT_FOUND,
            message="'retries': attribute not found",
            key="retries",
        )
    )
"""

from dataclasses import dataclass

from errorx.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AttributeAccessError(DomainError):
    """Common base of attribute access failures.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        key: Attribute key that was requested.
        details: Additional context.
    """

    key: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AttributeNotFoundError(AttributeAccessError):
    """Requested attribute key is absent.

    Attributes:
        code: ErrorCode.ATTRIBUTE_NOT_FOUND.
        message: Human-readable message.
        key: Attribute key that was requested.
        details: Additional context.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AttributeTypeMismatchError(AttributeAccessError):
    """Attribute is present but cannot be narrowed to the requested type.

    Attributes:
        code: ErrorCode.ATTRIBUTE_TYPE_MISMATCH.
        message: Human-readable message.
        key: Attribute key that was requested.
        expected_type: Name of the requested semantic type (``int64``, ``string``...).
        actual_type: Python type name of the stored value.
        details: Additional context.
    """

    expected_type: str
    actual_type: str
