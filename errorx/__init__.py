"""errorx - structured errors with codes, attributes and nested causes.

Usage:
    from errorx import BaseError, Success, Failure

    error = BaseError(500, ConnectionError("db down"))
    error.with_attr("retries", 3)
    match error.attr_int("retries"):
        case Success(value=retries):
            ...
        case Failure(error=failure):
            ...
"""

from errorx.core import (
    AttributeAccessError,
    AttributeNotFoundError,
    AttributeTypeMismatchError,
    DomainError,
    ErrorCode,
    Failure,
    Result,
    Success,
)
from errorx.domain.attribute_types import AttributeType
from errorx.domain.errors import BaseError, GenericError, UnknownCauseError
from errorx.domain.protocols import Error

__all__ = [
    "AttributeAccessError",
    "AttributeNotFoundError",
    "AttributeType",
    "AttributeTypeMismatchError",
    "BaseError",
    "DomainError",
    "Error",
    "ErrorCode",
    "Failure",
    "GenericError",
    "Result",
    "Success",
    "UnknownCauseError",
]
