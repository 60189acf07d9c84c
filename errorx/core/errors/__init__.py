"""Core errors package.

Usage:
    from errorx.core.errors import AttributeNotFoundError, AttributeTypeMismatchError
"""

from errorx.core.errors.attribute_errors import (
    AttributeAccessError,
    AttributeNotFoundError,
    AttributeTypeMismatchError,
)
from errorx.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "AttributeAccessError",
    "AttributeNotFoundError",
    "AttributeTypeMismatchError",
]
