"""Core shared kernel.

Foundational pieces used across all layers:
- Result types for railway-oriented attribute access
- Attribute access error classes
- Configuration

The core module has NO dependencies on other layers.
"""

from errorx.core.enums import ErrorCode
from errorx.core.errors import (
    AttributeAccessError,
    AttributeNotFoundError,
    AttributeTypeMismatchError,
    DomainError,
)
from errorx.core.result import Failure, Result, Success

__all__ = [
    "AttributeAccessError",
    "AttributeNotFoundError",
    "AttributeTypeMismatchError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
