"""Structured error types.

Usage:
    from errorx.domain.errors import BaseError, GenericError
"""

from errorx.domain.errors.base_error import BaseError, UnknownCauseError
from errorx.domain.errors.generic_error import GenericError

__all__ = ["BaseError", "GenericError", "UnknownCauseError"]
