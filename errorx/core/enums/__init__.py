"""Core enums package.

Usage:
    from errorx.core.enums import ErrorCode, Environment
"""

from errorx.core.enums.environment import Environment
from errorx.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
