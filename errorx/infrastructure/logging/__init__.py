"""Logging adapters and helpers.

Usage:
    from errorx.infrastructure.logging import ConsoleAdapter, log_error
"""

from errorx.infrastructure.logging.console_adapter import ConsoleAdapter
from errorx.infrastructure.logging.error_logging import error_context, log_error

__all__ = ["ConsoleAdapter", "error_context", "log_error"]
