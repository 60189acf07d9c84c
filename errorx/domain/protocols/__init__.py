"""Domain protocols (ports).

Usage:
    from errorx.domain.protocols import Error, LoggerProtocol
"""

from errorx.domain.protocols.error_protocol import Error
from errorx.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["Error", "LoggerProtocol"]
