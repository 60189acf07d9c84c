"""Structured logging of Error values.

Flattens an ``Error`` (and its nested error tree) into key-value context
suitable for any LoggerProtocol adapter, so that the code, cause and
attributes of a structured error land as separate log fields instead of one
pre-rendered string.

Context layout::

    {
        "error_code": 500,
        "error_message": "error: db down",
        "error_cause": "db down",
        "error_cause_type": "ConnectionError",
        "error_attrs": {"retries": 3, "elapsed": "0:00:02"},
        "nested_errors": [{...same layout...}],
    }

Attribute values that are not JSON scalars are rendered with ``str()``.

Usage:
    from errorx.core.container import get_logger
    from errorx.infrastructure.logging.error_logging import log_error

    log_error(get_logger(), error, "payment capture failed", order_id=order_id)
"""

from typing import Any

from errorx.domain.protocols.error_protocol import Error
from errorx.domain.protocols.logger_protocol import LoggerProtocol

_SCALARS = (str, int, float, bool, type(None))


def _loggable(value: Any) -> Any:
    if isinstance(value, _SCALARS):
        return value
    return str(value)


def error_context(error: Error) -> dict[str, Any]:
    """Flatten an Error into structured log context.

    Args:
        error: Any value satisfying the Error capability.

    Returns:
        dict[str, Any]: Context with code, message, cause, attributes and
            the nested errors flattened recursively.
    """
    cause = error.cause()
    return {
        "error_code": error.code(),
        "error_message": error.message(),
        "error_cause": str(cause),
        "error_cause_type": type(cause).__name__,
        "error_attrs": {
            key: _loggable(value) for key, value in error.attributes().items()
        },
        "nested_errors": [error_context(nested) for nested in error.nested_errors()],
    }


def log_error(
    logger: LoggerProtocol,
    error: Error,
    message: str = "error occurred",
    /,
    **context: Any,
) -> None:
    """Log an Error at error level with its flattened context.

    Args:
        logger: Logger adapter.
        error: Error to report.
        message: Log message.
        **context: Extra context; wins over error fields on key collision.
    """
    logger.error(message, **(error_context(error) | context))
