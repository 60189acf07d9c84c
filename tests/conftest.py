"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Settings and logger singletons are rebuilt for every test
2. ERRORX_* variables from the host shell never leak into tests
3. Common causes and error builders are available to all test modules
"""

import os
from unittest.mock import patch

import pytest

from errorx.core.config import get_settings
from errorx.core.container import get_logger
from errorx.domain.errors import BaseError


@pytest.fixture(autouse=True)
def isolated_settings():
    """Clear cached settings/logger and strip ERRORX_* environment variables.

    Tests that need specific configuration patch os.environ themselves and
    call ``get_settings.cache_clear()``.
    """
    clean_env = {k: v for k, v in os.environ.items() if not k.startswith("ERRORX_")}
    with patch.dict(os.environ, clean_env, clear=True):
        get_settings.cache_clear()
        get_logger.cache_clear()
        yield
    get_settings.cache_clear()
    get_logger.cache_clear()


@pytest.fixture
def db_down() -> RuntimeError:
    """Root cause used across tests."""
    return RuntimeError("db down")


# Test helper functions for structured errors


def create_error(
    code: int = 500,
    cause: BaseException | None = None,
    attrs: dict | None = None,
) -> BaseError:
    """Helper to create a populated BaseError for testing.

    Args:
        code: Error code (default: 500).
        cause: Underlying cause (default: RuntimeError("boom")).
        attrs: Attributes to attach (default: none).

    Returns:
        BaseError instance for testing.

    Usage:
        err = create_error()
        err = create_error(code=404, attrs={"path": "/users/1"})
    """
    err = BaseError(code, cause if cause is not None else RuntimeError("boom"))
    if attrs:
        err.with_attrs(attrs)
    return err
