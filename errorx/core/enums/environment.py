"""Runtime environment types.

Used by Settings to decide how the ambient logging stack renders output.

Environments:
- DEVELOPMENT: Human-readable colored console logs
- TESTING: JSON logs for automated test runs
- CI: JSON logs for continuous integration
- PRODUCTION: JSON logs for log aggregation
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
