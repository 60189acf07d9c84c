"""Attribute access error codes (machine-readable).

These codes classify the failures returned by the typed attribute accessors
of structured errors. They are distinct from the opaque integer codes that
callers attach to their own errors.

Categories:
- Lookup errors (ATTRIBUTE_NOT_FOUND)
- Narrowing errors (ATTRIBUTE_TYPE_MISMATCH)
"""

from enum import Enum


class ErrorCode(Enum):
    """Attribute access error codes (machine-readable)."""

    ATTRIBUTE_NOT_FOUND = "attribute_not_found"
    ATTRIBUTE_TYPE_MISMATCH = "attribute_type_mismatch"
