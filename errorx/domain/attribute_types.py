"""Semantic attribute types and their narrowing rules.

Attributes are stored as arbitrary Python values and narrowed when read.
Narrowing is a strict type check, never a conversion: ``"3"`` is a string,
not an integer, and ``True`` is not an integer either.

Python has a single unbounded ``int``, so the fixed-width integer types are
expressed as range checks:

    INT      any int
    INT64    -2**63 <= v <= 2**63 - 1
    UINT     v >= 0
    UINT64   0 <= v <= 2**64 - 1
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Any

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


class AttributeType(Enum):
    """Semantic types the typed accessors can narrow to.

    Values are the type names used in type mismatch messages.
    """

    INT = "int"
    INT64 = "int64"
    UINT = "uint"
    UINT64 = "uint64"
    STRING = "string"
    DURATION = "duration"
    TIME = "time"


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a numeric attribute
    return isinstance(value, int) and not isinstance(value, bool)


def narrows_to(value: Any, attribute_type: AttributeType) -> bool:
    """Check whether ``value`` can be read as ``attribute_type``.

    Args:
        value: Raw stored attribute value.
        attribute_type: Requested semantic type.

    Returns:
        bool: True when the value satisfies the type's rule.
    """
    match attribute_type:
        case AttributeType.INT:
            return _is_int(value)
        case AttributeType.INT64:
            return _is_int(value) and INT64_MIN <= value <= INT64_MAX
        case AttributeType.UINT:
            return _is_int(value) and value >= 0
        case AttributeType.UINT64:
            return _is_int(value) and 0 <= value <= UINT64_MAX
        case AttributeType.STRING:
            return isinstance(value, str)
        case AttributeType.DURATION:
            return isinstance(value, timedelta)
        case AttributeType.TIME:
            return isinstance(value, datetime)
