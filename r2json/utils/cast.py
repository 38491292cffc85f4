"""
Lenient coercion helpers for application code that reads parsed documents.

Each helper returns the supplied default instead of raising when the value is
None or cannot be converted.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

EMPTY = ""


def to_text(val: Any, default: str = EMPTY) -> str:
    """Return str(val), or default when val is None."""
    if val is None:
        return default
    return str(val)


def to_decimal(val: Any, default: Decimal = Decimal(0)) -> Decimal:
    """Convert numbers and numeric text to Decimal."""
    if val is None or isinstance(val, bool):
        return default
    try:
        if isinstance(val, Decimal):
            return val
        if isinstance(val, (int, str)):
            result = Decimal(val.strip() if isinstance(val, str) else val)
        elif isinstance(val, float):
            result = Decimal(repr(val))
        else:
            result = Decimal(str(val))
    except (InvalidOperation, ValueError, TypeError):
        return default
    if not result.is_finite():
        return default
    return result


def to_int(val: Any, default: int = -1) -> int:
    """Convert numbers and integral text to int, truncating fractions."""
    if val is None or isinstance(val, bool):
        return default
    if isinstance(val, int):
        return val
    try:
        if isinstance(val, (float, Decimal)):
            return int(val)
        return int(str(val).strip())
    except (ValueError, OverflowError, InvalidOperation):
        return default
