"""Numeric type preservation utilities.

Input documents are usually JSON, where a parameter declared as ``integer``
can arrive as ``4.0``. The helpers here accept such values only when no
precision would be lost.

Design principles:
- Fail loudly on precision loss
- Never coerce booleans, which are ints in Python
"""

import math

__all__ = ["safe_int", "is_whole_number"]


def is_whole_number(value: float) -> bool:
    """Check if a float is finite and has no fractional part.

    Examples:
        >>> is_whole_number(4.0)
        True
        >>> is_whole_number(4.5)
        False
        >>> is_whole_number(float("inf"))
        False
    """
    return math.isfinite(value) and value == math.trunc(value)


def safe_int(value: int | float) -> int:
    """Convert to int, raising on precision loss.

    Args:
        value: Value to convert (int or float)

    Returns:
        Integer value

    Raises:
        ValueError: If float has a non-zero fractional part or is not finite
        TypeError: If value is not int or float (booleans included)

    Examples:
        >>> safe_int(5)
        5
        >>> safe_int(5.0)  # No precision loss
        5
        >>> safe_int(5.9)
        Traceback (most recent call last):
            ...
        ValueError: Cannot convert 5.9 to int without precision loss
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"Expected int or float, got {type(value).__name__}: {value!r}"
        )

    if isinstance(value, int):
        return value

    if not is_whole_number(value):
        raise ValueError(f"Cannot convert {value} to int without precision loss")
    return int(value)
