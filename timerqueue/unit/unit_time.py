"""Time unit definitions used for timer delays and due times.

All time units are rooted at Second. Timer queues keep their clock in plain
milliseconds, so ``to_milliseconds`` is the single conversion point between
unit values and the numbers the queues compare.

Classes:
    Second: Base time unit.
    Millisecond: 1/1000 of a second.
    Minute: 60 seconds.
    Hour: 3600 seconds.

Type Aliases:
    Time: Union type for all time units.

Example:
    >>> to_milliseconds(Second(1.5))
    1500.0
    >>> to_milliseconds(250)  # plain numbers are already milliseconds
    250.0
"""

from __future__ import annotations

from .unit_base import Number, Unit
from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: Second (base unit of the time family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Millisecond(Second):
    """Time unit: Millisecond (0.001 seconds).

    The native resolution of every timer queue clock.

    Example:
        >>> poll = Millisecond(1)
        >>> print(poll)  # "1.0 ms"
        >>> print(float(poll))  # 0.001 (seconds)
    """

    SCALE_TO_SI = 0.001
    SYMBOL = "ms"


class Minute(Second):
    """Time unit: Minute (60 seconds)."""

    SCALE_TO_SI = 60.0
    SYMBOL = "min"


class Hour(Second):
    """Time unit: Hour (3600 seconds)."""

    SCALE_TO_SI = 3600.0
    SYMBOL = "h"


Time = Second | Millisecond | Minute | Hour  # Type alias for any time unit


def to_milliseconds(value: Time | Number) -> float:
    """Convert a time unit or a plain number of milliseconds to a float.

    Args:
        value: A Time unit of any scale, or an int/float already expressed in
            milliseconds.

    Returns:
        float: The value in milliseconds.

    Raises:
        TypeError: If ``value`` is a unit of another family, a bool, or not
            numeric at all.
    """
    if isinstance(value, Unit):
        return value.to(Millisecond)
    if isinstance(value, bool) or not isinstance(value, Number):
        raise TypeError(f"expected milliseconds or a Time unit, got {type(value).__name__}")
    return float(value)
