"""Type-safe time units for timer delays.

Architecture:
    - unit_base: Unit class with family management
    - unit_float: Float-based units with automatic base-unit conversion
    - unit_time: Time units (Second, Millisecond, Minute, Hour) and the
      ``to_milliseconds`` conversion used by the timer queues

Example:
    >>> from timerqueue.unit import Millisecond, Second, to_milliseconds
    >>> delay = Second(1) + Millisecond(500)
    >>> to_milliseconds(delay)
    1500.0
"""

from .unit_base import Number, Unit
from .unit_float import UnitFloat
from .unit_time import Hour, Millisecond, Minute, Second, Time, to_milliseconds

__all__ = [
    # Base classes
    "Number",
    "Unit",
    "UnitFloat",
    # Time units
    "Second",
    "Millisecond",
    "Minute",
    "Hour",
    "Time",
    "to_milliseconds",
]
