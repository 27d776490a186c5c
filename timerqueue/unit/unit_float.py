"""Float-based units with automatic base-unit conversion.

UnitFloat combines Python's float with family checking: the value is stored
in the family's base unit (seconds for time) and converted on the way in and
out.

Classes:
    UnitFloat: Base class for all float-based units.

Example:
    >>> class Second(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "s"
    ...
    >>> class Millisecond(Second):
    ...     SCALE_TO_SI = 0.001
    ...     SYMBOL = "ms"
    ...
    >>> delay = Millisecond(250)
    >>> print(delay)  # "250.0 ms"
    >>> print(float(delay))  # 0.25 (seconds)
"""
from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for type-safe unit values stored in base units.

    Operations are only allowed between compatible unit types (same ROOT
    family). Scaling by plain numbers is allowed.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Conversion factor to the base unit.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance, converting ``value`` to the base unit.

        Args:
            value: Numeric value in the unit's native scale.
        """
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance directly from a base-unit value."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to a plain float in another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If k is not a numeric type or is itself a unit.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"cannot scale {type(self).__name__} by {type(k).__name__}")

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide by a plain number.

        Raises:
            TypeError: If k is not a numeric type or is itself a unit.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    # -------------------------------- Comparisons --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    # a unit never equals a value outside its family
    def __eq__(self, other: object) -> bool:
        if getattr(type(other), "ROOT", None) is not self.ROOT:
            return False
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Return the value and symbol in the unit's native scale (e.g. "250.0 ms")."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return the native value with its base-unit equivalent."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} {self.ROOT.SYMBOL})"
