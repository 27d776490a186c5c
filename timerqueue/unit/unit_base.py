"""Base unit class for type-safe time quantities.

Every unit class belongs to a family identified by its ROOT class. The ROOT is
resolved automatically when the class is created: it is the first class in the
MRO that sets ``IS_FAMILY_ROOT = True``. Arithmetic and comparisons are only
allowed between members of the same family, so a delay can never be mixed
with a bare number by accident.

Classes:
    Unit: Base class for all unit types with family management.

Example:
    >>> class Second(Unit):
    ...     IS_FAMILY_ROOT = True  # ROOT of the time family
    >>> class Millisecond(Second):
    ...     pass  # ROOT = Second
    >>> Millisecond.ROOT is Second
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units inherit from UnitFloat rather than directly from this
    class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the ROOT class of a newly created unit class.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        roots = (base for base in cls.__mro__ if base.__dict__.get("IS_FAMILY_ROOT", False))
        cls.ROOT = next(roots, cls)

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Check that ``unit_type`` belongs to the same unit family.

        Args:
            unit_type: The other type taking part in the operation.

        Raises:
            TypeError: If ``unit_type`` is not a unit, or belongs to another
                family.
        """
        root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not root:
            msg = f"incompatible units: {cls.ROOT.__name__} and {unit_type.__name__}"
            raise TypeError(msg)
