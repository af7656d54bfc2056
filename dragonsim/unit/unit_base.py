"""Unit families for tagged magnitudes.

A magnitude is always stored together with the unit it is expressed in. Units
that measure the same quantity form a family: the class that declares
``IS_FAMILY_ROOT = True`` becomes the ``ROOT`` of every class derived from it,
and values may only be converted between classes sharing a ``ROOT``.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Degree(Angle): ...
    >>> Degree.ROOT is Angle
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class of every unit type.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Family the unit belongs to, assigned when
            the subclass is created.
        SYMBOL (ClassVar[str]): Suffix shown after the magnitude.
        IS_FAMILY_ROOT (ClassVar[bool]): Set on the class that names a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Nearest class in the MRO that declares itself a family root, else cls.
        cls.ROOT = next(
            (klass for klass in cls.__mro__ if klass.__dict__.get("IS_FAMILY_ROOT", False)),
            cls,
        )

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]) -> None:
        """Reject a conversion target from another family.

        Raises:
            TypeError: If ``unit_type`` does not share this unit's ROOT.
        """
        target_root = getattr(unit_type, "ROOT", None)
        if target_root is not cls.ROOT:
            target = getattr(target_root, "__name__", repr(unit_type))
            msg = f"Cannot convert {cls.ROOT.__name__} units into {target}"
            raise TypeError(msg)
