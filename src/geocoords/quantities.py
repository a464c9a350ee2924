"""This module defines pint-backed quantities.

To create a new quantity for a given base unit, subclass ``BaseQuantity`` and set
``__base_unit__``. Magnitudes passed without units are interpreted in the base unit.
"""

from typing import Type

import pint

ureg = pint.UnitRegistry()


class BaseQuantity(ureg.Quantity):  # type: ignore
    """Interface for base quantity."""

    __base_unit__ = None
    _REGISTRY = ureg

    def __new__(cls: Type["BaseQuantity"], value, units=None):
        if units is None:
            units = cls.__base_unit__
        return super().__new__(cls, value, units)  # type: ignore

    def __init_subclass__(cls, **kwargs):
        if not cls.__base_unit__:
            msg = "__base_unit__ should be defined"
            raise TypeError(msg)
        super().__init_subclass__(**kwargs)

    def in_base_units(self) -> "BaseQuantity":
        """Return the quantity converted to the base unit of its class."""
        return self.to(self.__base_unit__)


class Distance(BaseQuantity):
    """Length expressed in any metric unit."""

    __base_unit__ = "meter"
