"""Defines distance units and their parser."""

from enum import Enum

from geocoords.exceptions import GCUnknownUnit
from geocoords.quantities import Distance


class DistanceUnit(str, Enum):
    """Unit of distance. The value is the pint unit name."""

    CENTIMETERS = "centimeter"
    METERS = "meter"
    KILOMETERS = "kilometer"

    @classmethod
    def from_str(cls, token: str) -> "DistanceUnit":
        """Parse a case-insensitive unit token such as ``cm`` or ``Kilometers``.

        Raises
        ------
        GCUnknownUnit
            Raised if the token does not name a known unit.
        """
        unit = _TOKENS.get(token.strip().upper())
        if unit is None:
            msg = f"Unknown unit: {token!r}"
            raise GCUnknownUnit(msg)
        return unit

    @property
    def symbol(self) -> str:
        """Return the short token of the unit."""
        return _SYMBOLS[self]

    def quantity(self, magnitude: float) -> Distance:
        """Return a distance of the given magnitude in this unit."""
        return Distance(magnitude, self.value)

    def __str__(self) -> str:
        return self.value


_SYMBOLS = {
    DistanceUnit.CENTIMETERS: "cm",
    DistanceUnit.METERS: "m",
    DistanceUnit.KILOMETERS: "km",
}

_TOKENS = {
    "CM": DistanceUnit.CENTIMETERS,
    "CENTIMETERS": DistanceUnit.CENTIMETERS,
    "M": DistanceUnit.METERS,
    "METERS": DistanceUnit.METERS,
    "KM": DistanceUnit.KILOMETERS,
    "KILOMETERS": DistanceUnit.KILOMETERS,
}
