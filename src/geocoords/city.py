"""Defines the city model."""

from typing import Optional

from pydantic import Field
from rich import print as _pprint
from typing_extensions import Annotated

from geocoords.coordinates import Latitude, Longitude
from geocoords.exceptions import GCMissingCoordinates
from geocoords.models import GeoCoordsBaseModel


class City(GeoCoordsBaseModel):
    """Named place with an optional geographic position.

    Coordinates can be passed as numbers or as Latitude/Longitude instances and may be set after
    construction; every assignment is validated.

    Examples
    --------
    >>> city = City(name="Wrocław")
    >>> city.latitude = 51.1
    >>> city.longitude = 17.03
    >>> str(city)
    'Wrocław - 51.1° N, 17.03° W'
    """

    name: Annotated[str, Field(frozen=True)]
    latitude: Annotated[Optional[Latitude], Field(description="Latitude in degrees")] = None
    longitude: Annotated[Optional[Longitude], Field(description="Longitude in degrees")] = None

    @property
    def has_coordinates(self) -> bool:
        """Return True if both latitude and longitude are set."""
        return self.latitude is not None and self.longitude is not None

    def render(self) -> str:
        """Return the name followed by latitude and longitude with their direction codes.

        Raises
        ------
        GCMissingCoordinates
            Raised if latitude or longitude is not set.
        """
        if self.latitude is None or self.longitude is None:
            missing = [x for x in ("latitude", "longitude") if getattr(self, x) is None]
            msg = f"City {self.name!r} has no {' and '.join(missing)}"
            raise GCMissingCoordinates(msg)

        return (
            f"{self.name} - "
            f"{self.latitude} {self.latitude.direction}, "
            f"{self.longitude} {self.longitude.direction}"
        )

    def __str__(self) -> str:
        return self.render()

    def pprint(self):
        return _pprint(self)
