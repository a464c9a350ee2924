import importlib.metadata as metadata

from loguru import logger

logger.disable("geocoords")

__version__ = metadata.metadata("geocoords")["Version"]

from .city import City
from .coordinates import Coordinate, Latitude, Longitude
from .direction import Direction
from .exceptions import (
    GCBaseException,
    GCMissingCoordinates,
    GCUnknownUnit,
    LatLngError,
    LatitudeOutOfRange,
    LongitudeOutOfRange,
)
from .quantities import Distance
from .units import DistanceUnit

__all__ = (
    "City",
    "Coordinate",
    "Direction",
    "Distance",
    "DistanceUnit",
    "GCBaseException",
    "GCMissingCoordinates",
    "GCUnknownUnit",
    "LatLngError",
    "LatitudeOutOfRange",
    "Latitude",
    "Longitude",
    "LongitudeOutOfRange",
)
