"""Defines all exceptions in the package."""


class GCBaseException(Exception):
    """Base class for all exceptions in the package"""


class LatLngError(GCBaseException, ValueError):
    """Raised if a coordinate falls outside of its domain."""

    default_message = "Coordinate is out of range"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class LatitudeOutOfRange(LatLngError):
    """Raised if a latitude is not between -90 and 90 degrees."""

    default_message = "Latitude must be between -90° and 90°"


class LongitudeOutOfRange(LatLngError):
    """Raised if a longitude is not between -180 and 180 degrees."""

    default_message = "Longitude must be between -180° and 180°"


class GCUnknownUnit(GCBaseException, ValueError):
    """Raised if a distance unit token is not recognized."""


class GCMissingCoordinates(GCBaseException):
    """Raised if a city is rendered before its coordinates are set."""
