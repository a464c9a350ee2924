"""Defines compass directions derived from coordinates."""

from enum import Enum


class Direction(str, Enum):
    """Compass direction of a coordinate. The value is the single-letter code."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"
    CENTER = ""

    def __str__(self) -> str:
        return self.value
