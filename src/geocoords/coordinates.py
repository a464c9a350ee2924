"""This module contains the range-checked latitude and longitude types.

A coordinate wraps a single signed number and guarantees that it lies within the closed
interval ``[-__max_value__, __max_value__]`` of its kind. Python integers, floats, fractions and
the signed numpy scalar types are supported. Integer bounds are always checked on Python
integers, so fixed-width numpy integers never overflow during the check.
"""

import numbers
import operator
from typing import Any, Callable, ClassVar, Generic, Type, TypeVar

import numpy as np
from loguru import logger
from pydantic import GetCoreSchemaHandler, SerializationInfo
from pydantic_core import core_schema

from geocoords.direction import Direction
from geocoords.exceptions import LatLngError, LatitudeOutOfRange, LongitudeOutOfRange

Number = int | float | np.signedinteger | np.floating
NumberT = TypeVar("NumberT", bound=Number)


def is_number(value: Any) -> bool:
    """Return True if the value can be held by a coordinate."""
    if isinstance(value, (bool, np.bool_, np.unsignedinteger)):
        return False
    return isinstance(value, numbers.Real)


def check_number(value: Any) -> None:
    """Raise TypeError if the value can not be held by a coordinate."""
    if not is_number(value):
        msg = f"Expected a signed real number, got {type(value).__name__}: {value!r}"
        raise TypeError(msg)


class Coordinate(Generic[NumberT]):
    """Interface for a validated coordinate.

    Subclasses must define ``__max_value__`` and ``__error__`` and implement ``_classify``.
    Instances are immutable; arithmetic returns new instances.
    """

    __slots__ = ("_value",)
    __max_value__: ClassVar[int]
    __error__: ClassVar[Type[LatLngError]]

    # Make numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        if not getattr(cls, "__max_value__", None) or not getattr(cls, "__error__", None):
            msg = "__max_value__ and __error__ should be defined"
            raise TypeError(msg)
        super().__init_subclass__(**kwargs)

    def __init__(self, value: NumberT) -> None:
        check_number(value)
        if not self._in_range(value):
            logger.debug("Rejected {} value {}", type(self).__name__, value)
            raise self.__error__()
        object.__setattr__(self, "_value", value)

    def __reduce__(self):
        return type(self), (self._value,)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def value(self) -> NumberT:
        """Return the wrapped number."""
        return self._value

    @property
    def direction(self) -> Direction:
        """Return the compass direction of the coordinate."""
        return self._classify(self._value)

    @classmethod
    def validate(cls, value: Any) -> bool:
        """Return True if the value would construct a valid coordinate of this kind."""
        return is_number(value) and cls._in_range(value)

    @classmethod
    def _in_range(cls, value: Any) -> bool:
        if isinstance(value, numbers.Integral):
            return -cls.__max_value__ <= int(value) <= cls.__max_value__
        # NaN compares False on both sides and is therefore rejected.
        return bool(-cls.__max_value__ <= value <= cls.__max_value__)

    @staticmethod
    def _classify(value: Any) -> Direction:
        raise NotImplementedError

    def try_add(self, rhs: "NumberT | Coordinate[NumberT]") -> "Coordinate[NumberT]":
        """Add a number or a coordinate of the same kind and return a new coordinate.

        Parameters
        ----------
        rhs : number | Coordinate
            Delta to add. Coordinates must be of the same kind.

        Raises
        ------
        LatLngError
            Raised if the sum is out of range for this kind. No wraparound is performed.
        OverflowError
            Raised if the sum is in range but does not fit the fixed-width integer type of this
            coordinate, e.g. 150 for an ``np.int8`` longitude.
        TypeError
            Raised if rhs is not a number or is a coordinate of another kind.
        """
        return self._combine(rhs, operator.add)

    def try_subtract(self, rhs: "NumberT | Coordinate[NumberT]") -> "Coordinate[NumberT]":
        """Subtract a number or a coordinate of the same kind and return a new coordinate.

        Raises
        ------
        LatLngError
            Raised if the difference is out of range for this kind.
        OverflowError
            Raised if the difference does not fit the fixed-width integer type of this coordinate.
        TypeError
            Raised if rhs is not a number or is a coordinate of another kind.
        """
        return self._combine(rhs, operator.sub)

    def _combine(self, rhs: Any, op: Callable[[Any, Any], Any]) -> "Coordinate[NumberT]":
        delta = self._operand_value(rhs)
        if isinstance(self._value, numbers.Integral) and isinstance(delta, numbers.Integral):
            result = op(int(self._value), int(delta))
            if self._in_range(result):
                result = self._to_value_type(result)
        else:
            result = op(self._value, delta)

        if not self._in_range(result):
            logger.debug(
                "{} {} {} {} is out of range",
                type(self).__name__,
                self._value,
                "+" if op is operator.add else "-",
                delta,
            )
            raise self.__error__()
        return type(self)(result)

    def _to_value_type(self, result: int) -> Any:
        value_type = type(self._value)
        if issubclass(value_type, np.integer):
            info = np.iinfo(value_type)
            if not info.min <= result <= info.max:
                msg = f"{type(self).__name__} result {result} does not fit {value_type.__name__}"
                raise OverflowError(msg)
        return value_type(result)

    def _operand_value(self, rhs: Any) -> Any:
        if isinstance(rhs, Coordinate):
            if type(rhs) is not type(self):
                msg = f"Cannot combine {type(self).__name__} with {type(rhs).__name__}"
                raise TypeError(msg)
            return rhs.value
        check_number(rhs)
        return rhs

    def _is_operand(self, other: Any) -> bool:
        return type(other) is type(self) or is_number(other)

    def __add__(self, other: Any) -> "Coordinate[NumberT]":
        if not self._is_operand(other):
            return NotImplemented
        return self.try_add(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Coordinate[NumberT]":
        if not self._is_operand(other):
            return NotImplemented
        return self.try_subtract(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return type(self) is type(other) and bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return f"{self._value}°"

    # Required for pydantic validation
    @classmethod
    def __get_pydantic_core_schema__(
        cls, _: Type["Coordinate"], handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.with_info_after_validator_function(
            cls._validate,
            core_schema.any_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize,
                info_arg=True,
                return_schema=core_schema.any_schema(),
            ),
        )

    # Required for pydantic validation
    @classmethod
    def _validate(cls, field_value: Any, _: core_schema.ValidationInfo) -> "Coordinate":
        if type(field_value) is cls:
            return field_value
        if isinstance(field_value, Coordinate):
            msg = f"Expected {cls.__name__}, got {type(field_value).__name__}"
            raise ValueError(msg)
        if not is_number(field_value):
            msg = f"{cls.__name__} must be a number, got {type(field_value).__name__}"
            raise ValueError(msg)
        return cls(field_value)

    @classmethod
    def _serialize(cls, input_value: "Coordinate", info: SerializationInfo) -> int | float:
        value = input_value.value
        if isinstance(value, np.generic):
            value = value.item()
        if info.mode == "json" and not isinstance(value, (int, float)):
            value = float(value)
        return value


class Latitude(Coordinate[NumberT]):
    """Latitude in degrees, between -90 and 90 inclusive."""

    __slots__ = ()
    __max_value__ = 90
    __error__ = LatitudeOutOfRange

    @staticmethod
    def _classify(value: Any) -> Direction:
        if value < 0:
            return Direction.SOUTH
        if value > 0:
            return Direction.NORTH
        return Direction.CENTER


class Longitude(Coordinate[NumberT]):
    """Longitude in degrees, between -180 and 180 inclusive.

    Negative values are classified as east and positive values as west.
    """

    __slots__ = ()
    __max_value__ = 180
    __error__ = LongitudeOutOfRange

    @staticmethod
    def _classify(value: Any) -> Direction:
        if value < 0:
            return Direction.EAST
        if value > 0:
            return Direction.WEST
        return Direction.CENTER
