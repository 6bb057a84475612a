"""
Geohash Query Function

Scalar function ``geohash(latitude, longitude)`` as a query engine calls it:

- ``initialize`` is called once with the declared argument types. It checks
  the arity, rejects unsupported types and picks an input variant per
  argument (string, number, or void).
- ``evaluate`` is called per row. Nulls and missing-value sentinels give
  ``None``; everything else is coerced to double and encoded with
  ``GeohashCodec`` at the configured output length.

Example:
    >>> function = GeohashFunction()
    >>> function.initialize(["string", "string"])
    >>> function.evaluate("45.0", "180.0")
    'zbpb'
    >>> function.evaluate("NA", "180.0") is None
    True
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import deal
from returns.result import Failure, Result, Success

from geohash_udf.api.config import FunctionConfig
from geohash_udf.api.core.constants import DEFAULT_OUTPUT_LENGTH, FUNCTION_ARITY, MISSING_SENTINELS
from geohash_udf.api.core.enums import ArgumentType
from geohash_udf.api.core.exceptions import (
    ArgumentCountError,
    ArgumentError,
    ArgumentTypeError,
    CoordinateRangeError,
)
from geohash_udf.api.geohash import GeohashCodec


logger = logging.getLogger(__name__)


__all__ = [
    "GeohashFunction",
    "InputBinding",
    "MissingInput",
    "NumberInput",
    "StringInput",
    "bind_argument",
    "geohash",
]


@dataclass(frozen=True)
class StringInput:
    """Argument declared as text; values are parsed as doubles."""

    index: int
    missing_sentinels: tuple[str, ...] = MISSING_SENTINELS

    def coerce(self, value: Any) -> Result[float | None, str]:
        """
        Convert a text value to a double.

        Returns:
            Success with the number, Success(None) for null or a missing
            sentinel, or Failure with a message for unparseable text
        """
        if value is None:
            return Success(None)
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")

        text = str(value).strip()
        if text in self.missing_sentinels:
            return Success(None)

        try:
            return Success(float(text))
        except ValueError:
            return Failure(f"Argument {self.index}: cannot convert {value!r} to double")


@dataclass(frozen=True)
class NumberInput:
    """Argument declared as a floating-point number."""

    index: int

    def coerce(self, value: Any) -> Result[float | None, str]:
        if value is None:
            return Success(None)
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            return Failure(f"Argument {self.index}: expected a number, got {type(value).__name__}")
        return Success(float(value))


@dataclass(frozen=True)
class MissingInput:
    """Argument of the void type; its value is always null."""

    index: int

    def coerce(self, value: Any) -> Result[float | None, str]:
        return Success(None)


InputBinding = StringInput | NumberInput | MissingInput


@deal.raises(ArgumentTypeError)
def bind_argument(
    index: int,
    argument_type: ArgumentType | str,
    missing_sentinels: tuple[str, ...] = MISSING_SENTINELS,
) -> InputBinding:
    """
    Select the input variant for one declared argument type.

    Args:
        index: Argument position (0-based)
        argument_type: Declared type, as enum member or type name
        missing_sentinels: Text values treated as null for string arguments

    Returns:
        Input variant used to coerce every value of this argument

    Raises:
        ArgumentTypeError: If the type is neither string-like, floating-point nor void
    """
    try:
        declared = ArgumentType(str(argument_type).lower())
    except ValueError as e:
        raise ArgumentTypeError(index, str(argument_type)) from e

    if declared.is_string:
        return StringInput(index, tuple(missing_sentinels))
    if declared.is_floating:
        return NumberInput(index)
    if declared.is_void:
        return MissingInput(index)
    raise ArgumentTypeError(index, declared.value)


class GeohashFunction:
    """
    The ``geohash(latitude, longitude)`` scalar function.

    After ``initialize`` the instance holds only immutable state and can be
    shared by concurrent evaluations.
    """

    deterministic = True

    def __init__(self, config: FunctionConfig | None = None) -> None:
        self.config = config or FunctionConfig()
        self._bindings: tuple[InputBinding, ...] | None = None

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def bindings(self) -> tuple[InputBinding, ...] | None:
        return self._bindings

    @property
    def is_initialized(self) -> bool:
        return self._bindings is not None

    @deal.raises(ArgumentCountError, ArgumentTypeError)
    def initialize(self, argument_types: Sequence[ArgumentType | str]) -> None:
        """
        Validate the declared argument types and bind input variants.

        Args:
            argument_types: Declared type of each argument

        Raises:
            ArgumentCountError: If not exactly two arguments are declared
            ArgumentTypeError: If an argument type is not accepted
        """
        if len(argument_types) != FUNCTION_ARITY:
            raise ArgumentCountError(FUNCTION_ARITY, len(argument_types))

        self._bindings = tuple(
            bind_argument(index, argument_type, self.config.missing_sentinels)
            for index, argument_type in enumerate(argument_types)
        )
        logger.debug(f"Bound {self.display_string([str(t) for t in argument_types])} to {self._bindings}")

    def evaluate(self, latitude: Any, longitude: Any) -> str | None:
        """
        Compute the geohash of one row.

        Args:
            latitude: Latitude value of the row
            longitude: Longitude value of the row

        Returns:
            Geohash of ``config.output_length`` characters, or None if either
            value is null, a missing sentinel, or not a number

        Raises:
            ArgumentError: If called before ``initialize``
            CoordinateRangeError: If the coordinates are out of range and
                ``config.strict_range`` is set
        """
        if self._bindings is None:
            raise ArgumentError(f"{self.name} must be initialized before evaluation")

        coordinates: list[float] = []
        for binding, value in zip(self._bindings, (latitude, longitude), strict=True):
            result = binding.coerce(value)
            if isinstance(result, Failure):
                logger.debug(result.failure())
                return None
            number = result.unwrap()
            if number is None:
                return None
            coordinates.append(number)

        lat, lon = coordinates
        try:
            geohash = GeohashCodec.encode(lat, lon, self.config.output_length)
        except CoordinateRangeError as e:
            if self.config.strict_range:
                raise
            logger.warning(f"Dropping out-of-range row ({lat}, {lon}): {e}")
            return None

        return geohash[: self.config.output_length]

    def evaluate_row(self, arguments: Sequence[Any]) -> str | None:
        """Evaluate a row given as a sequence of argument values."""
        if len(arguments) != FUNCTION_ARITY:
            raise ArgumentCountError(FUNCTION_ARITY, len(arguments))
        return self.evaluate(arguments[0], arguments[1])

    def display_string(self, children: Sequence[str]) -> str:
        """Render the call as it appears in a query plan."""
        return f"{self.name}({', '.join(children)})"

    def __repr__(self) -> str:
        return f"GeohashFunction(name={self.name!r}, output_length={self.config.output_length})"


def _infer_type(value: Any) -> ArgumentType | str:
    if value is None:
        return ArgumentType.VOID
    if isinstance(value, bool):
        return ArgumentType.BOOLEAN
    if isinstance(value, str | bytes):
        return ArgumentType.STRING
    if isinstance(value, int | float | Decimal):
        return ArgumentType.DOUBLE
    return type(value).__name__


def geohash(latitude: Any, longitude: Any, length: int = DEFAULT_OUTPUT_LENGTH) -> str | None:
    """
    Compute a geohash prefix the way the query function does.

    Argument types are inferred from the Python values: ``str`` is treated as
    text, ``int``/``float`` as double and ``None`` as null.

    Args:
        latitude: Latitude as text or number
        longitude: Longitude as text or number
        length: Number of characters to return (default: 4)

    Returns:
        Geohash prefix, or None for null/missing input

    Example:
        >>> geohash(0.0, 0.0)
        's000'
        >>> geohash("48.8566", "2.3522", length=7)
        'u09tvw0'
    """
    function = GeohashFunction(FunctionConfig(output_length=length))
    function.initialize([_infer_type(latitude), _infer_type(longitude)])
    return function.evaluate(latitude, longitude)
