"""Core subpackage for shared types, constants, and exceptions."""

from geohash_udf.api.core.exceptions import (
    ArgumentCountError,
    ArgumentError,
    ArgumentTypeError,
    ConfigurationError,
    CoordinateRangeError,
    DecodeFormatError,
    GeohashError,
    InvalidConfigurationError,
)
from geohash_udf.api.core.types import WORLD, Coordinate, GeoBoundingBox, validate_coordinate


__all__ = [
    "WORLD",
    "ArgumentCountError",
    "ArgumentError",
    "ArgumentTypeError",
    "ConfigurationError",
    "Coordinate",
    "CoordinateRangeError",
    "DecodeFormatError",
    "GeoBoundingBox",
    "GeohashError",
    "InvalidConfigurationError",
    "validate_coordinate",
]
