"""
Geohash Query Function Library

Computes geohash prefixes for latitude/longitude pairs the way a query
engine's scalar function does, on top of a bit-exact geohash codec.

Example:
    >>> from geohash_udf import GeohashCodec, GeohashFunction
    >>> GeohashCodec.encode(57.64911, 10.40744, 11)
    'u4pruydqqvj'
    >>> function = GeohashFunction()
    >>> function.initialize(["double", "double"])
    >>> function.evaluate(57.64911, 10.40744)
    'u4pr'
"""

# Configuration
from geohash_udf.api.config import FunctionConfig, load_config

# Exceptions
from geohash_udf.api.core.exceptions import (
    ArgumentCountError,
    ArgumentError,
    ArgumentTypeError,
    CoordinateRangeError,
    DecodeFormatError,
    GeohashError,
    InvalidConfigurationError,
)

# Type definitions
from geohash_udf.api.core.enums import ArgumentType
from geohash_udf.api.core.types import Coordinate, GeoBoundingBox

# Query function
from geohash_udf.api.function import GeohashFunction, geohash

# Codec
from geohash_udf.api.geohash import GeohashCodec, decode, decode_point, encode, neighbors


__version__ = "0.1.0"

__all__ = [
    "ArgumentCountError",
    "ArgumentError",
    "ArgumentType",
    "ArgumentTypeError",
    "Coordinate",
    "CoordinateRangeError",
    "DecodeFormatError",
    # Configuration
    "FunctionConfig",
    "GeoBoundingBox",
    # Codec
    "GeohashCodec",
    # Exceptions
    "GeohashError",
    # Query function
    "GeohashFunction",
    "InvalidConfigurationError",
    "decode",
    "decode_point",
    "encode",
    "geohash",
    "load_config",
    "neighbors",
]
