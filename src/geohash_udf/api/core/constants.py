"""
Geohash Constants

Constants used throughout the geohash API.
"""

from typing import Final


__all__ = [
    "BITS_PER_CHAR",
    "DEFAULT_OUTPUT_LENGTH",
    "EARTH_CIRCUMFERENCE_KM",
    "FUNCTION_ARITY",
    "FUNCTION_NAME",
    "GEOHASH_ALPHABET",
    "LATITUDE_MAX",
    "LATITUDE_MIN",
    "LONGITUDE_MAX",
    "LONGITUDE_MIN",
    "MAX_PRECISION",
    "MAX_SEARCH_PRECISION",
    "MISSING_SENTINELS",
]


# Codec constants
GEOHASH_ALPHABET: Final[str] = "0123456789bcdefghjkmnpqrstuvwxyz"
"""Geohash base32 alphabet (excludes a, i, l, o to avoid confusion)."""

BITS_PER_CHAR: Final[int] = 5
"""Number of interleaved bits carried by one geohash character."""

MAX_PRECISION: Final[int] = 12
"""Default encode precision; 12 characters is roughly 3.7cm x 1.9cm."""

MAX_SEARCH_PRECISION: Final[int] = 9
"""Finest precision suggested for radius searches (cells of about 5m)."""

EARTH_CIRCUMFERENCE_KM: Final[float] = 40075.017
"""Equatorial circumference of the WGS84 ellipsoid."""

# Coordinate limits
LATITUDE_MIN: Final[float] = -90.0
LATITUDE_MAX: Final[float] = 90.0
LONGITUDE_MIN: Final[float] = -180.0
LONGITUDE_MAX: Final[float] = 180.0

# Function constants
FUNCTION_NAME: Final[str] = "geohash"
"""Name the function is registered under."""

FUNCTION_ARITY: Final[int] = 2
"""The function takes latitude and longitude."""

DEFAULT_OUTPUT_LENGTH: Final[int] = 4
"""Number of characters the function returns unless configured otherwise."""

MISSING_SENTINELS: Final[tuple[str, ...]] = ("", "NA")
"""String values treated as missing data."""
