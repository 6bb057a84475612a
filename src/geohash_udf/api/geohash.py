"""
Geohash encoding and decoding.

Geohash encodes geographic coordinates into short base32 strings. Each
character carries five interleaved bits, alternating between longitude and
latitude starting with longitude. Every bit halves the current interval of
its axis, so a longer geohash denotes a smaller bounding box and any prefix
of a geohash denotes a box containing it.

Reference: https://en.wikipedia.org/wiki/Geohash
"""

from __future__ import annotations

import logging

import deal

from geohash_udf.api.core.constants import (
    BITS_PER_CHAR,
    EARTH_CIRCUMFERENCE_KM,
    GEOHASH_ALPHABET,
    LATITUDE_MAX,
    LATITUDE_MIN,
    LONGITUDE_MAX,
    LONGITUDE_MIN,
    MAX_PRECISION,
    MAX_SEARCH_PRECISION,
)
from geohash_udf.api.core.exceptions import CoordinateRangeError, DecodeFormatError
from geohash_udf.api.core.types import WORLD, Coordinate, GeoBoundingBox, validate_coordinate


logger = logging.getLogger(__name__)


__all__ = [
    "GeohashCodec",
    "bounding_box",
    "cell_width_km",
    "cells_for_search",
    "decode",
    "decode_point",
    "encode",
    "neighbors",
    "precision_for_radius",
]

# Reverse lookup: character -> 5-bit value
_DECODE_MAP: dict[str, int] = {char: index for index, char in enumerate(GEOHASH_ALPHABET)}

# Most significant bit first
_BIT_MASKS: tuple[int, ...] = tuple(1 << shift for shift in reversed(range(BITS_PER_CHAR)))


def _validate_precision(precision: int) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise CoordinateRangeError(f"Precision must be an integer, got {precision!r}")
    if precision < 1:
        raise CoordinateRangeError(f"Precision must be at least 1, got {precision}")


class GeohashCodec:
    """
    Stateless geohash encoder/decoder.

    All methods are static and free of side effects, so one codec (or the
    module-level functions) can be shared between any number of threads.
    """

    alphabet = GEOHASH_ALPHABET

    @staticmethod
    @deal.raises(CoordinateRangeError)
    @deal.post(lambda result: all(char in GEOHASH_ALPHABET for char in result), message="Alphabet closure")
    def encode(latitude: float, longitude: float, precision: int = MAX_PRECISION) -> str:
        """
        Encode latitude and longitude into a geohash string.

        Args:
            latitude: Latitude in degrees (-90 to 90)
            longitude: Longitude in degrees (-180 to 180)
            precision: Number of characters to produce (default: 12). Each
                character narrows the cell by 5 bits; see ``cell_width_km``

        Returns:
            Geohash string of exactly ``precision`` characters

        Raises:
            CoordinateRangeError: If a coordinate is non-finite or out of range,
                or precision is not a positive integer

        Example:
            >>> GeohashCodec.encode(48.8566, 2.3522, 7)
            'u09tvw0'
        """
        validate_coordinate(latitude, longitude)
        _validate_precision(precision)

        lat_min, lat_max = LATITUDE_MIN, LATITUDE_MAX
        lon_min, lon_max = LONGITUDE_MIN, LONGITUDE_MAX

        # Even bits are longitude, odd bits are latitude
        bits = 0
        bit_count = 0
        geohash: list[str] = []

        while len(geohash) < precision:
            if bit_count % 2 == 0:
                mid = (lon_min + lon_max) / 2.0
                if longitude >= mid:
                    bits = bits * 2 + 1
                    lon_min = mid
                else:
                    bits = bits * 2
                    lon_max = mid
            else:
                mid = (lat_min + lat_max) / 2.0
                if latitude >= mid:
                    bits = bits * 2 + 1
                    lat_min = mid
                else:
                    bits = bits * 2
                    lat_max = mid

            bit_count += 1

            # Every 5 bits, encode to base32 character
            if bit_count % BITS_PER_CHAR == 0:
                geohash.append(GEOHASH_ALPHABET[bits])
                bits = 0

        return "".join(geohash)

    @staticmethod
    @deal.raises(DecodeFormatError)
    def decode(geohash: str) -> GeoBoundingBox:
        """
        Decode a geohash string into its bounding box.

        Decoding is case-insensitive.

        Args:
            geohash: Non-empty geohash string

        Returns:
            Bounding box of every point that encodes to this prefix

        Raises:
            DecodeFormatError: If the string is empty or contains a character
                outside the geohash alphabet

        Example:
            >>> GeohashCodec.decode('ezs42').contains(42.6, -5.6)
            True
        """
        if not geohash:
            raise DecodeFormatError("Geohash must not be empty")

        box = WORLD
        is_even = True

        for position, char in enumerate(geohash):
            # ASCII only: str.lower() folds e.g. KELVIN SIGN to 'k'
            value = _DECODE_MAP.get(char.lower()) if char.isascii() else None
            if value is None:
                raise DecodeFormatError(
                    f"Invalid geohash character {char!r} at position {position}",
                    character=char,
                    position=position,
                )

            for mask in _BIT_MASKS:
                if is_even:  # Longitude bit
                    box = box.bisect_lon(bool(value & mask))
                else:  # Latitude bit
                    box = box.bisect_lat(bool(value & mask))
                is_even = not is_even

        return box

    @staticmethod
    def decode_point(geohash: str) -> Coordinate:
        """Decode a geohash to the center of its bounding box."""
        return GeohashCodec.decode(geohash).center


encode = GeohashCodec.encode
decode = GeohashCodec.decode
decode_point = GeohashCodec.decode_point
bounding_box = GeohashCodec.decode


def _wrap_longitude(longitude: float) -> float:
    if longitude >= LONGITUDE_MAX:
        return longitude - 360.0
    if longitude < LONGITUDE_MIN:
        return longitude + 360.0
    return longitude


def neighbors(geohash: str) -> list[str]:
    """
    Get the neighboring geohashes (north, south, east, west, and diagonals).

    Longitude wraps across the antimeridian. Cells that would lie beyond a
    pole do not exist and are left out, so a cell touching a pole has five
    neighbors instead of eight.

    Args:
        geohash: Geohash string

    Returns:
        List of up to 8 neighboring geohash strings of the same length
    """
    box = decode(geohash)
    center = box.center
    height = box.max_lat - box.min_lat
    width = box.max_lon - box.min_lon
    precision = len(geohash)

    neighbors_list: list[str] = []
    for dlat in (height, 0.0, -height):
        neighbor_lat = center.latitude + dlat
        if not LATITUDE_MIN < neighbor_lat < LATITUDE_MAX:
            continue
        for dlon in (-width, 0.0, width):
            if dlat == 0 and dlon == 0:
                continue  # Skip center cell
            neighbor_lon = _wrap_longitude(center.longitude + dlon)
            neighbors_list.append(encode(neighbor_lat, neighbor_lon, precision))

    own = geohash.lower()
    return [cell for cell in dict.fromkeys(neighbors_list) if cell != own]


def cell_width_km(precision: int) -> float:
    """
    East-west extent of a geohash cell at the equator.

    A geohash of ``precision`` characters spends ``ceil(5 * precision / 2)``
    bits on longitude, halving the 360 degree circle once per bit.
    """
    _validate_precision(precision)
    lon_bits = (BITS_PER_CHAR * precision + 1) // 2
    return EARTH_CIRCUMFERENCE_KM / (1 << lon_bits)


@deal.pre(lambda radius_km: radius_km >= 0, message="Radius must not be negative", exception=CoordinateRangeError)
def precision_for_radius(radius_km: float) -> int:
    """
    Coarsest precision whose cells are no wider than ``radius_km``.

    A search at this precision only needs the center cell and its ring of
    neighbors. Radii below the width of a precision 8 cell (about 38m) all
    map to ``MAX_SEARCH_PRECISION``.

    >>> precision_for_radius(100.0)
    4
    """
    for precision in range(1, MAX_SEARCH_PRECISION):
        if cell_width_km(precision) <= radius_km:
            return precision
    return MAX_SEARCH_PRECISION


def cells_for_search(geohash: str, radius_km: float) -> list[str]:
    """
    Get geohash prefixes covering points within a radius of a cell.

    This is the cell itself, truncated to the precision suited to the radius,
    and its neighbors at that precision.

    Args:
        geohash: Geohash string for the search center
        radius_km: Search radius in kilometers

    Returns:
        List of geohash prefixes to search, center first
    """
    precision = precision_for_radius(radius_km)
    search_geohash = geohash[:precision].lower()
    logger.debug(f"Searching {radius_km}km around {geohash} at precision {len(search_geohash)}")

    return list(dict.fromkeys([search_geohash, *neighbors(search_geohash)]))
