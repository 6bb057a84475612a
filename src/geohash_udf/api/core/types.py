"""
Type definitions for geohash encoding and decoding.

This module contains the dataclasses shared by the codec and the
function adapter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import LATITUDE_MAX, LATITUDE_MIN, LONGITUDE_MAX, LONGITUDE_MIN
from .exceptions import CoordinateRangeError


__all__ = [
    "WORLD",
    "Coordinate",
    "GeoBoundingBox",
    "validate_coordinate",
]


def validate_coordinate(latitude: float, longitude: float) -> None:
    """
    Check that a latitude/longitude pair can be encoded.

    Args:
        latitude: Latitude in degrees (-90 to +90)
        longitude: Longitude in degrees (-180 to +180)

    Raises:
        CoordinateRangeError: If either value is NaN, infinite or out of range
    """
    if not math.isfinite(latitude):
        raise CoordinateRangeError(f"Latitude must be finite, got {latitude}")
    if not math.isfinite(longitude):
        raise CoordinateRangeError(f"Longitude must be finite, got {longitude}")
    if not LATITUDE_MIN <= latitude <= LATITUDE_MAX:
        raise CoordinateRangeError(f"Latitude must be -90 to +90 degrees, got {latitude}")
    if not LONGITUDE_MIN <= longitude <= LONGITUDE_MAX:
        raise CoordinateRangeError(f"Longitude must be -180 to +180 degrees, got {longitude}")


@dataclass(frozen=True)
class Coordinate:
    """
    A geographic point on Earth.

    Attributes:
        latitude: Latitude in degrees (-90 to +90, positive=North, negative=South)
        longitude: Longitude in degrees (-180 to +180, positive=East, negative=West)
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        validate_coordinate(self.latitude, self.longitude)

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.6f}°{lat_dir}, {abs(self.longitude):.6f}°{lon_dir}"


@dataclass(frozen=True)
class GeoBoundingBox:
    """
    Latitude/longitude rectangle consistent with a geohash prefix.

    Attributes:
        min_lat: Southern edge in degrees
        max_lat: Northern edge in degrees
        min_lon: Western edge in degrees
        max_lon: Eastern edge in degrees
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self) -> None:
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            raise CoordinateRangeError(f"Degenerate bounding box: {self!r}")

    @property
    def center(self) -> Coordinate:
        """Center point of the box."""
        return Coordinate((self.min_lat + self.max_lat) / 2.0, (self.min_lon + self.max_lon) / 2.0)

    @property
    def lat_error(self) -> float:
        """Half the box height in degrees."""
        return (self.max_lat - self.min_lat) / 2.0

    @property
    def lon_error(self) -> float:
        """Half the box width in degrees."""
        return (self.max_lon - self.min_lon) / 2.0

    @property
    def area(self) -> float:
        """Box area in square degrees."""
        return (self.max_lat - self.min_lat) * (self.max_lon - self.min_lon)

    def contains(self, latitude: float, longitude: float) -> bool:
        """Whether the point lies inside the box, edges included."""
        return self.min_lat <= latitude <= self.max_lat and self.min_lon <= longitude <= self.max_lon

    def bisect_lat(self, upper: bool) -> GeoBoundingBox:
        """Keep the northern (upper) or southern half of the box."""
        mid = (self.min_lat + self.max_lat) / 2.0
        if upper:
            return GeoBoundingBox(mid, self.max_lat, self.min_lon, self.max_lon)
        return GeoBoundingBox(self.min_lat, mid, self.min_lon, self.max_lon)

    def bisect_lon(self, upper: bool) -> GeoBoundingBox:
        """Keep the eastern (upper) or western half of the box."""
        mid = (self.min_lon + self.max_lon) / 2.0
        if upper:
            return GeoBoundingBox(self.min_lat, self.max_lat, mid, self.max_lon)
        return GeoBoundingBox(self.min_lat, self.max_lat, self.min_lon, mid)

    def __str__(self) -> str:
        return f"[{self.min_lat:.6f}, {self.max_lat:.6f}] x [{self.min_lon:.6f}, {self.max_lon:.6f}]"


WORLD = GeoBoundingBox(LATITUDE_MIN, LATITUDE_MAX, LONGITUDE_MIN, LONGITUDE_MAX)
"""Bounding box of the empty geohash prefix."""
