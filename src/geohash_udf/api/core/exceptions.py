"""
Custom exception classes for the geohash function library.

This module defines specific exceptions for the different types of errors
that can occur while binding, evaluating, encoding or decoding geohashes.
"""

from __future__ import annotations


__all__ = [
    # Argument exceptions
    "ArgumentCountError",
    "ArgumentError",
    "ArgumentTypeError",
    # Configuration exceptions
    "ConfigurationError",
    # Codec exceptions
    "CoordinateRangeError",
    "DecodeFormatError",
    # Base exception
    "GeohashError",
    "InvalidConfigurationError",
]


class GeohashError(Exception):
    """
    Base exception for all geohash errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all geohash-related errors.
    """

    pass


# ============================================================================
# Argument Exceptions
# ============================================================================


class ArgumentError(GeohashError):
    """Base exception for function argument errors."""

    pass


class ArgumentCountError(ArgumentError):
    """
    Raised when the function is bound with the wrong number of arguments.

    The geohash function takes exactly two arguments (latitude, longitude).
    """

    def __init__(self, expected: int, given: int) -> None:
        self.expected = expected
        self.given = given
        super().__init__(f"geohash expects exactly {expected} arguments, {given} given")


class ArgumentTypeError(ArgumentError):
    """
    Raised when an argument's declared type is not accepted.

    Accepted types are string-like, floating-point numeric, or the
    void placeholder type.
    """

    def __init__(self, index: int, type_name: str) -> None:
        self.index = index
        self.type_name = type_name
        super().__init__(
            f"Argument {index}: a string or double argument was expected "
            f"but an argument of type {type_name} was given."
        )


# ============================================================================
# Codec Exceptions
# ============================================================================


class CoordinateRangeError(GeohashError):
    """
    Raised when coordinates or precision are out of valid range.

    This occurs when attempting to encode:
    - Latitude outside -90 to +90 degrees, or not finite
    - Longitude outside -180 to +180 degrees, or not finite
    - A precision smaller than one character
    """

    pass


class DecodeFormatError(GeohashError):
    """Raised when a geohash string cannot be decoded."""

    def __init__(self, message: str, character: str | None = None, position: int | None = None) -> None:
        self.character = character
        self.position = position
        super().__init__(message)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(GeohashError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid."""

    pass
