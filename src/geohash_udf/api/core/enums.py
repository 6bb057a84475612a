"""
Common Enums

Enumerations used throughout the geohash API.
"""

from enum import StrEnum


__all__ = [
    "ArgumentType",
]


class ArgumentType(StrEnum):
    """Declared argument types a host engine can report at bind time."""

    STRING = "string"
    VARCHAR = "varchar"
    CHAR = "char"
    DOUBLE = "double"
    FLOAT = "float"
    DECIMAL = "decimal"
    INT = "int"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    VOID = "void"  # Untyped NULL literal
    ARRAY = "array"
    MAP = "map"
    STRUCT = "struct"

    @property
    def is_string(self) -> bool:
        """Whether the type carries text."""
        return self in (ArgumentType.STRING, ArgumentType.VARCHAR, ArgumentType.CHAR)

    @property
    def is_floating(self) -> bool:
        """Whether the type is a floating-point number."""
        return self in (ArgumentType.DOUBLE, ArgumentType.FLOAT)

    @property
    def is_void(self) -> bool:
        return self is ArgumentType.VOID

    @property
    def is_accepted(self) -> bool:
        """Whether the geohash function accepts an argument of this type."""
        return self.is_string or self.is_floating or self.is_void
