"""
Geohash API - Business Logic Layer

This package contains the geohash codec and the query function built on it,
separated from CLI presentation concerns.

- core: Shared types, constants, enums and exceptions
- geohash: GeohashCodec (encode/decode) and spatial search helpers
- function: The two-argument ``geohash`` query function
- config: Function configuration
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__: list[str] = [
    # Package is organized into modules - import directly from them:
    # from geohash_udf.api.geohash import ...
    # from geohash_udf.api.function import ...
]
