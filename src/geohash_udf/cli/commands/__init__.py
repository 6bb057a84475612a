"""
CLI Commands Module

This module contains all CLI command implementations:

- codec: Encode, decode and neighbor lookup
- apply: Run the geohash function over CSV rows
- config: Function configuration
"""
