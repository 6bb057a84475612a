"""Geohash command-line interface."""
