"""
Codec Commands

Commands for encoding coordinates to geohashes and decoding them back.
"""

import typer

from geohash_udf.api.core.constants import MAX_PRECISION
from geohash_udf.api.core.exceptions import GeohashError
from geohash_udf.api.geohash import GeohashCodec, cells_for_search, neighbors
from geohash_udf.cli.utils.output import (
    bounding_box_to_dict,
    console,
    print_bounding_box_table,
    print_error,
    print_json,
)


def encode(
    latitude: float = typer.Option(..., "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: float = typer.Option(..., "--lon", help="Longitude in degrees (-180 to +180, East is positive)"),
    precision: int = typer.Option(MAX_PRECISION, "--precision", "-n", min=1, help="Number of geohash characters"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Encode a coordinate into a geohash.

    Example:
        geohash-udf encode --lat 48.8566 --lon 2.3522 -n 7
    """
    try:
        geohash = GeohashCodec.encode(latitude, longitude, precision)
    except GeohashError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json({"latitude": latitude, "longitude": longitude, "precision": precision, "geohash": geohash})
    else:
        console.print(geohash, highlight=False)


def decode(
    geohash: str = typer.Argument(..., help="Geohash to decode"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Decode a geohash into its bounding box and center.

    Example:
        geohash-udf decode u09tvw0
    """
    try:
        box = GeohashCodec.decode(geohash)
    except GeohashError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(bounding_box_to_dict(geohash.lower(), box))
    else:
        print_bounding_box_table(geohash.lower(), box)


def neighbors_command(
    geohash: str = typer.Argument(..., help="Geohash whose neighbors to list"),
    radius_km: float | None = typer.Option(
        None,
        "--radius",
        "-r",
        min=0.0,
        help="Instead list the cells to search for points within this radius (km)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    List the cells adjacent to a geohash.

    Example:
        geohash-udf neighbors u09tvw0
        geohash-udf neighbors u09tvw0 --radius 5
    """
    try:
        cells = neighbors(geohash) if radius_km is None else cells_for_search(geohash, radius_km)
    except GeohashError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json({"geohash": geohash.lower(), "cells": cells})
    else:
        for cell in cells:
            console.print(cell, highlight=False)
