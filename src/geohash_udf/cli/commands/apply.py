"""
Apply Command

Runs the geohash function over every row of a CSV file, the way a query
engine evaluates ``SELECT geohash(latitude, longitude) FROM table``.
"""

import csv
import logging
import sys
from pathlib import Path
from typing import TextIO

import typer

from geohash_udf.api.core.enums import ArgumentType
from geohash_udf.api.core.exceptions import CoordinateRangeError, GeohashError
from geohash_udf.api.function import GeohashFunction
from geohash_udf.cli.utils.output import print_error, print_warning
from geohash_udf.cli.utils.state import get_function_config


logger = logging.getLogger(__name__)


def _run(
    source: TextIO,
    function: GeohashFunction,
    lat_column: str,
    lon_column: str,
    output_column: str,
    delimiter: str,
) -> tuple[int, int]:
    reader = csv.DictReader(source, delimiter=delimiter)
    fieldnames = list(reader.fieldnames or [])

    missing = [column for column in (lat_column, lon_column) if column not in fieldnames]
    if missing:
        raise typer.BadParameter(f"Column(s) not found in input: {', '.join(missing)}")

    writer = csv.DictWriter(
        sys.stdout, fieldnames=[*fieldnames, output_column], delimiter=delimiter, lineterminator="\n"
    )
    writer.writeheader()

    rows = 0
    nulls = 0
    for line_number, row in enumerate(reader, start=2):
        # DictReader collects surplus fields under the None key
        extra = row.pop(None, None)
        if extra is not None:
            print_error(f"Line {line_number}: expected {len(fieldnames)} fields, got {len(fieldnames) + len(extra)}")
            raise typer.Exit(code=1)

        try:
            geohash = function.evaluate(row.get(lat_column), row.get(lon_column))
        except CoordinateRangeError as e:
            raise CoordinateRangeError(f"Line {line_number}: {e}") from e

        rows += 1
        if geohash is None:
            nulls += 1
        row[output_column] = geohash or ""
        writer.writerow(row)

    return rows, nulls


def apply(
    input_file: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="CSV file to read (default: standard input)",
    ),
    lat_column: str = typer.Option("latitude", "--lat-column", help="Column holding latitudes"),
    lon_column: str = typer.Option("longitude", "--lon-column", help="Column holding longitudes"),
    output_column: str = typer.Option("geohash", "--output-column", "-o", help="Name of the added column"),
    delimiter: str = typer.Option(",", "--delimiter", "-d", help="Field delimiter"),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Write an empty cell for out-of-range coordinates instead of failing",
    ),
) -> None:
    """
    Add a geohash column to a CSV file.

    Empty cells and NA values give an empty geohash. The result is written
    to standard output.

    Example:
        geohash-udf apply weather.csv --lat-column lat --lon-column lng > weather_geohash.csv
        cat weather.csv | geohash-udf --length 5 apply
    """
    try:
        config = get_function_config(strict_range=False if lenient else None)
        function = GeohashFunction(config)
        # CSV cells are text
        function.initialize([ArgumentType.STRING, ArgumentType.STRING])

        if input_file is None:
            rows, nulls = _run(sys.stdin, function, lat_column, lon_column, output_column, delimiter)
        else:
            with input_file.open(newline="") as source:
                rows, nulls = _run(source, function, lat_column, lon_column, output_column, delimiter)
    except GeohashError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    logger.info(f"Computed {rows - nulls} geohashes for {rows} rows ({nulls} null)")
    if nulls:
        print_warning(f"{nulls} of {rows} rows had missing or invalid coordinates")
