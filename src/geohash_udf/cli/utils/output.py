"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from geohash_udf.api.core.types import GeoBoundingBox


# Create console with unicode detection
console = Console()

# Errors go to stderr so piped CSV output stays clean
error_console = Console(stderr=True)

_use_unicode = console.is_terminal and not console.legacy_windows


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    error_console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    error_console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any] | list[Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def bounding_box_to_dict(geohash: str, box: GeoBoundingBox) -> dict[str, Any]:
    """Flatten a decoded geohash into JSON-friendly values."""
    center = box.center
    return {
        "geohash": geohash,
        "latitude": center.latitude,
        "longitude": center.longitude,
        "lat_error": box.lat_error,
        "lon_error": box.lon_error,
        "bounds": {
            "min_lat": box.min_lat,
            "max_lat": box.max_lat,
            "min_lon": box.min_lon,
            "max_lon": box.max_lon,
        },
    }


def print_bounding_box_table(geohash: str, box: GeoBoundingBox) -> None:
    """Print a decoded geohash as a formatted table."""
    center = box.center

    table = Table(title=f"Geohash [cyan]{geohash}[/cyan]", show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan", width=16)
    table.add_column("Value", style="green")

    table.add_row("Center", str(center))
    table.add_row("Latitude", f"{box.min_lat:.6f}° to {box.max_lat:.6f}° (±{box.lat_error:.6f}°)")
    table.add_row("Longitude", f"{box.min_lon:.6f}° to {box.max_lon:.6f}° (±{box.lon_error:.6f}°)")
    table.add_row("Precision", f"{len(geohash)} chars")

    console.print(table)
