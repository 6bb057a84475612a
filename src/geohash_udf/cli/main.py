"""
Geohash CLI - Main Application

This is the main entry point for the geohash command-line interface.
"""

import logging

import typer
from click import Context
from dotenv import load_dotenv
from typer.core import TyperGroup

from geohash_udf.cli.commands import apply, codec, config
from geohash_udf.cli.utils.output import console
from geohash_udf.cli.utils.state import set_state


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="geohash-udf",
    help="Geohash encoding and the geohash(latitude, longitude) query function",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)


@app.callback()
def main(
    length: int | None = typer.Option(
        None,
        "--length",
        "-l",
        min=1,
        help="Number of geohash characters returned by the function",
        envvar="GEOHASH_UDF_OUTPUT_LENGTH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Geohash CLI

    Encode and decode geohashes, and run the geohash query function over CSV data.

    [bold green]Examples:[/bold green]

        geohash-udf encode --lat 48.8566 --lon 2.3522
        geohash-udf decode u09tvw0
        geohash-udf apply weather.csv

    [bold blue]Environment Variables:[/bold blue]

        GEOHASH_UDF_OUTPUT_LENGTH     - Function output length (default 4)
        GEOHASH_UDF_MISSING_SENTINELS - Comma-separated missing values (default ",NA")
        GEOHASH_UDF_STRICT_RANGE      - Fail on out-of-range coordinates (default true)
    """
    load_dotenv()

    set_state(length=length, verbose=verbose)

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from geohash_udf import __version__

    console.print(f"[bold]geohash-udf[/bold] version [cyan]{__version__}[/cyan]")


# Codec
app.command("encode", rich_help_panel="Codec")(codec.encode)
app.command("decode", rich_help_panel="Codec")(codec.decode)
app.command("neighbors", rich_help_panel="Codec")(codec.neighbors_command)

# Query function
app.command("apply", rich_help_panel="Query Function")(apply.apply)

# Configuration
app.add_typer(
    config.app,
    name="config",
    help="Function configuration commands",
    rich_help_panel="Configuration",
)


if __name__ == "__main__":
    app()
