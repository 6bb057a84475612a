"""
Configuration Commands

Commands for viewing and changing the geohash function configuration.
"""

import typer
from click import Context
from rich.table import Table
from typer.core import TyperGroup

from geohash_udf.api.config import (
    ENV_MISSING_SENTINELS,
    ENV_OUTPUT_LENGTH,
    ENV_STRICT_RANGE,
    clear_config,
    get_config_path,
    load_config,
    parse_sentinels,
    save_config,
)
from geohash_udf.api.core.exceptions import GeohashError
from geohash_udf.cli.utils.output import console, print_error, print_info, print_json, print_success


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Function configuration commands", cls=SortedCommandsGroup)


@app.command("show")
def show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the effective function configuration.

    Example:
        geohash-udf config show
        geohash-udf config show --json
    """
    try:
        config = load_config()
    except GeohashError as e:
        print_error(f"Failed to load configuration: {e}")
        raise typer.Exit(code=1) from e

    config_path = get_config_path()

    if json_output:
        print_json({**config.to_dict(), "config_file": str(config_path)})
        return

    table = Table(title="[bold]Function Configuration[/bold]", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_column("Environment", style="dim")

    sentinels = ", ".join(repr(s) for s in config.missing_sentinels) or "(none)"
    table.add_row("Name", config.name, "")
    table.add_row("Output Length", str(config.output_length), ENV_OUTPUT_LENGTH)
    table.add_row("Missing Sentinels", sentinels, ENV_MISSING_SENTINELS)
    table.add_row("Strict Range", "yes" if config.strict_range else "no", ENV_STRICT_RANGE)
    table.add_row(
        "Config File",
        str(config_path) + (" [green]✓[/green]" if config_path.exists() else " [dim](not saved)[/dim]"),
        "",
    )

    console.print(table)


@app.command("set")
def set_config(
    length: int | None = typer.Option(None, "--length", "-l", min=1, help="Number of geohash characters returned"),
    sentinels: str | None = typer.Option(
        None,
        "--sentinels",
        help="Comma-separated values treated as missing (e.g. ',NA,NULL')",
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on out-of-range coordinates"),
    lenient: bool = typer.Option(False, "--lenient", help="Return null for out-of-range coordinates"),
) -> None:
    """
    Change and save the function configuration.

    Example:
        geohash-udf config set --length 6
        geohash-udf config set --sentinels ",NA,NULL" --lenient
    """
    if strict and lenient:
        print_error("--strict and --lenient are mutually exclusive")
        raise typer.Exit(code=1)

    strict_range = True if strict else (False if lenient else None)
    if length is None and sentinels is None and strict_range is None:
        print_info("Nothing to change")
        return

    try:
        # Environment overrides are for one run and are not saved
        config = load_config(
            use_env=False,
            output_length=length,
            missing_sentinels=parse_sentinels(sentinels) if sentinels is not None else None,
            strict_range=strict_range,
        )
        save_config(config)
    except GeohashError as e:
        print_error(f"Failed to save configuration: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Configuration saved to {get_config_path()}")


@app.command("reset")
def reset() -> None:
    """Delete the saved configuration and return to defaults."""
    if clear_config():
        print_success("Configuration reset to defaults")
    else:
        print_info("No saved configuration")
