"""Configuration commands."""

import json

import typer
from rich.console import Console
from rich.table import Table

from openiban.utils.config import get_settings

from .common import output_format

app = typer.Typer()
console = Console()


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Show current configuration."""
    settings = get_settings()
    if output_format(ctx) == "json":
        typer.echo(json.dumps(settings.model_dump(), indent=2))
        return

    table = Table(title="OpenIBAN Configuration", show_header=True)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    # Logging
    table.add_section()
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Log Level", settings.log_level)
    table.add_row("JSON Logs", str(settings.json_logs))
    table.add_row("Dev Mode", str(settings.dev_mode))

    # Input
    table.add_section()
    table.add_row("Minimum Input Length", str(settings.min_input_length))

    # Output
    table.add_section()
    table.add_row("Output Format", settings.output_format)
    table.add_row(
        "Unnamed Elements",
        "[green]Shown[/green]" if settings.show_unnamed_elements else "[yellow]Hidden[/yellow]",
    )

    console.print(table)
