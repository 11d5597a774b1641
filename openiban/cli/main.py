"""Main CLI entry point for OpenIBAN."""

import typer
from rich.console import Console
from rich.markup import escape

from openiban import __version__
from openiban.exceptions import ConfigurationError
from openiban.utils.config import get_settings, override_settings
from openiban.utils.logging import configure_from_settings

from .commands import config, countries, validate
from .commands.common import EXIT_ERROR

# Create main app and console
app = typer.Typer(
    name="openiban",
    help="🏦 Structural validation of International Bank Account Numbers",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]OpenIBAN[/bold blue] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    format_type: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich, json (default from OPENIBAN_OUTPUT_FORMAT)",
    ),
) -> None:
    """
    OpenIBAN - check IBANs against their country's published structure.

    Verifies length, BBAN layout and check digits. It cannot tell whether an
    account actually exists.
    """
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[bold red]❌ Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR) from e

    if debug:
        settings = override_settings(debug=True)
    configure_from_settings(settings)

    # Store format option in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["format"] = format_type


# Register commands
app.command("validate")(validate.validate_command)
app.command("batch")(validate.batch_command)
app.command("countries")(countries.countries_command)
app.command("country")(countries.country_command)
app.add_typer(config.app, name="config", help="⚙️  Show configuration")
