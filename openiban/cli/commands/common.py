"""Helpers shared by CLI commands."""

from typing import NoReturn

import typer

from openiban.cli.formatters import BaseFormatter, get_formatter
from openiban.exceptions import OpenIBANError
from openiban.utils.config import get_settings
from openiban.utils.logging import get_logger

logger = get_logger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_NOT_VALID = 1
EXIT_ERROR = 2


def output_format(ctx: typer.Context) -> str:
    """Format selected by the global ``--format`` option, else the settings."""
    return (ctx.obj or {}).get("format") or get_settings().output_format


def output_formatter(ctx: typer.Context) -> BaseFormatter:
    """Formatter for the selected output format."""
    settings = get_settings()
    format_type = output_format(ctx)
    try:
        return get_formatter(format_type, show_unnamed_elements=settings.show_unnamed_elements)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_ERROR) from e


def exit_with_error(formatter: BaseFormatter, error: OpenIBANError) -> NoReturn:
    """Report an OpenIBAN error and exit with ``EXIT_ERROR``."""
    logger.warning("cli_command_failed", error=error.message, context=error.context)
    formatter.render_error(error)
    raise typer.Exit(EXIT_ERROR)
