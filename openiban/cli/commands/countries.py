"""Rule registry commands."""

import typer

from openiban.exceptions import CountryNotFoundError
from openiban.registry import get_registry

from .common import exit_with_error, output_formatter


def countries_command(
    ctx: typer.Context,
    unofficial: bool = typer.Option(
        False,
        "--unofficial",
        help="Only list territories that make unofficial use of the IBAN format",
    ),
    aliases: bool = typer.Option(
        False,
        "--aliases",
        help="Only list countries that reuse another country's structure",
    ),
) -> None:
    """List every country the validator knows about."""
    formatter = output_formatter(ctx)
    rules = dict(get_registry().rules)
    if unofficial:
        rules = {code: rule for code, rule in rules.items() if not rule.official}
    if aliases:
        rules = {code: rule for code, rule in rules.items() if rule.is_alias}
    formatter.render_countries(rules)


def country_command(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="Two-letter country code, e.g. GB"),
) -> None:
    """Show the BBAN layout of one country."""
    formatter = output_formatter(ctx)
    country_code = code.strip().upper()
    try:
        rule = get_registry().require(country_code)
    except CountryNotFoundError as e:
        exit_with_error(formatter, e)
    formatter.render_rule(country_code, rule)
