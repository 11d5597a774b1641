"""IBAN validation commands."""

import sys
from pathlib import Path

import typer

from openiban.cli.formatters import BatchEntry
from openiban.exceptions import InputError, OpenIBANError, wrap_exception
from openiban.utils.config import get_settings
from openiban.utils.logging import LogPerformance, get_logger, set_correlation_id
from openiban.validation import prepare, validate

from .common import EXIT_NOT_VALID, EXIT_OK, exit_with_error, output_formatter

logger = get_logger(__name__)


def validate_command(
    ctx: typer.Context,
    ibans: list[str] = typer.Argument(
        ...,
        help="IBANs to check; spaces and lowercase are accepted (quote grouped IBANs)",
    ),
) -> None:
    """Validate one or more IBANs and show their decomposed fields."""
    formatter = output_formatter(ctx)
    min_length = get_settings().min_input_length

    exit_code = EXIT_OK
    for text in ibans:
        candidate = prepare(text, min_length)
        if candidate is None:
            formatter.render_skipped(text)
            exit_code = EXIT_NOT_VALID
            continue

        result = validate(candidate)
        formatter.render_result(result)
        if not result.is_valid:
            exit_code = EXIT_NOT_VALID

    raise typer.Exit(exit_code)


def read_batch_lines(source: str) -> list[tuple[int, str]]:
    """Non-blank, non-comment lines of ``source`` (``-`` reads stdin).

    Returns:
        (line number, stripped text) pairs

    Raises:
        InputError: If the file cannot be read
    """
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise wrap_exception(
            e,
            f"Cannot read IBAN list from {source}",
            exception_class=InputError,
            source=source,
        ) from e

    lines = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        lines.append((line_number, stripped))
    return lines


def batch_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="File with one IBAN per line, or - for stdin"),
) -> None:
    """Validate every IBAN in a file and summarize the outcome."""
    formatter = output_formatter(ctx)
    min_length = get_settings().min_input_length

    try:
        lines = read_batch_lines(source)
    except OpenIBANError as e:
        exit_with_error(formatter, e)

    set_correlation_id()
    entries = []
    with LogPerformance("batch_validation", logger):
        for line_number, text in lines:
            candidate = prepare(text, min_length)
            result = None if candidate is None else validate(candidate)
            entries.append(BatchEntry(line_number, text, result))

    formatter.render_batch(entries)
    all_valid = all(entry.result is not None and entry.result.is_valid for entry in entries)
    raise typer.Exit(EXIT_OK if all_valid else EXIT_NOT_VALID)
