"""Base formatter interface for CLI output."""

from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import typer

from openiban.domain.enums import ElementCategory, ValidationStatus
from openiban.domain.value_objects import CountryRule, DisplayElement, ValidationResult

UNNAMED_LABEL = "Unnamed element"

# Batch entries whose input was too short to validate
SKIPPED = "skipped"


@dataclass(frozen=True)
class BatchEntry:
    """One line of a batch run.

    ``result`` is None when the normalized input was too short to validate.
    """

    line_number: int
    source: str
    result: ValidationResult | None

    @property
    def status(self) -> str:
        return SKIPPED if self.result is None else str(self.result.status)


def summarize(entries: list[BatchEntry]) -> dict[str, int]:
    """Count batch entries per status, every status present (zero if unused)."""
    counts = Counter(entry.status for entry in entries)
    summary = {str(status): counts.get(str(status), 0) for status in ValidationStatus}
    summary[SKIPPED] = counts.get(SKIPPED, 0)
    summary["total"] = len(entries)
    return summary


def rule_to_dict(country_code: str, rule: CountryRule) -> dict[str, Any]:
    """Serializable view of a materialized rule set."""
    return {
        "country_code": country_code,
        "name": rule.name,
        "official": rule.official,
        "length": rule.expected_length,
        "check_digits": str(rule.check_digits),
        "alias_of": rule.alias_of,
        "fields": [
            {
                "offset": spec.offset,
                "length": spec.length,
                "char_class": str(spec.char_class),
                "label": spec.label,
            }
            for spec in rule.fields
        ],
        "supplementary_checks": [check.__name__ for check in rule.supplementary_checks],
    }


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    ``format_*`` methods return the output as a string; ``render_*`` methods
    write it out. Subclasses override ``render_*`` when they draw directly
    to a terminal.
    """

    def __init__(self, show_unnamed_elements: bool = True):
        """Initialize formatter.

        Args:
            show_unnamed_elements: Include BBAN fields without a published name
        """
        self.show_unnamed_elements = show_unnamed_elements

    @abstractmethod
    def format_result(self, result: ValidationResult) -> str:
        """Format one validation result."""

    @abstractmethod
    def format_skipped(self, source: str) -> str:
        """Format an input that was too short to validate."""

    @abstractmethod
    def format_batch(self, entries: list[BatchEntry]) -> str:
        """Format a batch run with its per-status summary."""

    @abstractmethod
    def format_rule(self, country_code: str, rule: CountryRule) -> str:
        """Format one country's rule set."""

    @abstractmethod
    def format_countries(self, rules: Mapping[str, CountryRule]) -> str:
        """Format a listing of rule sets."""

    def render_result(self, result: ValidationResult) -> None:
        typer.echo(self.format_result(result))

    def render_skipped(self, source: str) -> None:
        typer.echo(self.format_skipped(source))

    def render_batch(self, entries: list[BatchEntry]) -> None:
        typer.echo(self.format_batch(entries))

    def render_rule(self, country_code: str, rule: CountryRule) -> None:
        typer.echo(self.format_rule(country_code, rule))

    def render_countries(self, rules: Mapping[str, CountryRule]) -> None:
        typer.echo(self.format_countries(rules))

    def render_error(self, error: Exception | str) -> None:
        typer.echo(self.format_error(error), err=True)

    def visible_elements(
        self, result: ValidationResult, category: ElementCategory | None = None
    ) -> list[DisplayElement]:
        """Elements to display, honouring ``show_unnamed_elements``."""
        elements = list(result.elements) if category is None else result.elements_in(category)
        if self.show_unnamed_elements:
            return elements
        return [element for element in elements if element.label != UNNAMED_LABEL]

    def format_error(self, error: Exception | str) -> str:
        """Format an error message.

        Args:
            error: Exception or error message string

        Returns:
            Formatted error message
        """
        error_msg = str(error) if isinstance(error, Exception) else error
        return self._format_error_impl(error_msg)

    def _format_error_impl(self, error_msg: str) -> str:
        """Internal error formatting implementation.

        Subclasses can override this for custom error formatting.
        """
        return f"Error: {error_msg}"
