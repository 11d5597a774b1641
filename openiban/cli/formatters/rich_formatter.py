"""Rich terminal output formatter (default)."""

from collections.abc import Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from openiban.cli.formatters.base import SKIPPED, BaseFormatter, BatchEntry, summarize
from openiban.domain.enums import ElementCategory, ValidationStatus
from openiban.domain.value_objects import CountryRule, ValidationResult

STATUS_STYLES = {
    str(ValidationStatus.VALID): "green",
    str(ValidationStatus.INVALID): "red",
    str(ValidationStatus.UNKNOWN_COUNTRY): "red",
    str(ValidationStatus.INCOMPLETE): "yellow",
    SKIPPED: "dim",
}

STATUS_ICONS = {
    str(ValidationStatus.VALID): "✔",
    str(ValidationStatus.INVALID): "✘",
    str(ValidationStatus.UNKNOWN_COUNTRY): "✘",
    str(ValidationStatus.INCOMPLETE): "…",
    SKIPPED: "·",
}

CATEGORY_TITLES = {
    ElementCategory.IBAN: "IBAN",
    ElementCategory.COUNTRY: "Country",
    ElementCategory.ELEMENT: "BBAN elements",
}


class RichFormatter(BaseFormatter):
    """Formatter that renders results with Rich colours and tables.

    ``format_*`` return Rich markup strings; ``render_*`` draw tables on the
    console and are what the CLI uses.
    """

    def __init__(self, show_unnamed_elements: bool = True, console: Console | None = None):
        """Initialize Rich formatter.

        Args:
            show_unnamed_elements: Include BBAN fields without a published name
            console: Rich Console instance (creates new one if None)
        """
        super().__init__(show_unnamed_elements)
        self.console = console or Console()

    def _status_markup(self, status: str, text: str) -> str:
        style = STATUS_STYLES[status]
        return f"[bold {style}]{STATUS_ICONS[status]} {escape(text)}[/bold {style}]"

    def format_result(self, result: ValidationResult) -> str:
        status_line = self._status_markup(str(result.status), result.message)
        return f"{status_line} {escape(result.country_name)} ({escape(result.country_code)})"

    def format_skipped(self, source: str) -> str:
        return self._status_markup(SKIPPED, f"{source}: too short to validate")

    def format_batch(self, entries: list[BatchEntry]) -> str:
        summary = summarize(entries)
        parts = [
            f"[{STATUS_STYLES[status]}]{status}: {count}[/{STATUS_STYLES[status]}]"
            for status, count in summary.items()
            if status != "total" and count
        ]
        checked = f"{summary['total']} checked"
        if not parts:
            return checked
        return f"{checked} - " + ", ".join(parts)

    def format_rule(self, country_code: str, rule: CountryRule) -> str:
        alias = f", structure of {rule.alias_of}" if rule.alias_of else ""
        official = "" if rule.official else ", unofficial"
        return (
            f"[bold]{escape(rule.name)}[/bold] ({country_code}): "
            f"{rule.expected_length} characters, check digits {rule.check_digits}"
            f"{official}{alias}"
        )

    def format_countries(self, rules: Mapping[str, CountryRule]) -> str:
        return "\n".join(self.format_rule(code, rules[code]) for code in sorted(rules))

    def render_result(self, result: ValidationResult) -> None:
        self.console.print(self.format_result(result))
        if not result.elements:
            return

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Element", style="bold", no_wrap=True)
        table.add_column("Value")
        for category in ElementCategory:
            elements = self.visible_elements(result, category)
            if not elements:
                continue
            table.add_section()
            table.add_row(f"[dim]{CATEGORY_TITLES[category]}[/dim]", "")
            for element in elements:
                table.add_row(escape(element.label), escape(element.value))
        self.console.print(table)

    def render_skipped(self, source: str) -> None:
        self.console.print(self.format_skipped(source))

    def render_batch(self, entries: list[BatchEntry]) -> None:
        table = Table(title="IBAN batch validation", show_header=True)
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Input", no_wrap=True)
        table.add_column("Country")
        table.add_column("Status")
        table.add_column("Message")

        for entry in entries:
            style = STATUS_STYLES[entry.status]
            if entry.result is None:
                country, message = "", "Too short to validate"
            else:
                country, message = entry.result.country_name, entry.result.message
            table.add_row(
                str(entry.line_number),
                escape(entry.source),
                escape(country),
                f"[{style}]{entry.status}[/{style}]",
                escape(message),
            )

        self.console.print(table)
        self.console.print(self.format_batch(entries))

    def render_rule(self, country_code: str, rule: CountryRule) -> None:
        self.console.print(self.format_rule(country_code, rule))

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Offset", justify="right")
        table.add_column("Length", justify="right")
        table.add_column("Characters")
        table.add_column("Field")
        for spec in rule.fields:
            table.add_row(
                str(spec.offset),
                str(spec.length),
                str(spec.char_class),
                escape(spec.label) if spec.label else "[dim]unnamed[/dim]",
            )
        self.console.print(table)

        if rule.supplementary_checks:
            names = ", ".join(check.__name__ for check in rule.supplementary_checks)
            self.console.print(f"Supplementary checks: {names}")

    def render_countries(self, rules: Mapping[str, CountryRule]) -> None:
        table = Table(title=f"IBAN countries ({len(rules)})", show_header=True)
        table.add_column("Code", style="cyan", no_wrap=True)
        table.add_column("Country")
        table.add_column("Length", justify="right")
        table.add_column("Check digits")
        table.add_column("Official")
        table.add_column("Structure of")

        for code in sorted(rules):
            rule = rules[code]
            table.add_row(
                code,
                escape(rule.name),
                str(rule.expected_length),
                str(rule.check_digits),
                "[green]Yes[/green]" if rule.official else "[yellow]No[/yellow]",
                rule.alias_of or "",
            )
        self.console.print(table)

    def render_error(self, error: Exception | str) -> None:
        self.console.print(self.format_error(error))

    def _format_error_impl(self, error_msg: str) -> str:
        return f"[bold red]❌ Error:[/bold red] {escape(error_msg)}"
