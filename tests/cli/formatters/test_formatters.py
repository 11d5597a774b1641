"""Unit tests for all output formatters."""

import json
from io import StringIO

import pytest
from rich.console import Console

from openiban import validate
from openiban.cli.formatters.base import BatchEntry, rule_to_dict, summarize
from openiban.cli.formatters.factory import FormatterFactory, get_formatter
from openiban.cli.formatters.json import JSONFormatter
from openiban.cli.formatters.rich_formatter import RichFormatter
from openiban.registry import lookup

pytestmark = pytest.mark.unit


@pytest.fixture
def valid_result():
    """A valid United Kingdom result."""
    return validate("GB82WEST12345698765432")


@pytest.fixture
def unofficial_result():
    """A valid result with unnamed BBAN fields."""
    return validate("NE58NE0380100100130305000268")


@pytest.fixture
def batch_entries(valid_result):
    """A batch with one valid, one invalid and one skipped line."""
    return [
        BatchEntry(1, "GB82WEST12345698765432", valid_result),
        BatchEntry(2, "DE89370400440532013001", validate("DE89370400440532013001")),
        BatchEntry(3, "gb8", None),
    ]


class TestBatchHelpers:
    """Tests for BatchEntry and summarize."""

    def test_entry_status(self, batch_entries):
        assert [entry.status for entry in batch_entries] == ["valid", "invalid", "skipped"]

    def test_summarize(self, batch_entries):
        assert summarize(batch_entries) == {
            "valid": 1,
            "invalid": 1,
            "incomplete": 0,
            "unknown_country": 0,
            "skipped": 1,
            "total": 3,
        }

    def test_summarize_empty(self):
        assert summarize([])["total"] == 0

    def test_rule_to_dict(self):
        data = rule_to_dict("MU", lookup("MU"))

        assert data["name"] == "Mauritius"
        assert data["length"] == 30
        assert data["supplementary_checks"] == ["bank_code_letters_then_digits"]
        assert data["fields"][0]["offset"] == 4


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_result(self, valid_result):
        data = json.loads(JSONFormatter().format_result(valid_result))

        assert data["status"] == "valid"
        assert data["country_code"] == "GB"
        assert data["elements"][5] == {
            "label": "BIC bank code",
            "value": "WEST",
            "category": "element",
        }

    def test_hide_unnamed_elements(self, unofficial_result):
        shown = json.loads(JSONFormatter().format_result(unofficial_result))
        hidden = json.loads(
            JSONFormatter(show_unnamed_elements=False).format_result(unofficial_result)
        )

        assert len(shown["elements"]) == len(hidden["elements"]) + 2
        assert all(element["label"] != "Unnamed element" for element in hidden["elements"])

    def test_format_skipped(self):
        assert json.loads(JSONFormatter().format_skipped("gb8")) == {
            "input": "gb8",
            "status": "skipped",
        }

    def test_format_batch(self, batch_entries):
        data = json.loads(JSONFormatter().format_batch(batch_entries))

        assert data["results"][0]["line"] == 1
        assert data["results"][1]["message"] == "Check digits invalid"
        assert data["results"][2] == {"line": 3, "input": "gb8", "status": "skipped"}
        assert data["summary"]["total"] == 3

    def test_format_countries(self):
        rules = {"IE": lookup("IE"), "GB": lookup("GB")}

        data = json.loads(JSONFormatter().format_countries(rules))

        assert [item["country_code"] for item in data] == ["GB", "IE"]
        assert data[1]["alias_of"] == "GB"

    def test_custom_indent(self, valid_result):
        output = JSONFormatter(indent=4).format_result(valid_result)

        assert '\n    "status"' in output

    def test_format_error(self):
        data = json.loads(JSONFormatter().format_error("Something failed"))

        assert data == {"error": "Something failed", "status": "error"}

    def test_non_ascii_kept(self):
        output = JSONFormatter().format_rule("CI", lookup("CI"))

        assert "\\u" not in output


class TestRichFormatter:
    """Tests for RichFormatter."""

    @pytest.fixture
    def output(self):
        return StringIO()

    @pytest.fixture
    def formatter(self, output):
        return RichFormatter(console=Console(file=output, width=200))

    def test_format_result(self, formatter, valid_result):
        assert formatter.format_result(valid_result) == (
            "[bold green]✔ Valid IBAN[/bold green] United Kingdom (GB)"
        )

    def test_format_skipped(self, formatter):
        assert "too short to validate" in formatter.format_skipped("gb8")

    def test_format_batch(self, formatter, batch_entries):
        assert formatter.format_batch(batch_entries) == (
            "3 checked - [green]valid: 1[/green], [red]invalid: 1[/red], "
            "[dim]skipped: 1[/dim]"
        )

    def test_format_rule_alias(self, formatter):
        assert formatter.format_rule("IE", lookup("IE")) == (
            "[bold]Ireland[/bold] (IE): 22 characters, check digits mod97, structure of GB"
        )

    def test_format_rule_unofficial(self, formatter):
        assert ", unofficial" in formatter.format_rule("NE", lookup("NE"))

    def test_render_result_table(self, formatter, output, valid_result):
        formatter.render_result(valid_result)

        rendered = output.getvalue()
        assert "Valid IBAN" in rendered
        assert "BBAN elements" in rendered
        assert "Bank and branch code (sort code)" in rendered
        assert "98765432" in rendered

    def test_render_result_without_elements(self, formatter, output):
        formatter.render_result(validate("GB82WEST1234569876543"))

        assert output.getvalue().strip() == "… IBAN Incomplete United Kingdom (GB)"

    def test_render_hides_unnamed_elements(self, output, unofficial_result):
        formatter = RichFormatter(
            show_unnamed_elements=False, console=Console(file=output, width=200)
        )

        formatter.render_result(unofficial_result)

        assert "Unnamed element" not in output.getvalue()
        assert "makes unofficial use" in output.getvalue()

    def test_format_empty_batch(self, formatter):
        assert formatter.format_batch([]) == "0 checked"

    def test_markup_in_values_is_escaped(self, formatter, output):
        formatter.render_error("bad [bold]input[/bold]")

        assert "bad [bold]input[/bold]" in output.getvalue()


class TestFormatterFactory:
    """Tests for FormatterFactory."""

    def test_supported_formats(self):
        formats = FormatterFactory.get_supported_formats()

        assert "json" in formats
        assert "rich" in formats

    @pytest.mark.parametrize(
        "format_type,formatter_class",
        [("json", JSONFormatter), ("rich", RichFormatter), ("JSON", JSONFormatter)],
    )
    def test_get_formatter(self, format_type, formatter_class):
        assert isinstance(get_formatter(format_type), formatter_class)

    def test_show_unnamed_elements_passed_through(self):
        assert get_formatter("json", show_unnamed_elements=False).show_unnamed_elements is False

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported format type: xml"):
            get_formatter("xml")
