"""JSON output formatter."""

import json
from collections.abc import Mapping
from typing import Any

from openiban.cli.formatters.base import (
    SKIPPED,
    BaseFormatter,
    BatchEntry,
    rule_to_dict,
    summarize,
)
from openiban.domain.value_objects import CountryRule, ValidationResult


class JSONFormatter(BaseFormatter):
    """Formatter that outputs results as pretty-printed JSON.

    Built on ``ValidationResult.to_dict()``; suitable for both human reading
    and machine parsing.
    """

    def __init__(self, show_unnamed_elements: bool = True, indent: int = 2):
        super().__init__(show_unnamed_elements)
        self.indent = indent

    def _dumps(self, data: Any) -> str:
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

    def _result_dict(self, result: ValidationResult) -> dict[str, Any]:
        data = result.to_dict()
        data["elements"] = [element.to_dict() for element in self.visible_elements(result)]
        return data

    def format_result(self, result: ValidationResult) -> str:
        return self._dumps(self._result_dict(result))

    def format_skipped(self, source: str) -> str:
        return self._dumps({"input": source, "status": SKIPPED})

    def format_batch(self, entries: list[BatchEntry]) -> str:
        results = []
        for entry in entries:
            item: dict[str, Any] = {"line": entry.line_number, "input": entry.source}
            if entry.result is None:
                item["status"] = entry.status
            else:
                item.update(self._result_dict(entry.result))
            results.append(item)
        return self._dumps({"results": results, "summary": summarize(entries)})

    def format_rule(self, country_code: str, rule: CountryRule) -> str:
        return self._dumps(rule_to_dict(country_code, rule))

    def format_countries(self, rules: Mapping[str, CountryRule]) -> str:
        return self._dumps([rule_to_dict(code, rules[code]) for code in sorted(rules)])

    def _format_error_impl(self, error_msg: str) -> str:
        return self._dumps({"error": error_msg, "status": "error"})
