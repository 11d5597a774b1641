"""Output formatters for validation results and rule listings.

- Rich: coloured status line and tables (default)
- JSON: pretty-printed JSON for scripts
"""

from openiban.cli.formatters.base import BaseFormatter, BatchEntry
from openiban.cli.formatters.factory import FormatterFactory, get_formatter

__all__ = ["BaseFormatter", "BatchEntry", "FormatterFactory", "get_formatter"]
