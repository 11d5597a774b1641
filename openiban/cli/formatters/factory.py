"""Formatter factory for creating formatter instances."""

from typing import Literal

from openiban.cli.formatters.base import BaseFormatter

# Format type literal for type checking
FormatType = Literal["json", "rich"]


class FormatterFactory:
    """Factory for creating formatter instances based on format type."""

    _formatters: dict[str, type[BaseFormatter]] = {}

    @classmethod
    def register(cls, format_type: str, formatter_class: type[BaseFormatter]) -> None:
        """Register a formatter class for a format type.

        Args:
            format_type: The format type identifier (e.g., "json", "rich")
            formatter_class: The formatter class to register
        """
        cls._formatters[format_type.lower()] = formatter_class

    @classmethod
    def get_formatter(cls, format_type: str, show_unnamed_elements: bool = True) -> BaseFormatter:
        """Get a formatter instance for the specified format type.

        Raises:
            ValueError: If format type is not supported
        """
        formatter_class = cls._formatters.get(format_type.lower())
        if formatter_class is None:
            supported = ", ".join(cls._formatters.keys())
            raise ValueError(
                f"Unsupported format type: {format_type}. " f"Supported types: {supported}"
            )
        return formatter_class(show_unnamed_elements=show_unnamed_elements)

    @classmethod
    def get_supported_formats(cls) -> list[str]:
        """Get list of supported format types."""
        return list(cls._formatters.keys())


def get_formatter(format_type: str = "rich", show_unnamed_elements: bool = True) -> BaseFormatter:
    """Convenience function to get a formatter instance.

    Args:
        format_type: The format type identifier (default: "rich")
        show_unnamed_elements: Include BBAN fields without a published name

    Raises:
        ValueError: If format type is not supported
    """
    return FormatterFactory.get_formatter(format_type, show_unnamed_elements)


# Auto-register formatters when this module is imported
def _register_default_formatters() -> None:
    """Register all default formatters."""
    from openiban.cli.formatters.json import JSONFormatter
    from openiban.cli.formatters.rich_formatter import RichFormatter

    FormatterFactory.register("json", JSONFormatter)
    FormatterFactory.register("rich", RichFormatter)


_register_default_formatters()
