"""Output formatters for pNode Insight."""

from .base import BaseFormatter, ReportContext
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter
from .rich_formatter import RichFormatter

EXPORT_FORMATS = ("csv", "json", "markdown")


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "csv", "markdown"

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
        "csv": CsvFormatter,
        "markdown": MarkdownFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "ReportContext",
    "RichFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "MarkdownFormatter",
    "EXPORT_FORMATS",
    "get_formatter",
]
