"""Output formatters for metrics-diff."""

from .base import BaseFormatter, ReportContext
from .detail import unified_record_diff, unified_text_diff
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter, escape_cell
from .rich_formatter import RichFormatter

FORMATTERS = {
    "markdown": MarkdownFormatter,
    "json": JsonFormatter,
    "rich": RichFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "markdown", "json", "rich"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "FORMATTERS",
    "JsonFormatter",
    "MarkdownFormatter",
    "ReportContext",
    "RichFormatter",
    "escape_cell",
    "get_formatter",
    "unified_record_diff",
    "unified_text_diff",
]
