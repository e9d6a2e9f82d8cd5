"""Markdown formatter — the canonical change report.

Layout::

    # <title>: <old> → <new>

    ## Summary
    - **Added**: N metrics
    ...

    ## Changed Metrics

    | Metric Name | Type | Change Type | Stability Level | Description |
    ...

    ## Detailed Changes

    ### <key>
    ```diff
    ...
    ```
"""

from typing import List, Sequence

from ..diff.comparators import LINE_BREAK
from ..diff.engine import summarize_diffs
from ..diff.models import ChangeType, MetricDiff
from .base import BaseFormatter, ReportContext
from .detail import unified_record_diff

_TABLE_HEADER = (
    "| Metric Name | Type | Change Type | Stability Level | Description |\n"
    "|-------------|------|-------------|----------------|-------------|"
)


def escape_cell(text: str) -> str:
    """Escape pipe characters so ``text`` stays inside one table cell."""
    return text.replace("|", "\\|")


class MarkdownFormatter(BaseFormatter):
    """Render diffs as a Markdown document with a summary, table and details."""

    def render(self, diffs: Sequence[MetricDiff], context: ReportContext) -> None:
        print(self.format(diffs, context), end="")

    def format(self, diffs: Sequence[MetricDiff], context: ReportContext) -> str:
        lines: List[str] = [
            f"# {context.title}: {context.old_version} → {context.new_version}",
            "",
        ]

        if not diffs:
            lines.append(
                f"No differences found between {context.old_version} and {context.new_version}."
            )
            return "\n".join(lines) + "\n"

        summary = summarize_diffs(diffs)
        lines.extend([
            "## Summary",
            f"- **Added**: {summary.added} metrics",
            f"- **Removed**: {summary.removed} metrics",
            f"- **Updated**: {summary.updated} metrics",
            f"- **Total Changes**: {summary.total} metrics",
            "",
            "## Changed Metrics",
            "",
            _TABLE_HEADER,
        ])
        lines.extend(self._table_row(d) for d in diffs)

        if context.include_details:
            lines.extend(["", "## Detailed Changes", ""])
            for d in diffs:
                lines.append(f"### {d.key}")
                lines.append("```diff")
                lines.append(unified_record_diff(d.old, d.new) + "```")
                lines.append("")

        return "\n".join(lines) + "\n"

    @staticmethod
    def _table_row(d: MetricDiff) -> str:
        record = d.current
        description = ""
        if d.change_type is ChangeType.UPDATED:
            description = LINE_BREAK.join(d.changes)

        return (
            f"| [{d.key}](#{d.key}) | {record.type} | {d.change_type.value} "
            f"| `{record.stability_level}` | {escape_cell(description)} |"
        )
