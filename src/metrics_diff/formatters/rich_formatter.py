"""Rich terminal formatter for metrics-diff."""

import io
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..diff.comparators import LINE_BREAK
from ..diff.engine import summarize_diffs
from ..diff.models import ChangeType, MetricDiff
from .base import BaseFormatter, ReportContext
from .detail import unified_record_diff

_CHANGE_STYLE = {
    ChangeType.ADDED: "[green]Added[/green]",
    ChangeType.REMOVED: "[red]Removed[/red]",
    ChangeType.UPDATED: "[yellow]Updated[/yellow]",
}


def _diff_line_markup(line: str) -> str:
    text = escape(line)
    if line.startswith("+"):
        return f"[green]{text}[/green]"
    elif line.startswith("-"):
        return f"[red]{text}[/red]"
    return f"[dim]{text}[/dim]"


class RichFormatter(BaseFormatter):
    """Rich terminal output with a summary panel and a change table."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def render(self, diffs: Sequence[MetricDiff], context: ReportContext) -> None:
        self._print(self._console, diffs, context)

    def format(self, diffs: Sequence[MetricDiff], context: ReportContext) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, no_color=True, highlight=False)
        self._print(console, diffs, context)
        return buffer.getvalue()

    def _print(self, console: Console, diffs: Sequence[MetricDiff], context: ReportContext) -> None:
        heading = f"{context.title}: {context.old_version} → {context.new_version}"
        console.print(f"[bold cyan]{escape(heading)}[/bold cyan]")
        console.print()

        if not diffs:
            console.print(
                f"[green]No differences found between {escape(context.old_version)} "
                f"and {escape(context.new_version)}.[/green]"
            )
            return

        summary = summarize_diffs(diffs)
        parts = []
        for change_type, count in (
            (ChangeType.ADDED, summary.added),
            (ChangeType.REMOVED, summary.removed),
            (ChangeType.UPDATED, summary.updated),
        ):
            parts.append(f"{_CHANGE_STYLE[change_type]}: {count}")
        parts.append(f"[bold]Total[/bold]: {summary.total}")
        console.print(Panel("  |  ".join(parts), title="[bold cyan]Summary[/bold cyan]", expand=False))
        console.print()

        table = Table(title="Changed Metrics", expand=True)
        table.add_column("Metric", style="yellow", no_wrap=False, ratio=3)
        table.add_column("Type", width=10)
        table.add_column("Change", justify="center", width=9)
        table.add_column("Stability", width=10)
        table.add_column("Description", ratio=4)

        for d in diffs:
            record = d.current
            table.add_row(
                escape(d.key),
                escape(record.type),
                _CHANGE_STYLE[d.change_type],
                escape(record.stability_level),
                escape("\n".join(c.replace(LINE_BREAK, "\n") for c in d.changes)),
            )

        console.print(table)

        if not context.include_details:
            return

        for d in diffs:
            console.print()
            console.print(f"[bold]{escape(d.key)}[/bold]")
            for line in unified_record_diff(d.old, d.new).splitlines():
                console.print(_diff_line_markup(line))
