"""Compare command — diff two catalog files and print the change report."""

from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..catalog import load_catalog, version_from_path
from ..diff import compare_catalogs
from ..exceptions import MetricsDiffError
from ..formatters import ReportContext, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import USAGE, err_console, resolve_config


@app.command()
def compare(
    catalogs: Optional[List[Path]] = typer.Argument(
        None,
        help="Old and new catalog files (YAML)",
        metavar="OLD NEW",
        show_default=False,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report format: markdown | json | rich",
        click_type=click.Choice(["markdown", "json", "rich"], case_sensitive=False),
    ),
    details: Optional[bool] = typer.Option(
        None,
        "--details/--no-details",
        help="Include a unified diff of every changed metric",
        show_default=False,
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail if a catalog declares the same metric twice",
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        help="Report heading",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to a file instead of stdout",
        file_okay=True,
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
) -> None:
    """
    Compare two metrics catalogs and report added, removed and updated metrics.

    Metrics are matched by their fully qualified name (namespace, subsystem
    and name). The version labels in the report come from the file names.

    [bold cyan]Examples:[/bold cyan]

      metrics-diff v1.29.yaml v1.30.yaml

      metrics-diff v1.29.yaml v1.30.yaml --no-details -o CHANGES.md

      metrics-diff v1.29.yaml v1.30.yaml --format json
    """
    from .. import __version__

    if version:
        typer.echo(f"metrics-diff version {__version__}")
        raise typer.Exit(0)

    if not catalogs or len(catalogs) != 2:
        err_console.print(USAGE, markup=False, highlight=False)
        raise typer.Exit(1)

    old_path, new_path = catalogs
    logger = setup_logging(verbose=verbose)

    try:
        settings = resolve_config(
            config=config,
            output_format=output_format.lower() if output_format else None,
            include_details=details,
            strict=strict,
            title=title,
            verbose=verbose,
        )
        if settings.verbose != verbose or settings.quiet:
            logger = setup_logging(verbose=settings.verbose, quiet=settings.quiet)

        # ── Step 1: Decode both catalogs (either failure aborts the run) ──
        old_records = load_catalog(old_path)
        new_records = load_catalog(new_path)

        # ── Step 2: Compare ──────────────────────────────────────────────
        diffs = compare_catalogs(old_records, new_records, strict=settings.strict)
        logger.info("Found %d changed metrics", len(diffs))

        # ── Step 3: Render ───────────────────────────────────────────────
        context = ReportContext(
            old_version=version_from_path(old_path),
            new_version=version_from_path(new_path),
            title=settings.title,
            include_details=settings.include_details,
        )
        formatter = get_formatter(settings.output_format)
        if output is None:
            formatter.render(diffs, context)
        else:
            output.write_text(formatter.format(diffs, context), encoding="utf-8")
            err_console.print(f"[green]Report written to {escape(str(output))}[/green]")

    except typer.Exit:
        raise

    except MetricsDiffError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except OSError as e:
        err_console.print(f"[red]Error:[/red] cannot write report: {escape(str(e))}")
        raise typer.Exit(1)

    except Exception as e:
        logger.exception("Unexpected error while comparing catalogs")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
