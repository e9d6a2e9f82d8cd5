"""CLI entry point — registers the compare command."""

import typer

from ._common import PROG_NAME

app = typer.Typer(
    name=PROG_NAME,
    help="metrics-diff - Compare two metrics catalogs and report what changed",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .compare import compare as _compare  # noqa: F401, E402

__all__ = ["app", "PROG_NAME"]
