"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ReportConfig, load_config

err_console = Console(stderr=True)

PROG_NAME = "metrics-diff"
USAGE = f"Usage: {PROG_NAME} <old.yaml> <new.yaml>"


def resolve_config(
    config: Optional[Path] = None,
    output_format: Optional[str] = None,
    include_details: Optional[bool] = None,
    strict: bool = False,
    title: Optional[str] = None,
    verbose: bool = False,
) -> ReportConfig:
    """Build settings from CLI options."""
    overrides = {
        "output_format": output_format,
        "include_details": include_details,
        "title": title,
    }
    if strict:
        overrides["strict"] = True
    if verbose:
        overrides["verbose"] = True
    return load_config(config_file=config, **overrides)
