"""
metrics-diff - Release-to-release change reports for metrics catalogs

Compares two snapshots of a metrics catalog (YAML lists of metric
definitions) and reports which metrics were added, removed, or updated,
with a field-level description of every update.
"""

__version__ = "0.1.0"

from .catalog import MetricRecord, build_snapshot, load_catalog, metric_key, parse_catalog
from .diff import ChangeType, MetricDiff, compare_catalogs, compare_snapshots

__all__ = [
    "compare_catalogs",  # Main entry point
    "compare_snapshots",
    "build_snapshot",
    "load_catalog",
    "parse_catalog",
    "metric_key",
    "MetricRecord",
    "MetricDiff",
    "ChangeType",
]
