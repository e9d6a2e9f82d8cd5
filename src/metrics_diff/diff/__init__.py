"""Diff layer — metric classification and field-level change descriptions."""

from .comparators import FIELD_COMPARATORS, describe_changes, label_set_diff
from .engine import compare_catalogs, compare_snapshots, sort_diffs, summarize_diffs
from .models import ChangeType, DiffSummary, MetricDiff

__all__ = [
    "ChangeType",
    "DiffSummary",
    "FIELD_COMPARATORS",
    "MetricDiff",
    "compare_catalogs",
    "compare_snapshots",
    "describe_changes",
    "label_set_diff",
    "sort_diffs",
    "summarize_diffs",
]
