"""Diff engine — classifies every metric key across two catalog snapshots.

The algorithm works in three passes:
  1. Keys in the new snapshot: absent from old -> Added; present in both ->
     run the field comparators and emit Updated if anything changed.
  2. Keys only in the old snapshot -> Removed.
  3. Sort by identity key so output never depends on mapping order.
"""

from typing import Iterable, List, Sequence

from ..catalog.models import MetricRecord
from ..catalog.snapshot import Snapshot, build_snapshot
from ..logging_config import get_logger
from .comparators import FIELD_COMPARATORS, Comparator, describe_changes
from .models import ChangeType, DiffSummary, MetricDiff

logger = get_logger(__name__)


def sort_diffs(diffs: Iterable[MetricDiff]) -> List[MetricDiff]:
    """Return ``diffs`` ordered by identity key (plain string order)."""
    return sorted(diffs, key=lambda d: d.key)


def compare_snapshots(
    old: Snapshot,
    new: Snapshot,
    comparators: Sequence[Comparator] = FIELD_COMPARATORS,
) -> List[MetricDiff]:
    """Compute the ordered list of metric changes between two snapshots.

    Args:
        old: The earlier snapshot (identity key -> record).
        new: The later snapshot.
        comparators: Field comparators run for keys present in both.

    Returns:
        Added, Removed and Updated diffs sorted by key. Keys whose
        comparators report no change are omitted.
    """
    diffs: List[MetricDiff] = []

    # ── Step 1: Added and updated ────────────────────────────────────────
    for key, new_record in new.items():
        old_record = old.get(key)
        if old_record is None:
            diffs.append(MetricDiff(key=key, change_type=ChangeType.ADDED, new=new_record))
            continue

        changes = describe_changes(old_record, new_record, comparators)
        if changes:
            diffs.append(
                MetricDiff(
                    key=key,
                    change_type=ChangeType.UPDATED,
                    old=old_record,
                    new=new_record,
                    changes=changes,
                )
            )

    # ── Step 2: Removed ──────────────────────────────────────────────────
    for key, old_record in old.items():
        if key not in new:
            diffs.append(MetricDiff(key=key, change_type=ChangeType.REMOVED, old=old_record))

    # ── Step 3: Deterministic order ──────────────────────────────────────
    ordered = sort_diffs(diffs)
    logger.debug(
        "Compared %d old and %d new metrics: %d changed", len(old), len(new), len(ordered)
    )
    return ordered


def compare_catalogs(
    old_records: Iterable[MetricRecord],
    new_records: Iterable[MetricRecord],
    strict: bool = False,
) -> List[MetricDiff]:
    """Index two decoded catalogs and compare them.

    Raises:
        DuplicateMetricError: In strict mode, if either catalog repeats a key.
    """
    old = build_snapshot(old_records, strict=strict)
    new = build_snapshot(new_records, strict=strict)
    return compare_snapshots(old, new)


def summarize_diffs(diffs: Iterable[MetricDiff]) -> DiffSummary:
    """Count Added, Removed and Updated entries in ``diffs``."""
    counts = {change_type: 0 for change_type in ChangeType}
    for d in diffs:
        counts[d.change_type] += 1
    return DiffSummary(
        added=counts[ChangeType.ADDED],
        removed=counts[ChangeType.REMOVED],
        updated=counts[ChangeType.UPDATED],
    )
