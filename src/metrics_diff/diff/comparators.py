"""Field comparators — per-attribute change descriptions for a matched pair.

Each comparator takes the old and new record for one identity key and
returns a human-readable description of how that field changed, or ``None``
when the field is unchanged under that comparator's rules. Descriptions use
Markdown backticks around values because the primary consumer is the
Markdown report.

``FIELD_COMPARATORS`` fixes the order in which descriptions appear in a
MetricDiff. Summary objectives are not compared.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from ..catalog.models import MetricRecord

Comparator = Callable[[MetricRecord, MetricRecord], Optional[str]]

LINE_BREAK = " <br> "


# ── Scalar fields ────────────────────────────────────────────────────────────

def compare_help(old: MetricRecord, new: MetricRecord) -> Optional[str]:
    if old.help != new.help:
        return "Help text changed."
    return None


def compare_type(old: MetricRecord, new: MetricRecord) -> Optional[str]:
    if old.type != new.type:
        return f"Type changed from `{old.type}` to `{new.type}`."
    return None


def compare_stability_level(old: MetricRecord, new: MetricRecord) -> Optional[str]:
    if old.stability_level != new.stability_level:
        return (
            f"Stability level changed from `{old.stability_level}` "
            f"to `{new.stability_level}`."
        )
    return None


def compare_deprecated_version(old: MetricRecord, new: MetricRecord) -> Optional[str]:
    """Describe a deprecation transition.

    ""     -> "1.30"  marked as deprecated
    "1.30" -> ""      no longer deprecated
    "1.30" -> "1.31"  deprecated version moved
    """
    before, after = old.deprecated_version, new.deprecated_version
    if before == after:
        return None
    if not before:
        return f"Marked as deprecated in version `{after}`."
    if not after:
        return "No longer marked as deprecated."
    return f"Deprecated version changed from `{before}` to `{after}`."


def _numeric_comparator(attr: str, label: str) -> Comparator:
    def compare(old: MetricRecord, new: MetricRecord) -> Optional[str]:
        before, after = getattr(old, attr), getattr(new, attr)
        if before != after:
            return f"{label} changed from `{before}` to `{after}`."
        return None

    compare.__name__ = f"compare_{attr}"
    compare.__doc__ = f"Report a change in {label}."
    return compare


compare_age_buckets = _numeric_comparator("age_buckets", "AgeBuckets")
compare_buf_cap = _numeric_comparator("buf_cap", "BufCap")
compare_max_age = _numeric_comparator("max_age", "MaxAge")


# ── Collection fields ────────────────────────────────────────────────────────

def compare_const_labels(old: MetricRecord, new: MetricRecord) -> Optional[str]:
    if dict(old.const_labels) != dict(new.const_labels):
        return "ConstLabels changed."
    return None


def label_set_diff(old_labels: Sequence[str], new_labels: Sequence[str]) -> str:
    """Describe how two differing label sequences differ.

    Labels gained or lost are listed (sorted, back-quoted). When the two
    sequences hold the same set of labels the change is a pure reordering
    and both orders are shown instead.
    """
    old_set, new_set = set(old_labels), set(new_labels)
    added = sorted(f"`{label}`" for label in new_set - old_set)
    removed = sorted(f"`{label}`" for label in old_set - new_set)

    parts: List[str] = []
    if added:
        parts.append(f"Added labels: [{', '.join(added)}].")
    if removed:
        parts.append(f"Removed labels: [{', '.join(removed)}].")

    if not parts:
        return f"Labels reordered: [{', '.join(old_labels)}] → [{', '.join(new_labels)}]"
    return LINE_BREAK.join(parts)


def compare_labels(old: MetricRecord, new: MetricRecord) -> Optional[str]:
    if tuple(old.labels) == tuple(new.labels):
        return None
    return label_set_diff(old.labels, new.labels)


def compare_buckets(old: MetricRecord, new: MetricRecord) -> Optional[str]:
    # Exact float equality, order sensitive.
    if tuple(old.buckets) != tuple(new.buckets):
        return "Buckets changed."
    return None


FIELD_COMPARATORS: Tuple[Comparator, ...] = (
    compare_help,
    compare_type,
    compare_stability_level,
    compare_deprecated_version,
    compare_age_buckets,
    compare_buf_cap,
    compare_max_age,
    compare_const_labels,
    compare_labels,
    compare_buckets,
)


def describe_changes(
    old: MetricRecord,
    new: MetricRecord,
    comparators: Sequence[Comparator] = FIELD_COMPARATORS,
) -> Tuple[str, ...]:
    """Run every comparator on the pair and collect the non-empty descriptions."""
    changes = []
    for comparator in comparators:
        description = comparator(old, new)
        if description:
            changes.append(description)
    return tuple(changes)
