"""Data models for catalog diffing — one MetricDiff per changed identity key."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..catalog.models import MetricRecord


class ChangeType(str, Enum):
    """Classification of one identity key across two snapshots."""

    ADDED = "Added"
    REMOVED = "Removed"
    UPDATED = "Updated"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MetricDiff:
    """Result of comparing one identity key across two snapshots.

    ``old`` is set for Removed/Updated, ``new`` for Added/Updated.
    ``changes`` is non-empty exactly when the diff is Updated.
    """

    key: str
    change_type: ChangeType
    old: Optional[MetricRecord] = None
    new: Optional[MetricRecord] = None
    changes: Tuple[str, ...] = ()

    @property
    def current(self) -> MetricRecord:
        """The record describing the metric as it stands after the change."""
        record = self.new if self.new is not None else self.old
        if record is None:
            raise ValueError(f"MetricDiff {self.key!r} carries no record")
        return record


@dataclass(frozen=True)
class DiffSummary:
    """Counts of each change type in a diff list."""

    added: int = 0
    removed: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed + self.updated
