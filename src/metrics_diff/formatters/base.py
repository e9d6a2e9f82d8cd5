"""Base formatter interface for metrics-diff report rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ..config import DEFAULT_TITLE
from ..diff.models import MetricDiff


@dataclass(frozen=True)
class ReportContext:
    """Everything a formatter needs besides the diff list itself."""

    old_version: str
    new_version: str
    title: str = DEFAULT_TITLE
    include_details: bool = True


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, diffs: Sequence[MetricDiff], context: ReportContext) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, diffs: Sequence[MetricDiff], context: ReportContext) -> str:
        """Return the report as a string."""
