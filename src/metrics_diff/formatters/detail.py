"""Line-level detail view — unified diff of two serialised metric records.

Each side is dumped as a one-element YAML list and compared line by line
with full context, so the block shows the whole record with ``-``/``+``
markers on the lines that changed. File and hunk headers are dropped.
"""

from difflib import unified_diff
from typing import Optional

from ..catalog.loader import dump_records
from ..catalog.models import MetricRecord

_HEADER_LINES = 3  # "---", "+++", "@@ ... @@"


def unified_text_diff(before: str, after: str) -> str:
    """Return a header-less, full-context unified diff of two text blocks.

    Returns "" when the blocks are identical.
    """
    before_lines = before.splitlines()
    after_lines = after.splitlines()
    context = max(len(before_lines), len(after_lines))
    diff_lines = list(
        unified_diff(before_lines, after_lines, fromfile="old", tofile="new", lineterm="", n=context)
    )
    if len(diff_lines) <= _HEADER_LINES:
        return ""
    return "\n".join(diff_lines[_HEADER_LINES:]) + "\n"


def unified_record_diff(old: Optional[MetricRecord], new: Optional[MetricRecord]) -> str:
    """Diff the YAML dumps of ``old`` and ``new`` (either may be ``None``)."""
    return unified_text_diff(dump_records([old]), dump_records([new]))
