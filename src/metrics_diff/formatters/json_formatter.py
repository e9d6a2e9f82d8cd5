"""JSON formatter for metrics-diff."""

import json
import math
from typing import Any, Dict, Optional, Sequence

from ..catalog.loader import metric_to_dict
from ..catalog.models import MetricRecord
from ..diff.engine import summarize_diffs
from ..diff.models import MetricDiff
from .base import BaseFormatter, ReportContext


def _json_float(value: float) -> Any:
    # JSON has no Inf/NaN literals
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if math.isnan(value):
        return "NaN"
    return value


def _record_to_dict(record: Optional[MetricRecord]) -> Optional[Dict[str, Any]]:
    if record is None:
        return None
    data = metric_to_dict(record)
    if "buckets" in data:
        data["buckets"] = [_json_float(b) for b in data["buckets"]]
    if "objectives" in data:
        data["objectives"] = {str(q): _json_float(e) for q, e in data["objectives"].items()}
    return data


class JsonFormatter(BaseFormatter):
    """Render diffs as a machine-readable JSON document."""

    def render(self, diffs: Sequence[MetricDiff], context: ReportContext) -> None:
        print(self.format(diffs, context))

    def format(self, diffs: Sequence[MetricDiff], context: ReportContext) -> str:
        summary = summarize_diffs(diffs)
        data = {
            "old_version": context.old_version,
            "new_version": context.new_version,
            "summary": {
                "added": summary.added,
                "removed": summary.removed,
                "updated": summary.updated,
                "total": summary.total,
            },
            "diffs": [
                {
                    "key": d.key,
                    "change_type": d.change_type.value,
                    "changes": list(d.changes),
                    "old": _record_to_dict(d.old),
                    "new": _record_to_dict(d.new),
                }
                for d in diffs
            ],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
