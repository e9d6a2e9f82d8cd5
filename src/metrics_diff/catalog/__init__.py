"""Catalog layer — metric records, identity keys, decoding and indexing."""

from .identity import KEY_SEPARATOR, metric_key
from .loader import (
    dump_records,
    load_catalog,
    metric_from_dict,
    metric_to_dict,
    parse_catalog,
    version_from_path,
)
from .models import MetricRecord
from .snapshot import Snapshot, build_snapshot

__all__ = [
    "KEY_SEPARATOR",
    "MetricRecord",
    "Snapshot",
    "build_snapshot",
    "dump_records",
    "load_catalog",
    "metric_from_dict",
    "metric_key",
    "metric_to_dict",
    "parse_catalog",
    "version_from_path",
]
