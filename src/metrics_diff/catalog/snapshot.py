"""Snapshot indexing — key a decoded catalog by metric identity."""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from ..exceptions import DuplicateMetricError
from ..logging_config import get_logger
from .models import MetricRecord

logger = get_logger(__name__)

Snapshot = Mapping[str, MetricRecord]


def build_snapshot(records: Iterable[MetricRecord], strict: bool = False) -> Snapshot:
    """Index ``records`` by identity key, in decode order.

    When two records share a key the later one replaces the earlier one.
    With ``strict=True`` a shared key raises :class:`DuplicateMetricError`
    instead.

    Returns:
        A read-only mapping of identity key -> MetricRecord.
    """
    index: Dict[str, MetricRecord] = {}
    for record in records:
        key = record.key
        if key in index:
            if strict:
                raise DuplicateMetricError(key)
            logger.debug("Metric %s declared more than once; keeping the later record", key)
        index[key] = record
    return MappingProxyType(index)
