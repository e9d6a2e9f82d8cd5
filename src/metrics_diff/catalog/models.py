"""Data models for metric catalogs — immutable records of one metric definition."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from .identity import metric_key


@dataclass(frozen=True)
class MetricRecord:
    """One versioned metric definition as declared in a catalog.

    Optional fields use their empty value ("" / 0 / empty collection) as the
    absent sentinel, so an unset deprecation version and an explicit empty
    string are the same thing.

    Map-valued fields are stored as read-only views. Records compare by value
    but are not hashable.
    """

    name: str
    namespace: str = ""
    subsystem: str = ""
    help: str = ""
    type: str = ""  # "counter" | "gauge" | "histogram" | "summary"
    deprecated_version: str = ""
    stability_level: str = ""
    labels: Tuple[str, ...] = ()
    buckets: Tuple[float, ...] = ()
    objectives: Mapping[float, float] = field(default_factory=dict)
    age_buckets: int = 0
    buf_cap: int = 0
    max_age: int = 0
    const_labels: Mapping[str, str] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))
        object.__setattr__(self, "buckets", tuple(self.buckets))
        object.__setattr__(self, "objectives", MappingProxyType(dict(self.objectives)))
        object.__setattr__(self, "const_labels", MappingProxyType(dict(self.const_labels)))

    @property
    def key(self) -> str:
        """Identity key joining namespace, subsystem and name."""
        return metric_key(self.namespace, self.subsystem, self.name)

    @property
    def is_deprecated(self) -> bool:
        return bool(self.deprecated_version)
