"""Exception hierarchy for metrics-diff."""

from .base import MetricsDiffError
from .catalog import (
    CatalogAccessError,
    CatalogError,
    CatalogFormatError,
    CatalogParseError,
    DuplicateMetricError,
)
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "MetricsDiffError",
    "CatalogError",
    "CatalogAccessError",
    "CatalogParseError",
    "CatalogFormatError",
    "DuplicateMetricError",
    "ConfigurationError",
    "InvalidConfigError",
]
