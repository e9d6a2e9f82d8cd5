"""Catalog exceptions: reading, decoding, and indexing metric catalogs."""

from pathlib import Path
from typing import Dict, Optional

from .base import MetricsDiffError


class CatalogError(MetricsDiffError):
    """Base class for catalog-related errors."""
    pass


class CatalogAccessError(CatalogError):
    """Raised when a catalog file cannot be accessed or read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read catalog: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class CatalogParseError(CatalogError):
    """Raised when catalog text is not valid YAML."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Failed to parse catalog: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class CatalogFormatError(CatalogError):
    """Raised when a catalog parses but does not describe a list of metrics."""

    def __init__(self, source: str, reason: str, index: Optional[int] = None):
        details: Dict[str, str] = {"source": source, "reason": reason}
        if index is not None:
            details["index"] = str(index)

        super().__init__(f"Malformed catalog: {source}", details=details)
        self.source = source
        self.reason = reason
        self.index = index


class DuplicateMetricError(CatalogError):
    """Raised in strict mode when two records share an identity key."""

    def __init__(self, key: str):
        super().__init__(f"Duplicate metric identity: {key}", details={"key": key})
        self.key = key
