"""Root of the metrics-diff error hierarchy.

Catalog errors (unreadable files, invalid YAML, malformed entries, strict-mode
duplicates) and configuration errors both derive from ``MetricsDiffError``,
which the CLI turns into an ``Error: ...`` line and exit code 1.
"""

from typing import Dict, Optional


class MetricsDiffError(Exception):
    """A catalog or configuration problem that stops a comparison.

    ``details`` holds the offending path, key or value; ``str()`` appends it
    as ``(k=v, ...)`` after the message.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"
