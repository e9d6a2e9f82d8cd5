#!/usr/bin/env python3
"""
Example: Basic usage of metrics-diff as a Python library
"""

from pathlib import Path

from metrics_diff import compare_catalogs, load_catalog
from metrics_diff.formatters import MarkdownFormatter, ReportContext

catalogs = Path(__file__).parent / "catalogs"

# Compare two releases
old = load_catalog(catalogs / "v1.29.yaml")
new = load_catalog(catalogs / "v1.30.yaml")
diffs = compare_catalogs(old, new)

# Print a line per changed metric
for d in diffs:
    print(f"{d.change_type}: {d.key}")
    for change in d.changes:
        print(f"  - {change}")

print(f"\n{len(diffs)} metric(s) changed between v1.29 and v1.30\n")

# Full Markdown report, without the per-metric diff blocks
MarkdownFormatter().render(
    diffs, ReportContext(old_version="v1.29", new_version="v1.30", include_details=False)
)
