"""Catalog loading — decode YAML metric catalogs into MetricRecords.

A catalog is a YAML list of mappings using the field names of the upstream
metrics documentation generator::

    - name: request_total
      subsystem: apiserver
      help: Counter of apiserver requests.
      type: Counter
      stabilityLevel: STABLE
      labels: [code, verb]

Scalars are read with a ``BaseLoader`` subclass so string fields keep their
exact source text (``deprecatedVersion: 1.30`` stays ``"1.30"`` rather than
becoming the float ``1.3``). Numeric fields are converted explicitly. The one
implicit type resolved is null: ``~``, ``null`` and an empty value all decode
to ``None`` and so mean "absent", exactly like an omitted key.
"""

import math
import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import yaml

from ..exceptions import CatalogAccessError, CatalogFormatError, CatalogParseError
from ..logging_config import get_logger
from .models import MetricRecord

logger = get_logger(__name__)

# YAML key -> MetricRecord attribute, in serialisation order.
FIELD_NAMES: Dict[str, str] = {
    "name": "name",
    "subsystem": "subsystem",
    "namespace": "namespace",
    "help": "help",
    "type": "type",
    "deprecatedVersion": "deprecated_version",
    "stabilityLevel": "stability_level",
    "labels": "labels",
    "buckets": "buckets",
    "objectives": "objectives",
    "ageBuckets": "age_buckets",
    "bufCap": "buf_cap",
    "maxAge": "max_age",
    "constLabels": "const_labels",
}

_SPECIAL_FLOATS = {
    ".inf": math.inf,
    "+.inf": math.inf,
    "-.inf": -math.inf,
    ".nan": math.nan,
}


class CatalogLoader(yaml.BaseLoader):
    """``BaseLoader`` that also resolves plain YAML nulls to ``None``."""


CatalogLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)
CatalogLoader.add_constructor("tag:yaml.org,2002:null", lambda loader, node: None)


# ── Scalar conversion ────────────────────────────────────────────────────────

def _to_str(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"{field_name} must be a scalar")
    return str(value)


def _to_float(value: Any, field_name: str) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    text = value.strip()
    special = _SPECIAL_FLOATS.get(text.lower())
    if special is not None:
        return special
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"{field_name} must be a number, got {value!r}") from None


def _to_int(value: Any, field_name: str, unsigned: bool = False) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be an integer, got {value!r}") from None
    if unsigned and result < 0:
        raise ValueError(f"{field_name} must be non-negative, got {result}")
    return result


def _to_str_list(value: Any, field_name: str) -> tuple:
    if value is None or value == "":
        return ()
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list")
    return tuple(_to_str(item, field_name) for item in value)


def _to_float_list(value: Any, field_name: str) -> tuple:
    if value is None or value == "":
        return ()
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list")
    return tuple(_to_float(item, field_name) for item in value)


def _to_mapping(
    value: Any,
    field_name: str,
    convert: Callable[[Any, str], Any],
) -> dict:
    if value is None or value == "":
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a mapping")
    return {convert(k, field_name): convert(v, field_name) for k, v in value.items()}


# ── Record conversion ────────────────────────────────────────────────────────

def metric_from_dict(data: Mapping[str, Any]) -> MetricRecord:
    """Build a MetricRecord from one decoded catalog entry.

    Raises:
        ValueError: If ``name`` is missing or a field has the wrong shape.
    """
    if "name" not in data or data["name"] is None:
        raise ValueError("name is required")

    unknown = sorted(str(k) for k in data if k not in FIELD_NAMES)
    if unknown:
        logger.debug("Ignoring unknown fields on %s: %s", data.get("name"), ", ".join(unknown))

    return MetricRecord(
        name=_to_str(data["name"], "name"),
        namespace=_to_str(data.get("namespace"), "namespace"),
        subsystem=_to_str(data.get("subsystem"), "subsystem"),
        help=_to_str(data.get("help"), "help"),
        type=_to_str(data.get("type"), "type"),
        deprecated_version=_to_str(data.get("deprecatedVersion"), "deprecatedVersion"),
        stability_level=_to_str(data.get("stabilityLevel"), "stabilityLevel"),
        labels=_to_str_list(data.get("labels"), "labels"),
        buckets=_to_float_list(data.get("buckets"), "buckets"),
        objectives=_to_mapping(data.get("objectives"), "objectives", _to_float),
        age_buckets=_to_int(data.get("ageBuckets"), "ageBuckets", unsigned=True),
        buf_cap=_to_int(data.get("bufCap"), "bufCap", unsigned=True),
        max_age=_to_int(data.get("maxAge"), "maxAge"),
        const_labels=_to_mapping(data.get("constLabels"), "constLabels", _to_str),
    )


def metric_to_dict(record: MetricRecord) -> Dict[str, Any]:
    """Return the catalog representation of ``record``.

    Empty fields are omitted and map-valued fields are emitted with sorted
    keys so two dumps of equal records are byte-identical.
    """
    result: Dict[str, Any] = {}
    for yaml_key, attr in FIELD_NAMES.items():
        value = getattr(record, attr)
        if not value and yaml_key != "name":
            continue
        if isinstance(value, tuple):
            value = list(value)
        elif isinstance(value, Mapping):
            value = {k: value[k] for k in sorted(value)}
        result[yaml_key] = value
    return result


# ── Public API ───────────────────────────────────────────────────────────────

def parse_catalog(text: str, source: str = "<string>") -> List[MetricRecord]:
    """Decode catalog ``text`` into records, preserving document order.

    Raises:
        CatalogParseError: If ``text`` is not valid YAML.
        CatalogFormatError: If the document is not a list of metric mappings.
    """
    try:
        document = yaml.load(text, Loader=CatalogLoader)
    except yaml.YAMLError as e:
        raise CatalogParseError(source, str(e)) from e

    if document is None or document == "":
        return []
    if not isinstance(document, list):
        raise CatalogFormatError(source, "top-level document must be a list of metrics")

    records: List[MetricRecord] = []
    for index, entry in enumerate(document):
        if not isinstance(entry, dict):
            raise CatalogFormatError(source, "metric entry must be a mapping", index=index)
        try:
            records.append(metric_from_dict(entry))
        except ValueError as e:
            raise CatalogFormatError(source, str(e), index=index) from e

    logger.debug("Decoded %d metrics from %s", len(records), source)
    return records


def load_catalog(path: Union[str, Path]) -> List[MetricRecord]:
    """Read and decode the catalog file at ``path``.

    Raises:
        CatalogAccessError: If the file is missing or unreadable.
        CatalogParseError: If the file is not valid YAML.
        CatalogFormatError: If the file is not a list of metric mappings.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CatalogAccessError(p, "file not found") from None
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogAccessError(p, str(e)) from e

    records = parse_catalog(text, source=str(p))
    logger.info("Loaded %d metrics from %s", len(records), p)
    return records


def dump_records(records: List[Optional[MetricRecord]]) -> str:
    """Serialise records as a YAML list, skipping ``None`` entries."""
    payload = [metric_to_dict(r) for r in records if r is not None]
    if not payload:
        return ""
    return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False, allow_unicode=True)


def version_from_path(path: Union[str, Path]) -> str:
    """Return the version label encoded in a catalog file name.

    ``"data/v1.30.yaml"`` -> ``"v1.30"``
    """
    return Path(path).stem
