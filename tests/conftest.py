"""Shared test fixtures for metrics-diff tests."""

import textwrap

import pytest

from metrics_diff.catalog.models import MetricRecord


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and METRICS_DIFF_* vars out of tests."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)
    for name in ("TITLE", "OUTPUT_FORMAT", "INCLUDE_DETAILS", "STRICT", "VERBOSITY"):
        monkeypatch.delenv(f"METRICS_DIFF_{name}", raising=False)
    return work


@pytest.fixture
def write_catalog(tmp_path):
    """Write dedented YAML to ``tmp_path/<name>`` and return the path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def old_catalog(write_catalog):
    """Release catalog with one counter."""
    return write_catalog(
        "v1.29.yaml",
        """\
        - name: foo
          type: counter
          help: x
        """,
    )


@pytest.fixture
def new_catalog(write_catalog):
    """Next release: foo became a gauge, bar was added."""
    return write_catalog(
        "v1.30.yaml",
        """\
        - name: foo
          type: gauge
          help: x
        - name: bar
          type: counter
          help: y
        """,
    )


@pytest.fixture
def histogram_metric():
    """A fully populated histogram definition."""
    return MetricRecord(
        name="request_duration_seconds",
        namespace="apiserver",
        subsystem="",
        help="Response latency distribution.",
        type="Histogram",
        stability_level="STABLE",
        labels=("verb", "resource"),
        buckets=(0.005, 0.025, 0.1, 0.5, 1.0),
        const_labels={"component": "apiserver"},
    )
