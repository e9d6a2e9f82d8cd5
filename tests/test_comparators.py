"""Tests for field comparators and the label set-diff."""

import pytest

from metrics_diff.catalog.models import MetricRecord
from metrics_diff.diff.comparators import (
    compare_age_buckets,
    compare_buckets,
    compare_buf_cap,
    compare_const_labels,
    compare_deprecated_version,
    compare_help,
    compare_labels,
    compare_max_age,
    compare_stability_level,
    compare_type,
    describe_changes,
    label_set_diff,
)


def _make_metric(**kwargs):
    defaults = {"name": "foo", "type": "counter", "help": "x"}
    defaults.update(kwargs)
    return MetricRecord(**defaults)


class TestScalarComparators:
    def test_help_changed(self):
        assert compare_help(_make_metric(help="a"), _make_metric(help="b")) == "Help text changed."

    def test_help_unchanged(self):
        assert compare_help(_make_metric(), _make_metric()) is None

    def test_help_cleared(self):
        assert compare_help(_make_metric(help="a"), _make_metric(help="")) == "Help text changed."

    def test_type_changed(self):
        result = compare_type(_make_metric(type="counter"), _make_metric(type="gauge"))
        assert result == "Type changed from `counter` to `gauge`."

    def test_type_unchanged(self):
        assert compare_type(_make_metric(), _make_metric()) is None

    def test_stability_changed(self):
        result = compare_stability_level(
            _make_metric(stability_level="ALPHA"), _make_metric(stability_level="BETA")
        )
        assert result == "Stability level changed from `ALPHA` to `BETA`."

    def test_stability_from_empty(self):
        result = compare_stability_level(_make_metric(), _make_metric(stability_level="STABLE"))
        assert result == "Stability level changed from `` to `STABLE`."


class TestDeprecatedVersion:
    def test_marked_deprecated(self):
        result = compare_deprecated_version(
            _make_metric(deprecated_version=""), _make_metric(deprecated_version="1.30")
        )
        assert result == "Marked as deprecated in version `1.30`."

    def test_no_longer_deprecated(self):
        result = compare_deprecated_version(
            _make_metric(deprecated_version="1.30"), _make_metric(deprecated_version="")
        )
        assert result == "No longer marked as deprecated."

    def test_version_changed(self):
        result = compare_deprecated_version(
            _make_metric(deprecated_version="1.30"), _make_metric(deprecated_version="1.31")
        )
        assert result == "Deprecated version changed from `1.30` to `1.31`."

    def test_equal(self):
        assert compare_deprecated_version(
            _make_metric(deprecated_version="1.30"), _make_metric(deprecated_version="1.30")
        ) is None

    def test_both_empty(self):
        assert compare_deprecated_version(_make_metric(), _make_metric()) is None


class TestNumericComparators:
    @pytest.mark.parametrize(
        "comparator, attr, label",
        [
            (compare_age_buckets, "age_buckets", "AgeBuckets"),
            (compare_buf_cap, "buf_cap", "BufCap"),
            (compare_max_age, "max_age", "MaxAge"),
        ],
    )
    def test_changed(self, comparator, attr, label):
        old = _make_metric(**{attr: 5})
        new = _make_metric(**{attr: 10})
        assert comparator(old, new) == f"{label} changed from `5` to `10`."

    @pytest.mark.parametrize("comparator", [compare_age_buckets, compare_buf_cap, compare_max_age])
    def test_unchanged(self, comparator):
        assert comparator(_make_metric(), _make_metric()) is None

    def test_comparator_names(self):
        assert compare_max_age.__name__ == "compare_max_age"


class TestConstLabels:
    def test_order_independent(self):
        old = _make_metric(const_labels={"a": "1", "b": "2"})
        new = _make_metric(const_labels={"b": "2", "a": "1"})
        assert compare_const_labels(old, new) is None

    def test_value_changed(self):
        old = _make_metric(const_labels={"a": "1"})
        new = _make_metric(const_labels={"a": "2"})
        assert compare_const_labels(old, new) == "ConstLabels changed."

    def test_key_added(self):
        old = _make_metric()
        new = _make_metric(const_labels={"a": "1"})
        assert compare_const_labels(old, new) == "ConstLabels changed."


class TestLabelSetDiff:
    def test_reordered(self):
        result = label_set_diff(["a", "b"], ["b", "a"])
        assert result == "Labels reordered: [a, b] → [b, a]"

    def test_added_and_removed(self):
        result = label_set_diff(["a", "b"], ["a", "c"])
        assert result == "Added labels: [`c`]. <br> Removed labels: [`b`]."

    def test_added_only_sorted(self):
        result = label_set_diff(["a"], ["a", "z", "m"])
        assert result == "Added labels: [`m`, `z`]."

    def test_removed_only(self):
        result = label_set_diff(["code", "verb"], [])
        assert result == "Removed labels: [`code`, `verb`]."

    def test_duplicates_count_as_reordering(self):
        result = label_set_diff(["a", "a", "b"], ["a", "b"])
        assert result.startswith("Labels reordered:")

    def test_compare_labels_unchanged(self):
        labels = ("verb", "code")
        assert compare_labels(_make_metric(labels=labels), _make_metric(labels=labels)) is None

    def test_compare_labels_reordered(self):
        result = compare_labels(_make_metric(labels=("a", "b")), _make_metric(labels=("b", "a")))
        assert "reordered" in result
        assert "Added" not in result


class TestBuckets:
    def test_order_sensitive(self):
        old = _make_metric(buckets=(1.0, 2.0, 3.0))
        new = _make_metric(buckets=(3.0, 2.0, 1.0))
        assert compare_buckets(old, new) == "Buckets changed."

    def test_equal(self):
        old = _make_metric(buckets=(0.1, 0.5))
        assert compare_buckets(old, _make_metric(buckets=(0.1, 0.5))) is None

    def test_exact_float_equality(self):
        old = _make_metric(buckets=(0.1 + 0.2,))
        new = _make_metric(buckets=(0.3,))
        assert compare_buckets(old, new) == "Buckets changed."

    def test_length_change(self):
        old = _make_metric(buckets=(1.0,))
        new = _make_metric(buckets=(1.0, 2.0))
        assert compare_buckets(old, new) == "Buckets changed."


class TestDescribeChanges:
    def test_no_changes(self):
        assert describe_changes(_make_metric(), _make_metric()) == ()

    def test_objectives_not_compared(self):
        old = _make_metric(objectives={0.5: 0.05})
        new = _make_metric(objectives={0.99: 0.001})
        assert describe_changes(old, new) == ()

    def test_fixed_order(self):
        old = _make_metric(
            help="a", type="counter", buckets=(1.0,), labels=("x",), max_age=1,
        )
        new = _make_metric(
            help="b", type="gauge", buckets=(2.0,), labels=("y",), max_age=2,
        )
        assert describe_changes(old, new) == (
            "Help text changed.",
            "Type changed from `counter` to `gauge`.",
            "MaxAge changed from `1` to `2`.",
            "Added labels: [`y`]. <br> Removed labels: [`x`].",
            "Buckets changed.",
        )

    def test_custom_comparators(self):
        old, new = _make_metric(help="a", type="gauge"), _make_metric(help="b")
        assert describe_changes(old, new, comparators=[compare_type]) == (
            "Type changed from `gauge` to `counter`.",
        )
