from __future__ import annotations

import pytest

from airline_intel.core.bundles import (
    BreakdownRecord,
    CategoryBreakdown,
    FeatureImportance,
    FeatureScore,
    OutcomeCounts,
    ScalarMetrics,
)
from airline_intel.core.exceptions import BundleValidationError, NotFoundError


def test_breakdown_from_rows_keeps_order():
    bd = CategoryBreakdown.from_rows("b", "Class", [("Eco", 20.0, 80.0), ("Business", 70.0, 30.0)])

    assert bd.categories == ("Eco", "Business")
    assert len(bd) == 2
    assert list(bd)[1] == BreakdownRecord("Business", 70.0, 30.0)


def test_breakdown_rejects_records_not_summing_to_100():
    with pytest.raises(BundleValidationError):
        CategoryBreakdown.from_rows("b", "Class", [("Eco", 20.0, 70.0)])


def test_breakdown_accepts_rounding_noise():
    bd = CategoryBreakdown.from_rows("b", "Class", [("Eco", 18.55, 81.5)])
    assert len(bd) == 1


def test_breakdown_rejects_out_of_range_percentages():
    with pytest.raises(BundleValidationError):
        CategoryBreakdown.from_rows("b", "Class", [("Eco", 120.0, -20.0)])


def test_breakdown_rejects_empty():
    with pytest.raises(BundleValidationError):
        CategoryBreakdown(name="b", dimension="Class", records=())


def test_breakdown_is_immutable():
    bd = CategoryBreakdown.from_rows("b", "Class", [("Eco", 20.0, 80.0)])
    with pytest.raises(AttributeError):
        bd.records = ()


def test_feature_importance_requires_descending_order():
    with pytest.raises(BundleValidationError):
        FeatureImportance.from_rows("f", [("a", 0.1), ("b", 0.3)])


def test_feature_importance_allows_ties():
    fi = FeatureImportance.from_rows("f", [("a", 0.3), ("b", 0.3), ("c", 0.1)])
    assert fi.features == ("a", "b", "c")
    assert list(fi)[2] == FeatureScore("c", 0.1)


def test_scalar_metrics_lookup():
    m = ScalarMetrics(name="m", model="XGB", metrics=(("accuracy", "96.2%"),))

    assert m.get("accuracy") == "96.2%"
    assert m.as_dict() == {"accuracy": "96.2%"}

    with pytest.raises(NotFoundError):
        m.get("f1")


def test_scalar_metrics_rejects_duplicates_and_missing_model():
    with pytest.raises(BundleValidationError):
        ScalarMetrics(name="m", model="XGB", metrics=(("a", "1"), ("a", "2")))

    with pytest.raises(BundleValidationError):
        ScalarMetrics(name="m", model="", metrics=())


def test_outcome_counts_total_and_validation():
    assert OutcomeCounts(name="o", satisfied=43, dissatisfied=57).total == 100

    with pytest.raises(BundleValidationError):
        OutcomeCounts(name="o", satisfied=-1, dissatisfied=5)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_feature_importance_rejects_non_finite_scores(bad):
    # a NaN compares False both ways and would otherwise hide [0.1, nan, 0.5]
    with pytest.raises(BundleValidationError):
        FeatureImportance.from_rows("f", [("a", 0.1), ("b", bad), ("c", 0.5)])

    with pytest.raises(BundleValidationError):
        FeatureImportance.from_rows("f", [("a", bad)])
