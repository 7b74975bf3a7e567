from __future__ import annotations

import math

from airline_intel.core import bundle_names as names
from airline_intel.core.bundles import CategoryBreakdown, FeatureImportance
from airline_intel.data import build_dataset_registry


def test_registry_holds_every_bundle_and_is_frozen():
    registry = build_dataset_registry()

    assert registry.frozen
    assert set(registry.names()) == set(names.ALL)


def test_every_breakdown_record_sums_to_100():
    registry = build_dataset_registry()
    breakdowns = [b for b in map(registry.get, registry.names()) if isinstance(b, CategoryBreakdown)]

    assert len(breakdowns) == 3
    for bundle in breakdowns:
        for rec in bundle:
            assert math.isclose(rec.satisfied_pct + rec.dissatisfied_pct, 100.0, abs_tol=0.1)


def test_feature_importance_non_increasing():
    fi = build_dataset_registry().get_typed(names.SHAP_IMPORTANCE, FeatureImportance)
    values = [r.importance for r in fi]

    assert len(values) == 8
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert fi.features[0] == "Online boarding"


def test_rating_breakdowns_cover_zero_to_five():
    registry = build_dataset_registry()
    for name in (names.EDA_BY_ONLINE_BOARDING, names.EDA_BY_WIFI):
        assert registry.get(name).categories == ("0", "1", "2", "3", "4", "5")
