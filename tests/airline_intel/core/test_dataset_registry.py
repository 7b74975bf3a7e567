from __future__ import annotations

import pytest

from airline_intel.core.bundles import CategoryBreakdown, OutcomeCounts, ScalarMetrics
from airline_intel.core.dataset_registry import DatasetRegistry
from airline_intel.core.exceptions import NotFoundError, UnsupportedShapeError


def _make_registry() -> DatasetRegistry:
    registry = DatasetRegistry()
    registry.register("by_class", CategoryBreakdown.from_rows("by_class", "Class", [("Eco", 20.0, 80.0)]))
    registry.register("sample", OutcomeCounts(name="sample", satisfied=1, dissatisfied=1))
    return registry


def test_get_returns_registered_bundle():
    registry = _make_registry()

    assert registry.get("sample").total == 2
    assert "by_class" in registry
    assert len(registry) == 2
    assert registry.names() == ["by_class", "sample"]


def test_get_unknown_name_raises_not_found():
    registry = _make_registry()

    with pytest.raises(NotFoundError):
        registry.get("nope")

    # NotFoundError is still a KeyError for callers that only know the mapping protocol
    with pytest.raises(KeyError):
        registry.get("nope")


def test_register_rejects_duplicates_and_non_bundles():
    registry = _make_registry()

    with pytest.raises(ValueError):
        registry.register("sample", OutcomeCounts(name="sample", satisfied=0, dissatisfied=1))

    with pytest.raises(TypeError):
        registry.register("raw", {"satisfied": 1})


def test_frozen_registry_rejects_register():
    registry = _make_registry().freeze()

    assert registry.frozen
    with pytest.raises(RuntimeError):
        registry.register("late", OutcomeCounts(name="late", satisfied=0, dissatisfied=1))


def test_get_typed_checks_shape():
    registry = _make_registry()

    assert isinstance(registry.get_typed("by_class", CategoryBreakdown), CategoryBreakdown)

    with pytest.raises(UnsupportedShapeError):
        registry.get_typed("by_class", ScalarMetrics)
