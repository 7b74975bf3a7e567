from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple, Union

from .exceptions import BundleValidationError, NotFoundError

# Tolerance for satisfied + dissatisfied == 100
PERCENT_TOLERANCE = 0.1


@dataclass(frozen=True)
class BreakdownRecord:
    category: str
    satisfied_pct: float
    dissatisfied_pct: float


@dataclass(frozen=True)
class CategoryBreakdown:
    """
    Share of satisfied vs dissatisfied passengers per category of one feature.

    Fields:

    - name: registry name of the bundle
    - dimension: human-readable name of the feature the categories belong to (used as axis title)
    - records: ordered records, one per category

    Every record must satisfy satisfied_pct + dissatisfied_pct == 100 (within PERCENT_TOLERANCE)
    """

    name: str
    dimension: str
    records: Tuple[BreakdownRecord, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))
        if not self.records:
            raise BundleValidationError(f"Breakdown '{self.name}' has no records")

        for rec in self.records:
            for value in (rec.satisfied_pct, rec.dissatisfied_pct):
                if not 0.0 <= value <= 100.0:
                    raise BundleValidationError(
                        f"Breakdown '{self.name}': '{rec.category}' has percentage {value} outside [0, 100]"
                    )
            total = rec.satisfied_pct + rec.dissatisfied_pct
            if not math.isclose(total, 100.0, abs_tol=PERCENT_TOLERANCE):
                raise BundleValidationError(
                    f"Breakdown '{self.name}': '{rec.category}' sums to {total}, expected 100"
                )

    @classmethod
    def from_rows(cls, name: str, dimension: str, rows) -> CategoryBreakdown:
        """
        Build from (category, satisfied_pct, dissatisfied_pct) tuples.
        """
        return cls(
            name=name,
            dimension=dimension,
            records=tuple(BreakdownRecord(str(c), float(s), float(d)) for c, s, d in rows),
        )

    @property
    def categories(self) -> Tuple[str, ...]:
        return tuple(r.category for r in self.records)

    def __iter__(self) -> Iterator[BreakdownRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class FeatureScore:
    feature: str
    importance: float


@dataclass(frozen=True)
class FeatureImportance:
    """
    Ranked feature importance scores (mean |SHAP| per feature).

    Ordering is part of the data: records must already be sorted descending by
    importance when the bundle is built. Consumers never re-sort.
    """

    name: str
    records: Tuple[FeatureScore, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))
        if not self.records:
            raise BundleValidationError(f"Feature importance '{self.name}' has no records")

        for rec in self.records:
            if not math.isfinite(rec.importance):
                raise BundleValidationError(
                    f"Feature importance '{self.name}': '{rec.feature}' has non-finite score {rec.importance}"
                )

        for prev, cur in zip(self.records, self.records[1:]):
            if cur.importance > prev.importance:
                raise BundleValidationError(
                    f"Feature importance '{self.name}' is not sorted: "
                    f"'{cur.feature}' ({cur.importance}) ranks below '{prev.feature}' ({prev.importance})"
                )

    @classmethod
    def from_rows(cls, name: str, rows) -> FeatureImportance:
        return cls(
            name=name,
            records=tuple(FeatureScore(str(f), float(i)) for f, i in rows),
        )

    @property
    def features(self) -> Tuple[str, ...]:
        return tuple(r.feature for r in self.records)

    def __iter__(self) -> Iterator[FeatureScore]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class ScalarMetrics:
    """
    Headline model metrics, already formatted for display (e.g. "96.2%").
    """

    name: str
    model: str
    metrics: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metrics", tuple((str(k), str(v)) for k, v in self.metrics))
        if not self.model:
            raise BundleValidationError(f"Metrics '{self.name}' have no model identifier")

        keys = [k for k, _ in self.metrics]
        if len(set(keys)) != len(keys):
            raise BundleValidationError(f"Metrics '{self.name}' contain duplicate metric names")

    def get(self, metric: str) -> str:
        for key, value in self.metrics:
            if key == metric:
                return value
        raise NotFoundError(f"Metric '{metric}' not found in '{self.name}'")

    def as_dict(self) -> Dict[str, str]:
        return dict(self.metrics)


@dataclass(frozen=True)
class OutcomeCounts:
    """
    Raw satisfied/dissatisfied head counts for a passenger sample.
    """

    name: str
    satisfied: int
    dissatisfied: int

    def __post_init__(self) -> None:
        if self.satisfied < 0 or self.dissatisfied < 0:
            raise BundleValidationError(f"Outcome counts '{self.name}' must be non-negative")

    @property
    def total(self) -> int:
        return self.satisfied + self.dissatisfied


DatasetBundle = Union[CategoryBreakdown, FeatureImportance, ScalarMetrics, OutcomeCounts]

BUNDLE_TYPES = (CategoryBreakdown, FeatureImportance, ScalarMetrics, OutcomeCounts)
