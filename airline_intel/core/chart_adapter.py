from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .bundles import CategoryBreakdown, DatasetBundle, FeatureImportance
from .exceptions import UnsupportedShapeError

SATISFIED = "satisfied"
DISSATISFIED = "dissatisfied"

# Colour is bound to the outcome, never to the series position
OUTCOME_COLORS = {
    SATISFIED: "#0088FE",
    DISSATISFIED: "#FF8042",
}

NORMAL_COLOR = "#0088FE"
EMPHASIS_COLOR = "#FF8042"

DEFAULT_EMPHASIS_RANK = 3


class ChartKind(str, Enum):
    STACKED_BAR = "stacked_bar"
    HORIZONTAL_BAR = "horizontal_bar"


class Orientation(str, Enum):
    VERTICAL = "v"
    HORIZONTAL = "h"


@dataclass(frozen=True)
class Series:
    """
    One drawable series.

    - name: value field the series comes from (e.g. "satisfied", "importance")
    - values: one value per category, same order as SeriesSpec.categories
    - colors: one colour per value
    - emphasized: one flag per value, True where the bar is highlighted
    """

    name: str
    values: Tuple[float, ...]
    colors: Tuple[str, ...]
    emphasized: Tuple[bool, ...]

    @property
    def color(self) -> Optional[str]:
        """The single colour of the series, or None if bars are coloured individually."""
        unique = set(self.colors)
        return self.colors[0] if len(unique) == 1 else None


@dataclass(frozen=True)
class SeriesSpec:
    """
    Renderer-agnostic description of one chart: what to draw, not how.
    """

    kind: ChartKind
    orientation: Orientation
    stacked: bool
    category_field: str
    category_title: str
    categories: Tuple[str, ...]
    series: Tuple[Series, ...]
    value_unit: str = ""

    def get_series(self, name: str) -> Series:
        for s in self.series:
            if s.name == name:
                return s
        raise KeyError(f"Series '{name}' not in chart")


class ChartAdapter:
    """
    Turns a dataset bundle plus a chart kind into a {@link SeriesSpec}.

    Supported pairs:
    - STACKED_BAR over CategoryBreakdown: satisfied/dissatisfied stacked, colours from OUTCOME_COLORS
    - HORIZONTAL_BAR over FeatureImportance: one series, bundle order kept, first `emphasis_rank`
      bars highlighted

    Everything else raises UnsupportedShapeError. The adapter never formats numbers.
    """

    def __init__(self, emphasis_rank: int = DEFAULT_EMPHASIS_RANK):
        if emphasis_rank < 0:
            raise ValueError(f"emphasis_rank must be >= 0, got {emphasis_rank}")
        self.emphasis_rank = emphasis_rank

    def to_series(
            self,
            bundle: DatasetBundle,
            kind: ChartKind,
            orientation: Optional[Orientation] = None,
    ) -> SeriesSpec:
        if kind is ChartKind.STACKED_BAR and isinstance(bundle, CategoryBreakdown):
            return self._stacked_bar(bundle, orientation or Orientation.VERTICAL)

        if kind is ChartKind.HORIZONTAL_BAR and isinstance(bundle, FeatureImportance):
            if orientation not in (None, Orientation.HORIZONTAL):
                raise UnsupportedShapeError("Horizontal bar charts cannot be drawn vertically")
            return self._ranked_bar(bundle)

        raise UnsupportedShapeError(
            f"Chart kind '{getattr(kind, 'value', kind)}' is not supported for "
            f"{type(bundle).__name__} '{getattr(bundle, 'name', '?')}'"
        )

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    @staticmethod
    def _stacked_bar(bundle: CategoryBreakdown, orientation: Orientation) -> SeriesSpec:
        n = len(bundle)
        satisfied = tuple(r.satisfied_pct for r in bundle)
        dissatisfied = tuple(r.dissatisfied_pct for r in bundle)

        series = (
            Series(
                name=SATISFIED,
                values=satisfied,
                colors=(OUTCOME_COLORS[SATISFIED],) * n,
                emphasized=(False,) * n,
            ),
            Series(
                name=DISSATISFIED,
                values=dissatisfied,
                colors=(OUTCOME_COLORS[DISSATISFIED],) * n,
                emphasized=(False,) * n,
            ),
        )

        return SeriesSpec(
            kind=ChartKind.STACKED_BAR,
            orientation=orientation,
            stacked=True,
            category_field="category",
            category_title=bundle.dimension,
            categories=bundle.categories,
            series=series,
            value_unit="%",
        )

    def _ranked_bar(self, bundle: FeatureImportance) -> SeriesSpec:
        # Rank-based: min() clamps k to the bundle length
        k = min(self.emphasis_rank, len(bundle))
        emphasized = tuple(i < k for i in range(len(bundle)))
        colors = tuple(EMPHASIS_COLOR if flag else NORMAL_COLOR for flag in emphasized)

        series = (
            Series(
                name="importance",
                values=tuple(r.importance for r in bundle),
                colors=colors,
                emphasized=emphasized,
            ),
        )

        return SeriesSpec(
            kind=ChartKind.HORIZONTAL_BAR,
            orientation=Orientation.HORIZONTAL,
            stacked=False,
            category_field="feature",
            category_title="Feature",
            categories=bundle.features,
            series=series,
        )
