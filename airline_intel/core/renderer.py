from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, Optional, Tuple, Type, TypeVar, Union

from . import bundle_names as names
from .bundles import CategoryBreakdown, FeatureImportance, OutcomeCounts, ScalarMetrics
from .chart_adapter import ChartAdapter, ChartKind, Orientation, SeriesSpec
from .dataset_registry import DatasetRegistry
from .summary import SampleSummary
from .view_router import ReportView

logger = logging.getLogger(__name__)

T = TypeVar("T")


def format_percent(value: float) -> str:
    """
    One fractional digit plus a '%' suffix, e.g. 69.9 -> '69.9%', 43 -> '43.0%'.

    Halves round up (3.25 -> '3.3%'), not to the even digit like format().
    """
    rounded = Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"


# ---------------------------------------------------------------------------
# Page blocks
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StatCard:
    title: str
    value: str
    icon: str
    tone: str


@dataclass(frozen=True)
class StatCards:
    cards: Tuple[StatCard, ...]


@dataclass(frozen=True)
class InsightList:
    title: str
    items: Tuple[str, ...]


@dataclass(frozen=True)
class MetricCard:
    label: str
    value: str
    highlight: bool = True


@dataclass(frozen=True)
class MetricCards:
    title: str
    intro: str
    cards: Tuple[MetricCard, ...]


@dataclass(frozen=True)
class ChartBlock:
    """
    A titled chart. point_labels holds pre-formatted hover text per series
    (series name -> one label per category).
    """

    title: str
    spec: SeriesSpec
    description: Optional[str] = None
    caption: Optional[str] = None
    point_labels: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    height: int = 300

    def labels_for(self, series_name: str) -> Optional[Tuple[str, ...]]:
        for name, labels in self.point_labels:
            if name == series_name:
                return labels
        return None


@dataclass(frozen=True)
class SectionBlock:
    title: Optional[str]
    blocks: Tuple["Block", ...]


Block = Union[StatCards, InsightList, MetricCards, ChartBlock, SectionBlock]


@dataclass(frozen=True)
class RenderedPage:
    view: ReportView
    title: Optional[str]
    blocks: Tuple[Block, ...] = field(default_factory=tuple)

    def walk(self) -> Iterator[Block]:
        """Depth-first over all blocks, including those nested in sections."""
        stack = list(reversed(self.blocks))
        while stack:
            block = stack.pop()
            yield block
            if isinstance(block, SectionBlock):
                stack.extend(reversed(block.blocks))

    def find_all(self, block_type: Type[T]) -> Tuple[T, ...]:
        return tuple(b for b in self.walk() if isinstance(b, block_type))

    def charts(self) -> Tuple[ChartBlock, ...]:
        return self.find_all(ChartBlock)


# ---------------------------------------------------------------------------
# Literal page content
# ---------------------------------------------------------------------------
PAGE_TITLES = {
    ReportView.DASHBOARD: "Dashboard",
    ReportView.EXPLORATORY_ANALYSIS: "Exploratory Data Analysis (EDA)",
    ReportView.MODEL_ANALYSIS: "Model & SHAP Analysis",
}

# (bundle name, chart title, orientation)
EDA_CHARTS = (
    (names.EDA_BY_CLASS, "Satisfaction by Class", Orientation.HORIZONTAL),
    (names.EDA_BY_ONLINE_BOARDING, "Satisfaction by Online Boarding Rating", Orientation.VERTICAL),
    (names.EDA_BY_WIFI, "Satisfaction by Inflight Wifi Service", Orientation.VERTICAL),
)

KEY_INSIGHTS = (
    "**Online Boarding** is the single most critical factor. A poor boarding experience "
    "(rating 1-2) almost guarantees dissatisfaction.",
    "**Business Class** passengers are significantly more satisfied, driven by better "
    "services across the board.",
    "**In-flight Wifi Service** is a major driver, especially for Business travelers. "
    "A rating below 3 is a strong predictor of dissatisfaction.",
    "**Type of Travel** matters: 'Business travel' passengers have higher expectations but "
    "are also more often 'satisfied' (likely due to flying Business Class).",
    "Services like **Seat Comfort** and **In-flight Entertainment** are important, but less "
    "critical than the 'big 3' (Boarding, Class, Wifi).",
)

# (metric name in the bundle, card label)
METRIC_LABELS = (
    ("accuracy", "Accuracy"),
    ("precision", "Precision (for 'satisfied')"),
    ("recall", "Recall (for 'satisfied')"),
)

MODEL_INTRO = (
    "An {model} was trained on the full dataset, demonstrating high predictive power."
)

SHAP_DESCRIPTION = (
    "SHAP (SHapley Additive exPlanations) analysis shows the average impact of each feature "
    "on the model's prediction. This tells us *why* the model makes its decisions."
)


def _shap_caption(spec: SeriesSpec) -> str:
    top = [c for c, flag in zip(spec.categories, spec.series[0].emphasized) if flag]
    if not top:
        return "**Interpretation:** No drivers are highlighted."
    text = f"**Interpretation:** The chart shows `{top[0]}` has the largest impact on predicting satisfaction"
    if len(top) > 1:
        text += ", followed by " + " and ".join(f"`{c}`" for c in top[1:])
    plural = len(top) != 1
    return (
        f"{text}. The top {len(top)} driver{'s' if plural else ''} (highlighted in orange) "
        f"{'are' if plural else 'is'} overwhelmingly the most important."
    )


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------
class ReportRenderer:
    """
    Builds the page for a report view out of registry bundles.

    render() is a pure function of (view, registry): it never mutates bundles and
    the same inputs always give an equal RenderedPage.
    """

    def __init__(self, adapter: Optional[ChartAdapter] = None):
        self.adapter = adapter or ChartAdapter()

    def render(self, view: ReportView, registry: DatasetRegistry) -> RenderedPage:
        if not isinstance(view, ReportView):
            raise TypeError(f"Expected a ReportView, got {view!r}")

        logger.info("render_start", extra={"view": view.value})

        if view is ReportView.DASHBOARD:
            page = self.dashboard(registry)
        elif view is ReportView.EXPLORATORY_ANALYSIS:
            section = self.exploratory_section(registry, show_heading=True)
            page = RenderedPage(view=view, title=section.title, blocks=section.blocks)
        else:
            page = self.model_analysis(registry)

        logger.info("render_done", extra={"view": view.value, "n_charts": len(page.charts())})
        return page

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------
    def dashboard(self, registry: DatasetRegistry) -> RenderedPage:
        outcomes = registry.get_typed(names.SAMPLE_OUTCOMES, OutcomeCounts)
        summary = SampleSummary.from_outcomes(outcomes)

        return RenderedPage(
            view=ReportView.DASHBOARD,
            title=PAGE_TITLES[ReportView.DASHBOARD],
            blocks=(
                self.summary_cards(summary),
                InsightList(title="Key Insights Summary", items=KEY_INSIGHTS),
                self.exploratory_section(registry, show_heading=False),
            ),
        )

    def exploratory_section(self, registry: DatasetRegistry, show_heading: bool = True) -> SectionBlock:
        """
        The EDA charts. The dashboard embeds this same section with show_heading=False.
        """
        charts = []
        for bundle_name, title, orientation in EDA_CHARTS:
            breakdown = registry.get_typed(bundle_name, CategoryBreakdown)
            spec = self.adapter.to_series(breakdown, ChartKind.STACKED_BAR, orientation)
            charts.append(
                ChartBlock(
                    title=title,
                    spec=spec,
                    point_labels=tuple(
                        (s.name, tuple(format_percent(v) for v in s.values)) for s in spec.series
                    ),
                )
            )

        title = PAGE_TITLES[ReportView.EXPLORATORY_ANALYSIS] if show_heading else None
        return SectionBlock(title=title, blocks=tuple(charts))

    def model_analysis(self, registry: DatasetRegistry) -> RenderedPage:
        metrics = registry.get_typed(names.MODEL_METRICS, ScalarMetrics)
        importance = registry.get_typed(names.SHAP_IMPORTANCE, FeatureImportance)

        cards = [MetricCard(label="Model Type", value=metrics.model, highlight=False)]
        cards.extend(MetricCard(label=label, value=metrics.get(key)) for key, label in METRIC_LABELS)

        spec = self.adapter.to_series(importance, ChartKind.HORIZONTAL_BAR)

        return RenderedPage(
            view=ReportView.MODEL_ANALYSIS,
            title=PAGE_TITLES[ReportView.MODEL_ANALYSIS],
            blocks=(
                MetricCards(
                    title="Model Performance (Simulated)",
                    intro=MODEL_INTRO.format(model=metrics.model),
                    cards=tuple(cards),
                ),
                ChartBlock(
                    title="SHAP Analysis: Key Drivers of Satisfaction",
                    spec=spec,
                    description=SHAP_DESCRIPTION,
                    caption=_shap_caption(spec),
                    height=400,
                ),
            ),
        )

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------
    @staticmethod
    def summary_cards(summary: SampleSummary) -> StatCards:
        return StatCards(
            cards=(
                StatCard("Total Passengers (Sample)", str(summary.total), "people-fill", "primary"),
                StatCard("Satisfied (Sample)", str(summary.satisfied_count), "star-fill", "success"),
                StatCard("Satisfaction Rate (Sample)", format_percent(summary.rate), "pie-chart-fill", "warning"),
            )
        )
