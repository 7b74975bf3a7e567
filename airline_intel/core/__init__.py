"""
Core domain layer: dataset bundles and their registry, chart adapter,
view router and the report renderer
"""

from .bundles import CategoryBreakdown, FeatureImportance, OutcomeCounts, ScalarMetrics
from .chart_adapter import ChartAdapter, ChartKind, SeriesSpec
from .dataset_registry import DatasetRegistry
from .exceptions import NotFoundError, UnsupportedShapeError
from .renderer import RenderedPage, ReportRenderer
from .summary import SampleSummary
from .view_router import ReportView, ViewRouter

__all__ = [
    "CategoryBreakdown",
    "FeatureImportance",
    "OutcomeCounts",
    "ScalarMetrics",
    "ChartAdapter",
    "ChartKind",
    "SeriesSpec",
    "DatasetRegistry",
    "NotFoundError",
    "UnsupportedShapeError",
    "RenderedPage",
    "ReportRenderer",
    "SampleSummary",
    "ReportView",
    "ViewRouter",
]
