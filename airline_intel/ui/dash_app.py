from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from airline_intel.core.chart_adapter import ChartAdapter
from airline_intel.core.renderer import ReportRenderer
from airline_intel.data import build_dataset_registry
from airline_intel.ui.callbacks.callbacks_navigation import register_navigation_callbacks
from airline_intel.ui.callbacks.callbacks_render import register_render_callbacks
from airline_intel.ui.config import AppConfig
from airline_intel.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config: Optional[AppConfig] = None) -> Dash:
    # 1) Config
    ctx = config or AppConfig.from_env()
    ctx.validate_settings()

    # 2) Data + rendering services
    if ctx.registry is None:
        ctx.registry = build_dataset_registry()
    if ctx.renderer is None:
        ctx.renderer = ReportRenderer(ChartAdapter(emphasis_rank=ctx.emphasis_rank))
    ctx.validate()

    # Resolve the assets folder relative to this file, not the working directory
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY, dbc.icons.BOOTSTRAP],
        assets_folder=str(assets_path),
    )
    app.title = ctx.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_navigation_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "app_created",
        extra={"default_view": ctx.default_view.value, "emphasis_rank": ctx.emphasis_rank},
    )
    return app
