from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
import dash_bootstrap_components as dbc
from dash import ALL, Input, Output, html

from airline_intel.ui.callbacks.callbacks_navigation import restore_view
from airline_intel.ui.ids import IDs
from airline_intel.ui.layout.build_page import build_page
from airline_intel.ui.layout.build_sidebar import nav_active_flags

if TYPE_CHECKING:
    from airline_intel.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _error_alert(details: str) -> dbc.Alert:
    return dbc.Alert(
        [
            html.H4("Something went wrong while rendering this report.", className="alert-heading"),
            html.P(details, className="mb-0"),
        ],
        color="danger",
    )


def render_content(ctx: AppConfig, stored: Any):
    """
    Store value -> (page content, nav `active` flags, nav `outline` flags).
    """
    view = restore_view(stored, ctx.default_view)
    active = nav_active_flags(view.value)
    outline = [not flag for flag in active]

    try:
        page = ctx.renderer.render(view, ctx.registry)
        content = build_page(page)
    except Exception:
        logger.exception("Error rendering report view", extra={"view": view.value})
        content = _error_alert(
            "The report data does not match this page. "
            "If this keeps happening, grab the logs and open an issue."
        )

    return content, active, outline


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Active view -> page content + highlighted nav item
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PAGE_CONTENT, "children"),
        Output({"type": IDs.Pattern.NAV_LINK, "index": ALL}, "active"),
        Output({"type": IDs.Pattern.NAV_LINK, "index": ALL}, "outline"),
        Input(IDs.Store.ACTIVE_VIEW, "data"),
    )
    def update_page(stored):
        return render_content(ctx, stored)
