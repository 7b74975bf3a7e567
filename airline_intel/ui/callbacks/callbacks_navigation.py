from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output, State, no_update

from airline_intel.core.exceptions import NotFoundError
from airline_intel.core.view_router import ReportView, ViewRouter
from airline_intel.ui.ids import IDs

if TYPE_CHECKING:
    from airline_intel.ui.config import AppConfig

logger = logging.getLogger(__name__)


def restore_view(stored: Any, default: ReportView) -> ReportView:
    """
    Stored store value -> ReportView. Missing or stale values fall back to `default`.
    """
    if not stored:
        return default
    try:
        return ReportView.from_value(stored)
    except NotFoundError:
        logger.warning("Ignoring unknown stored view %r", stored)
        return default


def resolve_navigation(stored: Any, target: str, default: ReportView) -> Optional[str]:
    """
    Apply a nav click to the stored active view.

    :return: the new view value, or None when the click selects the view that is already active
    """
    router = ViewRouter(restore_view(stored, default))
    changed = router.select(ReportView.from_value(target))
    return router.current.value if changed else None


def register_navigation_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Nav click -> active view store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.ACTIVE_VIEW, "data"),
        Input({"type": IDs.Pattern.NAV_LINK, "index": ALL}, "n_clicks"),
        State(IDs.Store.ACTIVE_VIEW, "data"),
        prevent_initial_call=True,
    )
    def on_nav_click(n_clicks, stored):
        triggered = dash.ctx.triggered_id
        if not triggered or not any(n_clicks or []):
            return no_update

        new_value = resolve_navigation(stored, triggered["index"], ctx.default_view)
        if new_value is None:
            return no_update
        return new_value
