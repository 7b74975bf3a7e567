from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from airline_intel.core.view_router import ReportView
from airline_intel.ui.ids import IDs, nav_link_id

NAV_ICONS = {
    ReportView.DASHBOARD: "grid-1x2-fill",
    ReportView.EXPLORATORY_ANALYSIS: "bar-chart-fill",
    ReportView.MODEL_ANALYSIS: "cpu-fill",
}


def nav_active_flags(active_value: str | None) -> List[bool]:
    """
    One flag per ReportView (enum order), True only for the active view.
    """
    return [view.value == active_value for view in ReportView]


def build_nav_button(view: ReportView, active: bool) -> dbc.Button:
    return dbc.Button(
        [
            html.I(className=f"bi bi-{NAV_ICONS[view]} me-3"),
            html.Span(view.label),
        ],
        id=nav_link_id(view.value),
        n_clicks=0,
        color="primary",
        outline=not active,
        active=active,
        className="aiq-nav-link w-100 text-start mb-2",
    )


def build_sidebar(title: str, subtitle: str, active_view: ReportView) -> html.Div:
    return html.Div(
        id=IDs.Control.SIDEBAR,
        className="aiq-sidebar border-end bg-white",
        children=[
            # Brand
            html.Div(
                [
                    html.I(className="bi bi-airplane-fill text-primary fs-3"),
                    html.Div(
                        [
                            html.H4(title, className="mb-0 ms-2 fw-bold"),
                            html.Small(subtitle, className="text-muted ms-2"),
                        ],
                        className="d-flex flex-column",
                    ),
                ],
                className="d-flex align-items-center border-bottom p-4",
            ),
            html.Nav(
                [build_nav_button(view, view is active_view) for view in ReportView],
                className="p-3",
            ),
        ],
    )
