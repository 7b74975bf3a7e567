from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from airline_intel.ui.ids import IDs
from airline_intel.ui.layout.build_page import build_page
from airline_intel.ui.layout.build_sidebar import build_sidebar

if TYPE_CHECKING:
    from airline_intel.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    ctx.validate()
    initial_page = ctx.renderer.render(ctx.default_view, ctx.registry)

    return dbc.Container(
        fluid=True,
        className="aiq-root d-flex p-0",
        children=[
            # Active page survives reloads within the browser tab only
            dcc.Store(id=IDs.Store.ACTIVE_VIEW, storage_type="session", data=ctx.default_view.value),

            build_sidebar(ctx.ui_title, ctx.subtitle, ctx.default_view),

            html.Main(
                html.Div(
                    build_page(initial_page),
                    id=IDs.Control.PAGE_CONTENT,
                    className="aiq-content mx-auto",
                ),
                className="aiq-main flex-grow-1 p-4",
            ),
        ],
    )
