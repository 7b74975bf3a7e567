from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import dcc, html

from airline_intel.core.renderer import (
    Block,
    ChartBlock,
    InsightList,
    MetricCards,
    RenderedPage,
    SectionBlock,
    StatCards,
)
from airline_intel.ui.figures import build_figure


def build_page(page: RenderedPage) -> html.Div:
    """
    Turn a RenderedPage into Dash components.
    """
    children: List = []
    if page.title:
        children.append(html.H2(page.title, className="fw-bold mb-4"))
    children.extend(build_block(block) for block in page.blocks)

    return html.Div(children, className=f"aiq-page aiq-page-{page.view.value}")


def build_block(block: Block):
    if isinstance(block, StatCards):
        return _stat_cards(block)
    if isinstance(block, InsightList):
        return _insight_list(block)
    if isinstance(block, MetricCards):
        return _metric_cards(block)
    if isinstance(block, ChartBlock):
        return _chart_card(block)
    if isinstance(block, SectionBlock):
        return _section(block)
    raise TypeError(f"Unknown page block {type(block).__name__}")


# ------------------------------------------------------------------
# Blocks
# ------------------------------------------------------------------
def _stat_cards(block: StatCards) -> dbc.Row:
    cols = []
    for card in block.cards:
        cols.append(
            dbc.Col(
                dbc.Card(
                    dbc.CardBody(
                        html.Div(
                            [
                                html.Div(
                                    html.I(className=f"bi bi-{card.icon} text-white fs-4"),
                                    className=f"aiq-stat-icon rounded-circle bg-{card.tone} p-3 me-3",
                                ),
                                html.Div(
                                    [
                                        html.Div(card.title, className="small text-muted fw-semibold"),
                                        html.Div(card.value, className="fs-2 fw-bold"),
                                    ]
                                ),
                            ],
                            className="d-flex align-items-center",
                        )
                    ),
                    className="shadow-sm h-100",
                ),
                md=4,
            )
        )
    return dbc.Row(cols, className="g-4 mb-4")


def _insight_list(block: InsightList) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.H4(block.title, className="mb-3"),
                html.Ul(
                    [html.Li(dcc.Markdown(item, className="aiq-insight")) for item in block.items],
                    className="text-secondary",
                ),
            ]
        ),
        className="shadow-sm mb-4",
    )


def _metric_cards(block: MetricCards) -> dbc.Card:
    tiles = [
        dbc.Col(
            html.Div(
                [
                    html.Div(card.label, className="small text-muted"),
                    html.Div(
                        card.value,
                        className="fs-4 fw-semibold " + ("text-success" if card.highlight else ""),
                    ),
                ],
                className="aiq-metric border rounded bg-light p-3 h-100",
            ),
            md=3,
        )
        for card in block.cards
    ]

    return dbc.Card(
        dbc.CardBody(
            [
                html.H4(block.title, className="mb-3"),
                html.P(block.intro, className="text-muted mb-3"),
                dbc.Row(tiles, className="g-3"),
            ]
        ),
        className="shadow-sm mb-4",
    )


def _chart_card(block: ChartBlock) -> dbc.Card:
    body: List = [html.H4(block.title, className="mb-3")]
    if block.description:
        body.append(dcc.Markdown(block.description, className="text-muted"))

    body.append(
        dcc.Graph(
            figure=build_figure(block),
            config={"displayModeBar": False},
        )
    )

    if block.caption:
        body.append(dcc.Markdown(block.caption, className="small text-muted mt-3"))

    return dbc.Card(dbc.CardBody(body), className="shadow-sm mb-4")


def _section(block: SectionBlock) -> html.Div:
    if not block.title:
        # Embedded without heading (dashboard): two charts per row on large screens
        return html.Div(
            dbc.Row([dbc.Col(build_block(b), lg=6) for b in block.blocks], className="g-4"),
            className="aiq-section aiq-section-embedded",
        )

    children: List = [html.H2(block.title, className="fw-bold mb-4")]
    children.extend(build_block(b) for b in block.blocks)
    return html.Div(children, className="aiq-section")
