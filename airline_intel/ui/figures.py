from __future__ import annotations

from typing import Any, Dict

import plotly.graph_objects as go

from airline_intel.core.chart_adapter import Orientation
from airline_intel.core.renderer import ChartBlock


def build_figure(block: ChartBlock) -> go.Figure:
    """
    Draw a ChartBlock's SeriesSpec with plotly.

    Colours, stacking and category order all come from the SeriesSpec; hover text uses
    the block's pre-formatted point labels when present.
    """
    spec = block.spec
    horizontal = spec.orientation is Orientation.HORIZONTAL

    fig = go.Figure()
    for series in spec.series:
        categories = list(spec.categories)
        values = list(series.values)

        bar_kwargs: Dict[str, Any] = dict(
            name=series.name,
            orientation=spec.orientation.value,
            marker_color=series.color or list(series.colors),
        )
        if horizontal:
            bar_kwargs.update(x=values, y=categories)
        else:
            bar_kwargs.update(x=categories, y=values)

        labels = block.labels_for(series.name)
        if labels is not None:
            bar_kwargs.update(
                customdata=list(labels),
                hovertemplate="%{customdata}<extra>" + series.name + "</extra>",
            )

        fig.add_trace(go.Bar(**bar_kwargs))

    category_axis = dict(type="category", title_text=spec.category_title)
    value_axis = dict(ticksuffix=spec.value_unit) if spec.value_unit else {}

    if horizontal:
        # First category on top, matching the bundle order
        category_axis["autorange"] = "reversed"
        fig.update_yaxes(**category_axis)
        fig.update_xaxes(**value_axis)
    else:
        fig.update_xaxes(**category_axis)
        fig.update_yaxes(**value_axis)

    fig.update_layout(
        barmode="stack" if spec.stacked else "group",
        height=block.height,
        margin=dict(l=40, r=40, t=20, b=40),
        showlegend=len(spec.series) > 1,
        legend=dict(orientation="h", y=-0.2),
    )
    return fig
