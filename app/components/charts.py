from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go

from config import THEME
from data.queries import FIELD_LABELS


logger = logging.getLogger(__name__)

CHART_TYPES = ("bar", "pie")


def create_plotly_theme() -> dict:
    """
    Shared Plotly styling:
    - white chart surface
    - branded colorway
    - soft grids
    """
    return {
        "font_family": "DM Sans, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif",
        "font_color": THEME["text_primary"],
        "paper_bgcolor": THEME["bg_card"],
        "plot_bgcolor": THEME["bg_card"],
        "colorway": [
            THEME["navy_900"],
            THEME["accent_primary"],
            THEME["navy_800"],
            THEME["accent_secondary"],
            "#6B7280",
            "#9CA3AF",
        ],
        "gridcolor": THEME["grid"],
        "title_font": {"color": THEME["navy_900"], "size": 16},
    }


def apply_plotly_theme(fig: go.Figure) -> go.Figure:
    theme = create_plotly_theme()
    fig.update_layout(
        margin=dict(l=10, r=10, t=48, b=10),
        font=dict(family=theme["font_family"], color=theme["font_color"]),
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        colorway=theme["colorway"],
        title_font=theme["title_font"],
    )
    fig.update_xaxes(gridcolor=theme["gridcolor"], zeroline=False)
    fig.update_yaxes(gridcolor=theme["gridcolor"], zeroline=False)
    return fig


def build_chart(
    categories: Sequence[Any],
    values: Sequence[Any],
    chart_type: str,
    title: str = "",
) -> Optional[go.Figure]:
    """
    Bar or pie figure for paired categories/values.
    Any other chart_type draws nothing and returns None.
    """
    categories = list(categories)
    values = list(values)

    if chart_type == "bar":
        trace = go.Bar(x=categories, y=values, text=values, textposition="auto")
    elif chart_type == "pie":
        trace = go.Pie(
            labels=categories,
            values=values,
            textinfo="label+percent",
            hoverinfo="label+value",
        )
    else:
        logger.debug("Ignoring unsupported chart type %r", chart_type)
        return None

    fig = go.Figure(data=[trace], layout=dict(title=title))
    return apply_plotly_theme(fig)


def summary_chart(totals: Mapping[str, Any], chart_type: str) -> Optional[go.Figure]:
    """Summed counters, labelled with human-readable names."""
    categories = [FIELD_LABELS.get(k, k) for k in totals]
    return build_chart(categories, list(totals.values()), chart_type, title="Crash Data Summary")


def field_chart(df: pd.DataFrame, field: str, chart_type: str) -> Optional[go.Figure]:
    """FieldCount rows: raw field values on the category axis."""
    return build_chart(
        df[field].tolist(),
        df["count"].tolist(),
        chart_type,
        title=f"Crash Data by {field}",
    )
