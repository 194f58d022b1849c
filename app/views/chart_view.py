from __future__ import annotations

from typing import Optional, Union

import plotly.graph_objects as go
import streamlit as st

from components.charts import CHART_TYPES, field_chart, summary_chart
from components.narrative import render_result_notice, render_view_intro
from config import AppConfig
from data.queries import FIELD_LABELS, GROUPABLE_FIELDS, is_counter_field
from data.service import DataResult, get_counter_totals, get_field_counts


def plot_chart(
    cfg: AppConfig,
    use_mock: bool,
    year: Union[int, str],
    field: str,
    chart_type: str,
) -> tuple[DataResult, Optional[go.Figure]]:
    """
    One "Plot chart" press. Counter fields plot the summed totals of all five
    counters; any other field plots its per-value crash counts.
    """
    if is_counter_field(field):
        result = get_counter_totals(cfg, use_mock, year)
        if not result.ok or result.empty:
            return result, None
        return result, summary_chart(result.data, chart_type)

    result = get_field_counts(cfg, use_mock, year, field)
    if not result.ok or result.empty:
        return result, None
    return result, field_chart(result.data, field, chart_type)


def _field_label(field: str) -> str:
    return FIELD_LABELS.get(field, field.replace("_", " ").title())


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Crash Charts")
    render_view_intro(
        "Pick a year and a field. Person counters (injured, killed, ...) are summed "
        "across every crash that year; other fields are counted per value."
    )

    c1, c2, c3 = st.columns([1, 2, 1])
    year = c1.selectbox("Year", cfg.years, key="chart_year")
    field = c2.selectbox("Field", GROUPABLE_FIELDS, format_func=_field_label, key="chart_field")
    chart_type = c3.radio("Chart type", CHART_TYPES, horizontal=True, key="chart_type")

    if st.button("Plot chart", key="plot_chart"):
        with st.spinner("Querying crash database..."):
            st.session_state["chart_output"] = plot_chart(cfg, use_mock, year, field, chart_type)

    # Single display region: each plot replaces the previous one
    placeholder = st.empty()
    output = st.session_state.get("chart_output")
    if output is None:
        return
    result, fig = output
    if not render_result_notice(result, placeholder):
        return
    if fig is not None:
        placeholder.plotly_chart(fig, width="stretch")
    st.caption(f"Data source: **{result.source}**")
