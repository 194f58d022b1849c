"""
Crash Map View - clustered crash locations for one year.

The CrashMap lives in session state: built once, then reset and refilled on
every "Plot map" press.
"""
from __future__ import annotations

from typing import Union

import streamlit as st
from streamlit_folium import st_folium

from components.crash_map import CrashMap, render_crash_map
from components.narrative import render_result_notice, render_view_intro
from config import AppConfig
from data.service import DataResult, get_crash_locations


def get_crash_map(cfg: AppConfig) -> CrashMap:
    if "crash_map" not in st.session_state:
        st.session_state["crash_map"] = CrashMap.from_config(cfg)
    return st.session_state["crash_map"]


def plot_map(cfg: AppConfig, use_mock: bool, year: Union[int, str], crash_map: CrashMap) -> tuple[DataResult, int]:
    """One "Plot map" press. An empty year or a failed load still clears the previous markers."""
    result = get_crash_locations(cfg, use_mock, year)
    records = result.data if result.ok and result.data else []
    return result, render_crash_map(crash_map, records)


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Crash Map")
    render_view_intro(
        "Every geocoded crash for the selected year. Zoom in to break clusters apart; "
        "click a marker for date, time and crash type."
    )

    crash_map = get_crash_map(cfg)

    c1, c2 = st.columns([1, 3])
    year = c1.selectbox("Year", cfg.years, key="map_year")

    if c1.button("Plot map", key="plot_map"):
        with st.spinner("Querying crash database..."):
            result, placed = plot_map(cfg, use_mock, year, crash_map)
        st.session_state["map_result"] = result
        st.session_state["map_placed"] = placed

    result = st.session_state.get("map_result")
    if result is not None and render_result_notice(result, c2):
        c2.caption(
            f"{st.session_state.get('map_placed', 0):,} of {len(result.data):,} crashes placed "
            f"(source: **{result.source}**)"
        )

    if crash_map.initialized:
        st_folium(crash_map.map, height=600, use_container_width=True, returned_objects=[])
