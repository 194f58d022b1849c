from __future__ import annotations

import streamlit as st

from data.service import DataResult


def render_view_intro(text: str) -> None:
    st.markdown(f'<div class="view-intro">{text}</div>', unsafe_allow_html=True)


def render_result_notice(result: DataResult, target=None) -> bool:
    """
    Shared failure / no-data contract for both views.
    Writes into `target` (a placeholder) when given. Returns True if the
    caller has something to draw.
    """
    if target is None:
        target = st
    if not result.ok:
        target.error(f"Could not load crash data. {result.error}")
        return False
    if result.empty:
        target.info(result.warning or "No data available for the selected criteria.")
        return False
    return True
