from __future__ import annotations

import streamlit as st


def render_header(app_name: str, subtitle: str, source_label: str) -> None:
    st.markdown(
        f"""
<div class="app-header">
  <div class="app-title">{app_name}</div>
  <div class="app-subtitle">{subtitle} &middot; Data: {source_label}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
