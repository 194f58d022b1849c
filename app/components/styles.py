from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Victorian Road Crashes"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Theme tokens (config.py) -> CSS variables
    css = """
<style>
:root{
  --accent: __ACCENT__;
  --accent-hover: __ACCENT_HOVER__;
  --navy-900: __NAVY_900__;
  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;
  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --radius: __RADIUS_PX__px;
}

#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  color: var(--text-primary) !important;
}
[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

.app-header{
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.app-title{
  font-size: 20px;
  font-weight: 700;
  color: var(--navy-900);
}
.app-subtitle{
  font-size: 14px;
  color: var(--text-secondary);
}

div.stButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
  background: var(--accent) !important;
  color: white !important;
}
div.stButton > button:hover{
  background: var(--accent-hover) !important;
}

/* Chart + map on a card surface */
div[data-testid="stPlotlyChart"], iframe{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
}

.view-intro{
  color: var(--text-secondary);
  font-size: 14px;
  line-height: 1.5;
  margin: 0 0 12px 0;
}
</style>
"""

    tokens = {
        "__ACCENT__": str(THEME["accent_primary"]),
        "__ACCENT_HOVER__": str(THEME["accent_secondary"]),
        "__NAVY_900__": str(THEME["navy_900"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__RADIUS_PX__": str(int(THEME["radius_px"])),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
