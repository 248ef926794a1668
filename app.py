"""Fresh Cow ROI Calculator — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from config.defaults import LOG_LEVEL
from tabs import (
    tab_inputs,
    tab_roi_summary,
    tab_scenario_comparison,
    tab_methodology,
)


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(
        page_title="Fresh Cow ROI Calculator",
        page_icon="🐄",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "🧮 Inputs",
        "📊 ROI Summary",
        "📈 Scenario Comparison",
        "📘 Methodology",
    ])

    with tab1:
        tab_inputs.render(sidebar_state)
    with tab2:
        tab_roi_summary.render(sidebar_state)
    with tab3:
        tab_scenario_comparison.render(sidebar_state)
    with tab4:
        tab_methodology.render(sidebar_state)


if __name__ == "__main__":
    main()
