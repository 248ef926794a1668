"""Global sidebar controls for efficacy scenario selection."""

import streamlit as st
from dataclasses import dataclass

from models.scenario import EfficacyScenario
from data.session_store import (
    get_selected_scenario, set_selected_scenario, get_share_link, set_share_link, reset_inputs,
)


@dataclass
class SidebarState:
    scenario: EfficacyScenario
    share_link: str


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Fresh Cow ROI")
        st.divider()

        # Scenario slider: Cautious <-> Aggressive
        options = list(EfficacyScenario)
        selected = st.select_slider(
            "Efficacy scenario",
            options=options,
            value=get_selected_scenario(),
            format_func=lambda s: s.caption,
            key="sidebar_scenario",
        )
        if selected != get_selected_scenario():
            set_selected_scenario(selected)
        st.caption(f"{selected.label}: effects x{selected.multiplier:.2f}")

        st.divider()

        link = st.text_input(
            "Shareable link",
            value=get_share_link(),
            help="Included in the text summary on the Scenario Comparison tab.",
            key="sidebar_share_link",
        )
        if link != get_share_link():
            set_share_link(link)

        st.divider()

        if st.button("Reset to workbook defaults", use_container_width=True):
            reset_inputs()
            st.rerun()

    return SidebarState(
        scenario=get_selected_scenario(),
        share_link=get_share_link(),
    )
