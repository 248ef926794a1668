"""Typed wrapper around st.session_state for the calculator inputs."""

import logging

import streamlit as st

from models.herd import HerdInputs
from models.scenario import EfficacyScenario
from data.sample_data import default_inputs
from config.defaults import DEFAULT_SCENARIO

logger = logging.getLogger(__name__)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "herd_inputs": default_inputs(),
        "selected_scenario": EfficacyScenario(DEFAULT_SCENARIO),
        "share_link": "",
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_inputs() -> HerdInputs:
    return st.session_state.get("herd_inputs") or default_inputs()


def get_selected_scenario() -> EfficacyScenario:
    return st.session_state.get("selected_scenario", EfficacyScenario(DEFAULT_SCENARIO))


def get_share_link() -> str:
    return st.session_state.get("share_link", "")


# --- Setters ---

def set_inputs(inputs: HerdInputs):
    st.session_state["herd_inputs"] = inputs


def set_selected_scenario(scenario: EfficacyScenario):
    st.session_state["selected_scenario"] = EfficacyScenario(scenario)


def set_share_link(link: str):
    st.session_state["share_link"] = link


# --- Input updates ---

def update_field(name: str, value: float):
    inputs = get_inputs()
    if getattr(inputs, name) == value:
        return
    logger.info("Input %s changed: %s -> %s", name, getattr(inputs, name), value)
    set_inputs(inputs.with_values(**{name: value}))


def set_fresh_override(value: float):
    """User typed a fresh/year value; it now wins over the 135% default."""
    inputs = get_inputs()
    if inputs.fresh_override and inputs.fresh_per_year == value:
        return
    logger.info("Fresh/year overridden: %s", value)
    set_inputs(inputs.with_fresh_override(value))


def reset_fresh():
    logger.info("Fresh/year reset to default share of milking cows")
    set_inputs(get_inputs().with_fresh_auto())


def update_health_event_count(key: str, count: float):
    inputs = get_inputs()
    if inputs.health_event(key).count == count:
        return
    logger.info("Health event %s count changed to %s", key, count)
    set_inputs(inputs.with_health_event_count(key, count))


def reset_inputs():
    logger.info("Inputs reset to workbook defaults")
    set_inputs(default_inputs())
    set_selected_scenario(EfficacyScenario(DEFAULT_SCENARIO))
