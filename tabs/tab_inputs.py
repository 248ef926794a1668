"""Tab 1: Herd & Economic Inputs — editable herd size, unit economics and health events."""

import streamlit as st

from data.session_store import (
    get_inputs, update_field, set_fresh_override, reset_fresh, update_health_event_count,
)
from data.sample_data import health_events_df
from data.validator import coerce_number, validate_inputs
from engine.calculator import compute_incidence_table
from components.metrics_cards import render_validation_messages
from components.tables import render_incidence_table
from config.defaults import FIELD_LABELS, FRESH_PER_COW


def _number_field(name: str, step: float = 1.0, fmt: str = None):
    inputs = get_inputs()
    value = st.number_input(
        FIELD_LABELS[name],
        min_value=0.0,
        value=float(getattr(inputs, name)),
        step=step,
        format=fmt,
    )
    update_field(name, coerce_number(value))


def render(sidebar_state):
    """Render the inputs tab."""
    st.header("Herd & Economic Inputs")
    st.caption("Editable fields mirror the light-green cells of the workbook.")

    # --- Herd basics ---
    col1, col2 = st.columns(2)
    with col1:
        _number_field("milking_cows")
        st.caption("Base herd size. Fresh/year follows it unless overridden.")

    with col2:
        inputs = get_inputs()
        fresh_value = st.number_input(
            FIELD_LABELS["fresh_per_year"],
            min_value=0.0,
            value=float(inputs.fresh_per_year),
            step=1.0,
            key=f"fresh_{inputs.fresh_override}_{inputs.fresh_per_year}",
        )
        fresh_value = coerce_number(fresh_value)
        if fresh_value != inputs.fresh_per_year:
            set_fresh_override(fresh_value)
            st.rerun()
        if inputs.fresh_override:
            if st.button(f"Reset to {FRESH_PER_COW:.0%} of milking cows"):
                reset_fresh()
                st.rerun()
            st.caption("Custom value in use.")
        else:
            st.caption(f"Defaults to {FRESH_PER_COW:.0%} of milking cows.")

    st.divider()

    # --- Unit economics ---
    st.subheader("Economics")
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        _number_field("replacement_cost", step=50.0)
    with c2:
        _number_field("salvage_value", step=50.0)
    with c3:
        _number_field("milk_price", step=0.5)
    with c4:
        _number_field("lb_milk_per_lb_dm", step=0.01, fmt="%.2f")

    c1, c2, c3, _ = st.columns(4)
    with c1:
        _number_field("dm_cost", step=0.01, fmt="%.2f")
    with c2:
        _number_field("death_events")
    with c3:
        _number_field("sold_events")

    st.divider()

    # --- Health events ---
    st.subheader("Health Events")
    st.caption("Herd events follow % incidence (events / Fresh/year).")

    edited = st.data_editor(
        health_events_df(get_inputs()),
        column_config={"Key": None},
        disabled=["Event", "$ / event"],
        use_container_width=True,
        hide_index=True,
    )
    for _, row in edited.iterrows():
        update_health_event_count(row["Key"], coerce_number(row["Events / year"]))

    inputs = get_inputs()
    render_incidence_table(compute_incidence_table(inputs))

    validation = validate_inputs(inputs)
    render_validation_messages(validation.errors, validation.warnings)
