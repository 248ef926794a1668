"""Tab 4: Methodology — the fixed effect sizes and cost assumptions."""

import streamlit as st
import pandas as pd

from models.scenario import EfficacyScenario
from config.defaults import (
    DEATH_REDUCTION_BASE, CULLING_VOLUNTARY_REDUCTION_BASE,
    CULLING_SOLD_REDUCTION_BASE, HEALTH_EVENT_REDUCTION_BASE,
    PRODUCTION_GAIN_PERCENT_BASE, PRODUCTION_DAYS_PER_YEAR,
    WAGE_PER_HOUR, MONTHLY_HOURS, LABOR_CHANGE_FRACTION,
    COST_PER_DOSE, APPLICATOR_COST, APPLICATOR_COUNT, APPLICATIONS_PER_YEAR,
)


def render(sidebar_state):
    st.header("Methodology")

    st.subheader("Effect sizes by scenario")
    rows = []
    for effect, base, unit in [
        ("Death events", DEATH_REDUCTION_BASE * 100, "% fewer"),
        ("Culling (voluntary)", CULLING_VOLUNTARY_REDUCTION_BASE * 100, "% fewer"),
        ("Culling (sold)", CULLING_SOLD_REDUCTION_BASE * 100, "% fewer"),
        ("Health events", HEALTH_EVENT_REDUCTION_BASE * 100, "% fewer"),
        ("Milk production", PRODUCTION_GAIN_PERCENT_BASE, "% more"),
    ]:
        row = {"Effect": effect, "Unit": unit}
        for s in EfficacyScenario:
            row[s.label] = round(base * s.multiplier, 2)
        rows.append(row)
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    st.subheader("Cost assumptions")
    st.dataframe(pd.DataFrame([
        {"Item": "Product cost per dose", "Value": f"${COST_PER_DOSE:,.2f}"},
        {"Item": "Applications per cow per year", "Value": str(APPLICATIONS_PER_YEAR)},
        {"Item": "Applicators", "Value": f"{APPLICATOR_COUNT} x ${APPLICATOR_COST:,.0f}"},
        {"Item": "Labor", "Value": f"{LABOR_CHANGE_FRACTION:.0%} of {MONTHLY_HOURS} h/month at ${WAGE_PER_HOUR}/h"},
        {"Item": "Production response", "Value": f"{PRODUCTION_DAYS_PER_YEAR} days/year"},
    ]), use_container_width=True, hide_index=True)

    st.caption(
        "Savings are annual and assume constant rates. Breakeven is the time for "
        "cumulative savings to equal the annual investment."
    )
