"""Tab 2: ROI Summary — key figures for the selected efficacy scenario."""

import streamlit as st

from data.session_store import get_inputs
from engine.calculator import compute_all_scenarios
from engine.comparison import find_result
from engine.explainer import explain_scenario
from engine.formatting import format_currency, format_optional, format_ratio
from components.metrics_cards import render_metric_row


def render(sidebar_state):
    """Render the ROI summary for the scenario chosen in the sidebar."""
    results = compute_all_scenarios(get_inputs())
    result = find_result(results, sidebar_state.scenario)

    st.header(f"ROI Summary – {result.label} Scenario")
    st.caption(
        "Based on your current inputs, applying the product at fresh cows, "
        "with workbook-mirrored logic and sensitivity on product efficacy."
    )

    render_metric_row([
        {"label": "Annual net profit", "value": format_currency(result.net_profit_annual)},
        {"label": "Annual ROI (benefit : cost)", "value": format_ratio(result.roi_ratio)},
        {"label": "Annual savings", "value": format_currency(result.savings_annual)},
        {"label": "Annual investment", "value": format_currency(result.investment_annual)},
    ])
    render_metric_row([
        {"label": "Return / cow / year", "value": format_currency(result.return_per_cow_year)},
        {"label": "Return / cow / day", "value": f"${result.return_per_cow_day:,.2f}"},
        {"label": "Months to breakeven", "value": format_optional(result.months_to_breakeven, 1)},
        {"label": "Days to breakeven", "value": format_optional(result.days_to_breakeven)},
    ])

    if result.net_profit_annual < 0:
        st.warning("Savings do not cover the investment under this scenario.")

    st.divider()

    with st.expander("How this was calculated", expanded=False):
        for step in explain_scenario(result):
            st.markdown(f"- {step}")
