"""Tab 3: Scenario Comparison — conservative vs base vs optimistic side by side."""

import streamlit as st
import pandas as pd

from data.session_store import get_inputs
from engine.calculator import compute_all_scenarios
from engine.comparison import compare_scenarios, build_share_summary
from components.charts import scenario_comparison_bar, relative_bars, savings_breakdown_bar
from components.tables import render_comparison_table


def render(sidebar_state):
    """Render the scenario comparison tab."""
    st.header("Scenario Comparison")

    results = compute_all_scenarios(get_inputs())

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(scenario_comparison_bar(results), use_container_width=True)
    with col2:
        st.plotly_chart(relative_bars(results), use_container_width=True)

    st.plotly_chart(savings_breakdown_bar(results), use_container_width=True)

    st.divider()

    df = pd.DataFrame(compare_scenarios(results))
    render_comparison_table(df)
    csv = df.to_csv(index=False).encode("utf-8")
    st.download_button("Export Comparison (CSV)", csv, "roi_scenarios.csv", "text/csv")

    st.divider()

    st.subheader("Summary to Share")
    st.code(build_share_summary(results, sidebar_state.share_link), language=None)
