"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd


def render_comparison_table(df: pd.DataFrame, change_column: str = "Annual Net Profit"):
    """Render the scenario comparison with positive/negative net profit highlighting."""
    def color_change(val):
        try:
            v = float(val)
            if v > 0:
                return "color: #155724; font-weight: bold"
            elif v < 0:
                return "color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    money_columns = [c for c in df.columns if c.startswith("Annual") or c.startswith("Return")]
    styled = df.style.format("${:,.0f}", subset=money_columns, na_rep="-")
    styled = styled.format("{:,.1f}", subset=[c for c in ["Months to Breakeven"] if c in df.columns], na_rep="-")
    styled = styled.format("{:,.0f}", subset=[c for c in ["Days to Breakeven"] if c in df.columns], na_rep="-")
    if change_column in df.columns:
        styled = styled.map(color_change, subset=[change_column])
    st.dataframe(styled, use_container_width=True, hide_index=True)


def render_incidence_table(rows: list[dict]):
    """Read-only health-event incidence table (events as % of fresh cows)."""
    df = pd.DataFrame(rows, columns=["name", "count", "incidence_pct", "cost_per_event"])
    df = df.rename(columns={
        "name": "Event",
        "count": "Events / year",
        "incidence_pct": "Incidence %",
        "cost_per_event": "$ / event",
    })
    st.dataframe(
        df.style.format({
            "Events / year": "{:,.0f}",
            "Incidence %": "{:.2f}%",
            "$ / event": "${:,.0f}",
        }),
        use_container_width=True,
        hide_index=True,
    )
