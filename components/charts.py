"""Plotly chart builders for the Fresh Cow ROI Calculator."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from models.scenario import ScenarioResult
from engine.comparison import savings_components, scenario_bar_widths

SCENARIO_COLORS = {
    "Conservative": "#4A90D9",
    "Base": "#2EAD6B",
    "Optimistic": "#E8734A",
}


def scenario_comparison_bar(results: List[ScenarioResult]) -> go.Figure:
    """Grouped bars of annual savings, investment and net profit per scenario."""
    fig = go.Figure()
    labels = [r.label for r in results]

    for name, values, color in [
        ("Annual savings", [r.savings_annual for r in results], "#2EAD6B"),
        ("Annual investment", [r.investment_annual for r in results], "#9AA5B1"),
        ("Annual net profit", [r.net_profit_annual for r in results], "#4A90D9"),
    ]:
        fig.add_trace(go.Bar(
            name=name,
            x=labels,
            y=values,
            marker_color=color,
            hovertemplate="%{x}: $%{y:,.0f}<extra></extra>",
        ))

    fig.update_layout(
        barmode="group",
        title="Scenario Comparison",
        xaxis_title="Efficacy scenario",
        yaxis_title="$ / year",
        yaxis_tickprefix="$",
        height=400,
    )
    return fig


def relative_bars(results: List[ScenarioResult]) -> go.Figure:
    """Horizontal bars of net profit and ROI scaled to the best scenario (0-100)."""
    df = pd.DataFrame(scenario_bar_widths(results))
    long_df = df.melt(
        id_vars=["label"], value_vars=["net_width", "roi_width"],
        var_name="measure", value_name="width",
    )
    long_df["measure"] = long_df["measure"].map({"net_width": "Net profit", "roi_width": "ROI"})

    fig = px.bar(
        long_df, x="width", y="label", color="measure",
        orientation="h", barmode="group",
        labels={"width": "% of best scenario", "label": "", "measure": ""},
        title="Relative to Best Scenario",
        color_discrete_map={"Net profit": "#2EAD6B", "ROI": "#4A90D9"},
        range_x=[0, 100],
    )
    fig.update_layout(height=300, yaxis={"categoryorder": "array", "categoryarray": df["label"].tolist()[::-1]})
    return fig


def savings_breakdown_bar(results: List[ScenarioResult]) -> go.Figure:
    """Stacked bars of savings by source for each scenario."""
    df = pd.DataFrame(savings_components(results))
    fig = px.bar(
        df, x="Scenario", y="Savings", color="Source",
        title="Annual Savings by Source",
        labels={"Savings": "$ / year", "Scenario": ""},
    )
    fig.update_layout(barmode="relative", height=400, yaxis_tickprefix="$")
    return fig
