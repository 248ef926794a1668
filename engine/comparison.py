"""Scenario comparison — side-by-side rows, bar widths and a shareable summary."""

from typing import List, Optional

from models.scenario import EfficacyScenario, ScenarioResult
from engine.formatting import format_currency, format_optional, format_ratio
from config.defaults import REPORT_TITLE


def find_result(
    results: List[ScenarioResult],
    scenario: EfficacyScenario,
) -> Optional[ScenarioResult]:
    scenario = EfficacyScenario(scenario)
    return next((r for r in results if r.scenario == scenario), None)


def scenario_bar_widths(results: List[ScenarioResult]) -> List[dict]:
    """Net profit and ROI bar widths (0-100) relative to the best scenario.

    Negative values are drawn as empty bars; when no scenario is positive
    every width is 0.
    """
    max_net = max((max(0.0, r.net_profit_annual) for r in results), default=0.0)
    max_roi = max((max(0.0, r.roi_ratio) for r in results), default=0.0)

    widths = []
    for r in results:
        net_width = max(0.0, r.net_profit_annual) / max_net * 100 if max_net > 0 else 0.0
        roi_width = max(0.0, r.roi_ratio) / max_roi * 100 if max_roi > 0 else 0.0
        widths.append({
            "scenario": r.scenario.value,
            "label": r.label,
            "net_width": net_width,
            "roi_width": roi_width,
        })
    return widths


def compare_scenarios(results: List[ScenarioResult]) -> List[dict]:
    """One display row per scenario for the comparison table."""
    rows = []
    for r in results:
        rows.append({
            "Scenario": r.label,
            "Annual Savings": r.savings_annual,
            "Annual Investment": r.investment_annual,
            "Annual Net Profit": r.net_profit_annual,
            "ROI (benefit : cost)": round(r.roi_ratio, 2),
            "Return / Cow / Year": r.return_per_cow_year,
            "Months to Breakeven": round(r.months_to_breakeven, 1) if r.months_to_breakeven else None,
            "Days to Breakeven": round(r.days_to_breakeven) if r.days_to_breakeven else None,
        })
    return rows


def savings_components(results: List[ScenarioResult]) -> List[dict]:
    """Long-format savings by source and scenario, for stacked charts."""
    rows = []
    for r in results:
        b = r.breakdown
        if b is None:
            continue
        for source, value in [
            ("Death", b.death_savings),
            ("Culling", b.culling_savings),
            ("Health events", b.health_savings),
            ("Production (IOFC)", b.production_savings_annual),
        ]:
            rows.append({"Scenario": r.label, "Source": source, "Savings": value})
    return rows


def build_share_summary(results: List[ScenarioResult], link: str = "") -> str:
    """Plain-text summary of the base scenario for copy/paste or email."""
    base = find_result(results, EfficacyScenario.BASE)
    lines = [REPORT_TITLE, ""]
    if link:
        lines += [f"Link: {link}", ""]
    if base is None:
        return "\n".join(lines).rstrip() + "\n"
    lines.append(f"Annual Net Profit (Base): {format_currency(base.net_profit_annual)}")
    lines.append(f"Annual ROI (Base): {format_ratio(base.roi_ratio)}")
    lines.append(f"Months to Breakeven (Base): {format_optional(base.months_to_breakeven, 1)}")
    return "\n".join(lines) + "\n"
