"""Generates human-readable explanations for scenario ROI results."""

from typing import List

from models.scenario import ScenarioResult
from engine.formatting import format_currency, format_number, format_optional, format_ratio


def explain_scenario(result: ScenarioResult) -> List[str]:
    """Produce step-by-step explanation of how a scenario result was reached."""
    b = result.breakdown
    if b is None:
        return [f"{result.label}: no calculation breakdown available."]

    steps = []

    steps.append(
        f"Step 1 - Death events: incidence {b.death_incidence:.2%} of milking cows, "
        f"reduced by {b.death_reduction:.1%} => {format_number(b.death_events_avoided, 1)} "
        f"deaths avoided => {format_currency(b.death_savings)} saved"
    )

    steps.append(
        f"Step 2 - Culling: sold rate {b.sold_rate:.1%} of {format_number(b.fresh)} fresh cows, "
        f"reduced by {b.sold_reduction:.1%} to {b.new_sold_rate:.1%} "
        f"=> {format_currency(b.culling_savings)} saved"
    )

    steps.append(
        f"Step 3 - Health events: {b.health_event_reduction:.1%} fewer cases across "
        f"{len(b.health_savings_by_event)} event types => {format_currency(b.health_savings)} saved"
    )

    steps.append(
        f"Step 4 - Production: +{b.gain_percent:.2f}% milk, IOFC "
        f"${b.extra_revenue_per_cow_day:.3f}/cow/day revenue less "
        f"${b.extra_dm_cost_per_cow_day:.3f} feed = ${b.net_iofc_per_cow_day:.3f}/cow/day "
        f"=> {format_currency(b.production_savings_annual)} per year"
    )

    steps.append(
        f"Step 5 - Investment: product {format_currency(b.product_cost_annual)} + "
        f"applicators {format_currency(b.applicator_investment)} + "
        f"labor {format_currency(b.labor_cost_annual)} "
        f"= {format_currency(result.investment_annual)}"
    )

    steps.append(
        f"Step 6 - Net: {format_currency(result.savings_annual)} savings - "
        f"{format_currency(result.investment_annual)} investment "
        f"= {format_currency(result.net_profit_annual)} (ROI {format_ratio(result.roi_ratio)})"
    )

    if result.months_to_breakeven is None:
        steps.append("Note: Breakeven not applicable - needs positive savings and investment.")
    else:
        steps.append(
            f"Step 7 - Breakeven: {format_optional(result.months_to_breakeven, 1)} months "
            f"({format_optional(result.days_to_breakeven)} days)"
        )

    return steps
