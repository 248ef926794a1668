"""Scenario calculator — herd inputs to annual savings, investment and ROI.

Mirrors the reference workbook cell by cell. Every function here is pure:
the same inputs and scenario always produce the same result, and nothing
outside the arguments is read or written.
"""

import logging
from types import MappingProxyType
from typing import Dict, List

from models.herd import HerdInputs
from models.scenario import EfficacyScenario, ScenarioBreakdown, ScenarioResult
from config.defaults import (
    DEATH_REDUCTION_BASE, CULLING_VOLUNTARY_REDUCTION_BASE,
    CULLING_SOLD_REDUCTION_BASE, HEALTH_EVENT_REDUCTION_BASE,
    PRODUCTION_GAIN_PERCENT_BASE, PRODUCTION_DAYS_PER_YEAR,
    WAGE_PER_HOUR, MONTHLY_HOURS, LABOR_CHANGE_FRACTION,
    COST_PER_DOSE, APPLICATOR_COST, APPLICATOR_COUNT, APPLICATIONS_PER_YEAR,
    MONTHS_PER_YEAR, DAYS_PER_MONTH, DAYS_PER_YEAR,
)

logger = logging.getLogger(__name__)


def safe_divide(numerator: float, denominator: float) -> float:
    """Ratio with a zero denominator treated as 0 instead of NaN/inf."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def resolve_fresh(inputs: HerdInputs) -> float:
    """Effective fresh cows per year (override, or 135% of milking cows)."""
    return inputs.fresh_per_year


def compute_investment(inputs: HerdInputs) -> Dict[str, float]:
    """Annual cost side. Independent of the efficacy scenario."""
    changed_hours_per_month = MONTHLY_HOURS * LABOR_CHANGE_FRACTION
    labor_cost_per_month = changed_hours_per_month * WAGE_PER_HOUR
    labor_cost_annual = labor_cost_per_month * MONTHS_PER_YEAR

    product_cost_annual = inputs.milking_cows * COST_PER_DOSE * APPLICATIONS_PER_YEAR
    applicator_investment = APPLICATOR_COST * APPLICATOR_COUNT

    return {
        "labor_cost_annual": labor_cost_annual,
        "product_cost_annual": product_cost_annual,
        "applicator_investment": applicator_investment,
        "investment_annual": product_cost_annual + applicator_investment + labor_cost_annual,
    }


def compute_breakdown(inputs: HerdInputs, scenario: EfficacyScenario) -> ScenarioBreakdown:
    """Run steps 1-5 of the workbook and return every intermediate value."""
    scenario = EfficacyScenario(scenario)
    mult = scenario.multiplier
    m = inputs.milking_cows
    fresh = resolve_fresh(inputs)

    # Step 1: Death events
    death_incidence = safe_divide(inputs.death_events, m)
    death_reduction = DEATH_REDUCTION_BASE * mult
    new_death_incidence = death_incidence * (1 - death_reduction)
    if death_incidence == 0:
        new_death_events = inputs.death_events
    else:
        new_death_events = (inputs.death_events * new_death_incidence) / death_incidence
    death_events_avoided = inputs.death_events - new_death_events
    death_savings = death_events_avoided * inputs.salvage_value

    # Step 2: Culling
    culling_rate = safe_divide(inputs.death_events + inputs.sold_events, fresh)
    sold_rate = safe_divide(inputs.sold_events, fresh)
    voluntary_reduction = CULLING_VOLUNTARY_REDUCTION_BASE * mult
    sold_reduction = CULLING_SOLD_REDUCTION_BASE * mult
    new_culling_rate = culling_rate * (1 - voluntary_reduction)
    new_sold_rate = sold_rate * (1 - sold_reduction)
    culling_voluntary_delta_rate = sold_rate - new_sold_rate
    culling_savings = (
        culling_voluntary_delta_rate
        * inputs.sold_events
        * (inputs.replacement_cost - inputs.salvage_value)
    )

    # Step 3: Health events
    health_reduction = HEALTH_EVENT_REDUCTION_BASE * mult
    savings_by_event = {}
    health_savings = 0.0
    for ev in inputs.health_events:
        events_avoided = ev.count * health_reduction
        savings = events_avoided * ev.cost_per_event
        savings_by_event[ev.key] = savings
        health_savings += savings

    # Step 4: Production / IOFC
    gain_percent = PRODUCTION_GAIN_PERCENT_BASE * mult
    extra_revenue_per_cow_day = (gain_percent * inputs.milk_price) / 100
    extra_dm_lb_per_cow_day = safe_divide(gain_percent, inputs.lb_milk_per_lb_dm)
    extra_dm_cost_per_cow_day = extra_dm_lb_per_cow_day * inputs.dm_cost
    net_iofc_per_cow_day = extra_revenue_per_cow_day - extra_dm_cost_per_cow_day
    production_savings_annual = net_iofc_per_cow_day * m * PRODUCTION_DAYS_PER_YEAR

    # Step 5: Investment
    investment = compute_investment(inputs)

    return ScenarioBreakdown(
        multiplier=mult,
        fresh=fresh,
        death_incidence=death_incidence,
        death_reduction=death_reduction,
        new_death_incidence=new_death_incidence,
        new_death_events=new_death_events,
        death_events_avoided=death_events_avoided,
        death_savings=death_savings,
        culling_rate=culling_rate,
        sold_rate=sold_rate,
        voluntary_reduction=voluntary_reduction,
        sold_reduction=sold_reduction,
        new_culling_rate=new_culling_rate,
        new_sold_rate=new_sold_rate,
        culling_voluntary_delta_rate=culling_voluntary_delta_rate,
        culling_savings=culling_savings,
        health_event_reduction=health_reduction,
        health_savings=health_savings,
        gain_percent=gain_percent,
        extra_revenue_per_cow_day=extra_revenue_per_cow_day,
        extra_dm_lb_per_cow_day=extra_dm_lb_per_cow_day,
        extra_dm_cost_per_cow_day=extra_dm_cost_per_cow_day,
        net_iofc_per_cow_day=net_iofc_per_cow_day,
        production_savings_annual=production_savings_annual,
        labor_cost_annual=investment["labor_cost_annual"],
        product_cost_annual=investment["product_cost_annual"],
        applicator_investment=investment["applicator_investment"],
        health_savings_by_event=MappingProxyType(savings_by_event),
    )


def compute_scenario(inputs: HerdInputs, scenario: EfficacyScenario) -> ScenarioResult:
    """Compute annual savings, investment, ROI and breakeven for one scenario."""
    scenario = EfficacyScenario(scenario)
    b = compute_breakdown(inputs, scenario)

    # Step 6: Aggregation
    savings_annual = (
        b.death_savings
        + b.culling_savings
        + b.health_savings
        + b.production_savings_annual
    )
    investment_annual = b.product_cost_annual + b.applicator_investment + b.labor_cost_annual
    net_profit_annual = savings_annual - investment_annual
    roi_ratio = savings_annual / investment_annual if investment_annual > 0 else 0.0

    return_per_cow_year = safe_divide(net_profit_annual, inputs.milking_cows)
    return_per_cow_month = return_per_cow_year / MONTHS_PER_YEAR
    return_per_cow_day = return_per_cow_month / DAYS_PER_MONTH

    months_to_breakeven = None
    days_to_breakeven = None
    if savings_annual > 0 and investment_annual > 0:
        months_to_breakeven = (investment_annual / savings_annual) * MONTHS_PER_YEAR
        days_to_breakeven = (investment_annual / savings_annual) * DAYS_PER_YEAR

    logger.debug(
        "Computed %s scenario: savings=%.2f investment=%.2f roi=%.3f",
        scenario.value, savings_annual, investment_annual, roi_ratio,
    )

    return ScenarioResult(
        scenario=scenario,
        label=scenario.label,
        savings_annual=savings_annual,
        investment_annual=investment_annual,
        net_profit_annual=net_profit_annual,
        roi_ratio=roi_ratio,
        return_per_cow_year=return_per_cow_year,
        return_per_cow_month=return_per_cow_month,
        return_per_cow_day=return_per_cow_day,
        months_to_breakeven=months_to_breakeven,
        days_to_breakeven=days_to_breakeven,
        breakdown=b,
    )


def compute_all_scenarios(inputs: HerdInputs) -> List[ScenarioResult]:
    """Compute conservative, base and optimistic results from one input snapshot."""
    return [compute_scenario(inputs, s) for s in EfficacyScenario]


def compute_incidence_table(inputs: HerdInputs) -> List[dict]:
    """Per health event incidence as a percentage of fresh cows per year."""
    fresh = resolve_fresh(inputs)
    rows = []
    for ev in inputs.health_events:
        rows.append({
            "key": ev.key,
            "name": ev.name,
            "count": ev.count,
            "incidence_pct": safe_divide(ev.count, fresh) * 100,
            "cost_per_event": ev.cost_per_event,
        })
    return rows
