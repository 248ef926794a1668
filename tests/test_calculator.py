"""Tests for the scenario calculator."""

import math
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.herd import HealthEvent
from models.scenario import EfficacyScenario
from data.sample_data import default_inputs
from data.validator import validate_inputs
from engine.calculator import (
    compute_all_scenarios,
    compute_breakdown,
    compute_incidence_table,
    compute_investment,
    compute_scenario,
    resolve_fresh,
    safe_divide,
)

BASE = EfficacyScenario.BASE
CONSERVATIVE = EfficacyScenario.CONSERVATIVE
OPTIMISTIC = EfficacyScenario.OPTIMISTIC

RESULT_FIELDS = [
    "savings_annual", "investment_annual", "net_profit_annual", "roi_ratio",
    "return_per_cow_year", "return_per_cow_month", "return_per_cow_day",
]


def make_inputs(**overrides):
    return default_inputs().with_values(**overrides)


def make_flat_inputs(**overrides):
    """Inputs with no savings sources at all."""
    values = dict(
        milking_cows=100, death_events=0, sold_events=0,
        milk_price=0, dm_cost=0, health_events=(),
    )
    values.update(overrides)
    return make_inputs(**values)


class TestSafeDivide:
    def test_zero_denominator(self):
        assert safe_divide(5, 0) == 0.0

    def test_regular_ratio(self):
        assert safe_divide(3, 4) == 0.75


class TestDefaults:
    def test_fresh_derived_from_milking_cows(self):
        inputs = make_inputs(milking_cows=10000)
        assert not inputs.fresh_override
        assert resolve_fresh(inputs) == 13500

    def test_investment_at_default_herd(self):
        result = compute_scenario(make_inputs(milking_cows=10000), BASE)
        assert result.investment_annual == pytest.approx(60960)

    def test_investment_components(self):
        investment = compute_investment(make_inputs())
        assert investment["product_cost_annual"] == pytest.approx(45000)
        assert investment["applicator_investment"] == 120
        assert investment["labor_cost_annual"] == pytest.approx(15840)
        assert investment["investment_annual"] == pytest.approx(60960)

    def test_base_component_savings(self):
        b = compute_breakdown(make_inputs(), BASE)
        assert b.death_savings == pytest.approx(700 * 0.113 * 2000)
        assert b.culling_savings == pytest.approx(3000 / 13500 * 0.113 * 3000 * 1500)
        assert b.health_savings == pytest.approx(2171750 * 0.549)
        iofc = 4.94 * 20 / 100 - 4.94 / 1.8 * 0.13
        assert b.production_savings_annual == pytest.approx(iofc * 10000 * 210)

    def test_base_totals(self):
        result = compute_scenario(make_inputs(), BASE)
        b = result.breakdown
        expected = b.death_savings + b.culling_savings + b.health_savings + b.production_savings_annual
        assert result.savings_annual == pytest.approx(expected)
        assert result.savings_annual == pytest.approx(2789057.42, abs=1)
        assert result.roi_ratio == pytest.approx(result.savings_annual / 60960)
        assert result.label == "Base"
        assert result.scenario is BASE

    def test_new_culling_rate_retained(self):
        b = compute_breakdown(make_inputs(), BASE)
        assert b.new_culling_rate == pytest.approx((700 + 3000) / 13500 * (1 - 0.0666))

    def test_accepts_scenario_string(self):
        assert compute_scenario(make_inputs(), "optimistic").scenario is OPTIMISTIC


class TestIdentities:
    @pytest.mark.parametrize("scenario", list(EfficacyScenario))
    def test_net_profit_and_roi(self, scenario):
        result = compute_scenario(make_inputs(), scenario)
        assert result.net_profit_annual == result.savings_annual - result.investment_annual
        assert result.roi_ratio == result.savings_annual / result.investment_annual

    def test_per_cow_returns(self):
        result = compute_scenario(make_inputs(), BASE)
        assert result.return_per_cow_year == pytest.approx(result.net_profit_annual / 10000)
        assert result.return_per_cow_month == pytest.approx(result.return_per_cow_year / 12)
        assert result.return_per_cow_day == pytest.approx(result.return_per_cow_month / 30)

    def test_breakeven_months_and_days_agree(self):
        result = compute_scenario(make_inputs(), BASE)
        assert result.months_to_breakeven == pytest.approx(60960 / result.savings_annual * 12)
        assert result.days_to_breakeven == pytest.approx(result.months_to_breakeven * 30.4167, rel=1e-4)


class TestLargeInputs:
    @pytest.mark.parametrize("scenario", list(EfficacyScenario))
    def test_huge_herd_does_not_raise(self, scenario):
        inputs = make_inputs(milking_cows=1.5e308)
        result = compute_scenario(inputs, scenario)
        assert result.breakdown.fresh == float("inf")
        assert result.breakdown.culling_savings == 0
        validate_inputs(inputs)


class TestScenarios:
    def test_all_scenarios_in_order(self):
        results = compute_all_scenarios(make_inputs())
        assert [r.scenario for r in results] == [CONSERVATIVE, BASE, OPTIMISTIC]
        assert [r.label for r in results] == ["Conservative", "Base", "Optimistic"]

    def test_savings_monotonic(self):
        conservative, base, optimistic = compute_all_scenarios(make_inputs())
        assert optimistic.savings_annual >= base.savings_annual >= conservative.savings_annual

    def test_investment_invariant(self):
        investments = {r.investment_annual for r in compute_all_scenarios(make_inputs())}
        assert len(investments) == 1

    def test_conservative_smaller_than_base(self):
        base = compute_breakdown(make_inputs(milking_cows=10000), BASE)
        conservative = compute_breakdown(make_inputs(milking_cows=10000), CONSERVATIVE)

        assert conservative.health_savings < base.health_savings
        assert conservative.death_savings < base.death_savings
        assert conservative.culling_savings < base.culling_savings
        assert conservative.production_savings_annual < base.production_savings_annual
        result = compute_scenario(make_inputs(milking_cows=10000), CONSERVATIVE)
        assert result.investment_annual == pytest.approx(60960)

    def test_savings_scale_with_multiplier(self):
        base = compute_scenario(make_inputs(), BASE)
        conservative = compute_scenario(make_inputs(), CONSERVATIVE)
        assert conservative.savings_annual == pytest.approx(base.savings_annual * 0.75)


class TestZeroGuards:
    @pytest.mark.parametrize("scenario", list(EfficacyScenario))
    def test_no_deaths_means_no_death_savings(self, scenario):
        b = compute_breakdown(make_inputs(death_events=0), scenario)
        assert b.death_savings == 0
        assert b.new_death_events == 0

    def test_zero_fresh_override(self):
        inputs = make_inputs(sold_events=3000).with_fresh_override(0)
        b = compute_breakdown(inputs, BASE)
        assert b.culling_savings == 0
        assert b.sold_rate == 0
        assert b.culling_rate == 0

    @pytest.mark.parametrize("scenario", list(EfficacyScenario))
    def test_zero_milking_cows_is_finite(self, scenario):
        result = compute_scenario(make_inputs(milking_cows=0), scenario)
        for name in RESULT_FIELDS:
            assert math.isfinite(getattr(result, name)), name
        assert result.breakdown.death_savings == 0
        assert result.return_per_cow_year == 0
        assert result.investment_annual == pytest.approx(120 + 15840)

    def test_zero_lb_milk_per_lb_dm(self):
        b = compute_breakdown(make_inputs(lb_milk_per_lb_dm=0), BASE)
        assert b.extra_dm_lb_per_cow_day == 0
        assert math.isfinite(b.production_savings_annual)


class TestBreakeven:
    def test_none_without_savings(self):
        result = compute_scenario(make_flat_inputs(), BASE)
        assert result.savings_annual == 0
        assert result.months_to_breakeven is None
        assert result.days_to_breakeven is None

    def test_none_with_negative_savings(self):
        result = compute_scenario(make_flat_inputs(dm_cost=0.5), BASE)
        assert result.savings_annual < 0
        assert result.months_to_breakeven is None

    def test_none_with_non_positive_investment(self):
        result = compute_scenario(make_inputs(milking_cows=-4000), BASE)
        assert result.investment_annual == pytest.approx(-2040)
        assert result.roi_ratio == 0
        assert result.months_to_breakeven is None
        assert result.days_to_breakeven is None

    def test_present_with_positive_savings(self):
        result = compute_scenario(make_inputs(), BASE)
        assert result.months_to_breakeven is not None
        assert result.months_to_breakeven > 0


class TestHealthEvents:
    def test_order_independent(self):
        inputs = make_inputs()
        reversed_inputs = inputs.with_values(health_events=tuple(reversed(inputs.health_events)))
        a = compute_breakdown(inputs, BASE).health_savings
        b = compute_breakdown(reversed_inputs, BASE).health_savings
        assert a == pytest.approx(b)

    def test_arbitrary_cost_per_event(self):
        events = (HealthEvent("Custom", "custom", 10, 1000),)
        b = compute_breakdown(make_inputs(health_events=events), BASE)
        assert b.health_savings == pytest.approx(10 * 0.549 * 1000)
        assert dict(b.health_savings_by_event) == pytest.approx({"custom": 5490})

    def test_savings_by_event_is_read_only(self):
        b = compute_breakdown(make_inputs(), BASE)
        with pytest.raises(TypeError):
            b.health_savings_by_event["metritis"] = 0


class TestIncidenceTable:
    def test_incidence_is_percent_of_fresh(self):
        rows = compute_incidence_table(make_inputs())
        metritis = next(r for r in rows if r["key"] == "metritis")
        assert metritis["incidence_pct"] == pytest.approx(900 / 13500 * 100)
        assert len(rows) == 9

    def test_zero_fresh(self):
        rows = compute_incidence_table(make_inputs().with_fresh_override(0))
        assert all(r["incidence_pct"] == 0 for r in rows)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
