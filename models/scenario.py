from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from config.defaults import SCENARIO_CAPTIONS, SCENARIO_LABELS, SCENARIO_MULTIPLIERS


class EfficacyScenario(str, Enum):
    CONSERVATIVE = "conservative"
    BASE = "base"
    OPTIMISTIC = "optimistic"

    @property
    def multiplier(self) -> float:
        return SCENARIO_MULTIPLIERS[self.value]

    @property
    def label(self) -> str:
        return SCENARIO_LABELS[self.value]

    @property
    def caption(self) -> str:
        return SCENARIO_CAPTIONS[self.value]


@dataclass(frozen=True)
class ScenarioBreakdown:
    """Intermediate values of a scenario computation, one per workbook cell."""
    multiplier: float
    fresh: float

    # Death events
    death_incidence: float
    death_reduction: float
    new_death_incidence: float
    new_death_events: float
    death_events_avoided: float
    death_savings: float

    # Culling
    culling_rate: float
    sold_rate: float
    voluntary_reduction: float
    sold_reduction: float
    new_culling_rate: float          # kept for parity with the workbook, not consumed
    new_sold_rate: float
    culling_voluntary_delta_rate: float
    culling_savings: float

    # Health events
    health_event_reduction: float
    health_savings: float

    # Production / IOFC
    gain_percent: float
    extra_revenue_per_cow_day: float
    extra_dm_lb_per_cow_day: float
    extra_dm_cost_per_cow_day: float
    net_iofc_per_cow_day: float
    production_savings_annual: float

    # Investment
    labor_cost_annual: float
    product_cost_annual: float
    applicator_investment: float

    health_savings_by_event: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class ScenarioResult:
    scenario: EfficacyScenario
    label: str
    savings_annual: float
    investment_annual: float
    net_profit_annual: float
    roi_ratio: float
    return_per_cow_year: float
    return_per_cow_month: float
    return_per_cow_day: float
    months_to_breakeven: Optional[float]
    days_to_breakeven: Optional[float]
    breakdown: Optional[ScenarioBreakdown] = None
