import math
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from config.defaults import FRESH_PER_COW


def round_half_up(value: float) -> float:
    """Round to the nearest integer with halves going up, like a spreadsheet."""
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class HealthEvent:
    name: str
    key: str                 # stable identifier used for updates
    count: float             # events per year
    cost_per_event: float    # $ per event


@dataclass(frozen=True)
class FreshYear:
    """Fresh cows per year: derived from herd size unless overridden."""
    override: Optional[float] = None

    @classmethod
    def auto(cls) -> "FreshYear":
        return cls()

    @classmethod
    def overridden(cls, value: float) -> "FreshYear":
        return cls(override=value)

    @property
    def is_override(self) -> bool:
        return self.override is not None

    def resolve(self, milking_cows: float) -> float:
        if self.override is not None:
            return self.override
        return round_half_up(milking_cows * FRESH_PER_COW)


@dataclass(frozen=True)
class HerdInputs:
    milking_cows: float
    replacement_cost: float
    salvage_value: float
    milk_price: float            # $/cwt
    lb_milk_per_lb_dm: float
    dm_cost: float               # $/lb dry matter
    death_events: float
    sold_events: float
    health_events: Tuple[HealthEvent, ...] = ()
    fresh_year: FreshYear = field(default_factory=FreshYear.auto)

    @property
    def fresh_override(self) -> bool:
        return self.fresh_year.is_override

    @property
    def fresh_per_year(self) -> float:
        """Effective fresh count used by every downstream calculation."""
        return self.fresh_year.resolve(self.milking_cows)

    def health_event(self, key: str) -> HealthEvent:
        for ev in self.health_events:
            if ev.key == key:
                return ev
        raise KeyError(key)

    def with_values(self, **values) -> "HerdInputs":
        return replace(self, **values)

    def with_fresh_override(self, value: float) -> "HerdInputs":
        return replace(self, fresh_year=FreshYear.overridden(value))

    def with_fresh_auto(self) -> "HerdInputs":
        return replace(self, fresh_year=FreshYear.auto())

    def with_health_event_count(self, key: str, count: float) -> "HerdInputs":
        """Return a copy with the count of the event identified by key replaced."""
        self.health_event(key)
        events = tuple(
            replace(ev, count=count) if ev.key == key else ev
            for ev in self.health_events
        )
        return replace(self, health_events=events)
