"""Default herd inputs and health-event catalog taken from the reference workbook."""

from typing import Tuple

import pandas as pd

from config.defaults import (
    DEFAULT_DEATH_EVENTS,
    DEFAULT_DM_COST,
    DEFAULT_HEALTH_EVENTS,
    DEFAULT_LB_MILK_PER_LB_DM,
    DEFAULT_MILK_PRICE,
    DEFAULT_MILKING_COWS,
    DEFAULT_REPLACEMENT_COST,
    DEFAULT_SALVAGE_VALUE,
    DEFAULT_SOLD_EVENTS,
)
from models.herd import FreshYear, HealthEvent, HerdInputs


def default_health_events() -> Tuple[HealthEvent, ...]:
    """Build the nine-event default catalog."""
    return tuple(
        HealthEvent(name=name, key=key, count=count, cost_per_event=cost)
        for name, key, count, cost in DEFAULT_HEALTH_EVENTS
    )


def default_inputs() -> HerdInputs:
    """Workbook defaults: 10,000 cows, fresh/year derived at 135%."""
    return HerdInputs(
        milking_cows=DEFAULT_MILKING_COWS,
        replacement_cost=DEFAULT_REPLACEMENT_COST,
        salvage_value=DEFAULT_SALVAGE_VALUE,
        milk_price=DEFAULT_MILK_PRICE,
        lb_milk_per_lb_dm=DEFAULT_LB_MILK_PER_LB_DM,
        dm_cost=DEFAULT_DM_COST,
        death_events=DEFAULT_DEATH_EVENTS,
        sold_events=DEFAULT_SOLD_EVENTS,
        health_events=default_health_events(),
        fresh_year=FreshYear.auto(),
    )


def health_events_df(inputs: HerdInputs) -> pd.DataFrame:
    """Health events as an editable table, keyed by event key."""
    rows = [
        {
            "Key": ev.key,
            "Event": ev.name,
            "Events / year": ev.count,
            "$ / event": ev.cost_per_event,
        }
        for ev in inputs.health_events
    ]
    return pd.DataFrame(rows, columns=["Key", "Event", "Events / year", "$ / event"])
