"""Input-boundary coercion and validation for herd inputs."""

import logging
import math
from dataclasses import dataclass, field
from typing import List

from models.herd import HerdInputs

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


NUMERIC_FIELDS = [
    "milking_cows",
    "replacement_cost",
    "salvage_value",
    "milk_price",
    "lb_milk_per_lb_dm",
    "dm_cost",
    "death_events",
    "sold_events",
]


def coerce_number(raw) -> float:
    """Parse user input as a finite number; empty or malformed input becomes 0."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "")
        if raw == "":
            return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Non-numeric input %r coerced to 0", raw)
        return 0.0
    if not math.isfinite(value):
        logger.warning("Non-finite input %r coerced to 0", raw)
        return 0.0
    return value


def validate_inputs(inputs: HerdInputs) -> ValidationResult:
    result = ValidationResult()

    for name in NUMERIC_FIELDS:
        if getattr(inputs, name) < 0:
            result.is_valid = False
            result.errors.append(f"{name.replace('_', ' ').capitalize()} cannot be negative.")

    if inputs.fresh_override and inputs.fresh_per_year < 0:
        result.is_valid = False
        result.errors.append("Fresh/year cannot be negative.")

    negative_events = [ev.name for ev in inputs.health_events if ev.count < 0 or ev.cost_per_event < 0]
    if negative_events:
        result.is_valid = False
        result.errors.append(f"Health events with negative values: {', '.join(negative_events)}")

    keys = [ev.key for ev in inputs.health_events]
    dupes = sorted({k for k in keys if keys.count(k) > 1})
    if dupes:
        result.is_valid = False
        result.errors.append(f"Duplicate health event keys: {dupes}")

    # Zero denominators: the calculator reports 0 for the affected figures
    if inputs.milking_cows == 0:
        result.warnings.append(
            "Milking cows is 0: death savings and per-cow returns are reported as 0."
        )
    if inputs.fresh_per_year == 0:
        result.warnings.append(
            "Fresh/year is 0: culling savings and incidence are reported as 0."
        )
    if inputs.lb_milk_per_lb_dm == 0:
        result.warnings.append(
            "lb Milk / lb DM is 0: extra feed cost is treated as 0."
        )
    if inputs.salvage_value > inputs.replacement_cost:
        result.warnings.append(
            "Cow salvage value exceeds replacement cost: culling savings will be negative."
        )

    return result
