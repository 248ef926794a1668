"""Number formatting shared by the dashboard and the text summary."""

import math
from typing import Optional


def format_currency(x: float) -> str:
    """US dollars, no decimals. Non-finite values render as '-'."""
    if x is None or not math.isfinite(x):
        return "-"
    text = f"${abs(x):,.0f}"
    if x < 0 and text != "$0":
        return "-" + text
    return text


def format_number(x: float, digits: int = 0) -> str:
    if x is None or not math.isfinite(x):
        return "-"
    return f"{x:,.{digits}f}"


def format_ratio(x: float) -> str:
    """Benefit : cost ratio, e.g. '45.75 : 1'."""
    return f"{format_number(x, 2)} : 1"


def format_optional(x: Optional[float], digits: int = 0) -> str:
    # Breakeven fields are None when not applicable
    if x is None:
        return "-"
    return format_number(x, digits)
