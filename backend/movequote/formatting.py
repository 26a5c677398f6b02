"""Formatting helpers for estimate output.

Whole-dollar amounts the way a customer reads a quote ('$1,175'), not
'$1,175.00'.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from movequote.data.repository import round_half_up
from movequote.models.enums import BillingMode

if TYPE_CHECKING:
    from movequote.models.estimate import CostRange, HoursRange


def format_currency(amount: float) -> str:
    """Format a dollar amount with no cents, e.g. '$1,645'."""
    return f"${round_half_up(amount):,.0f}"


def format_cost_range(cr: CostRange) -> str:
    """Format a CostRange as '$X – $Y'."""
    return f"{format_currency(cr.low)} – {format_currency(cr.high)}"


def format_hours_range(hr: HoursRange) -> str:
    """Format an HoursRange as 'X–Y hours', dropping trailing zeros."""
    return f"{hr.low:g}–{hr.high:g} hours"


def format_per_lb_per_mile(rate: float) -> str:
    return f"${rate:.4f}/lb/mi"


def format_distance(miles: float | None) -> str:
    if miles is None:
        return "—"
    return f"~{round_half_up(miles):.0f} miles"


def format_billing_mode(billing: BillingMode) -> str:
    if billing == BillingMode.HOURLY:
        return "Hourly (Local)"
    if billing == BillingMode.WEIGHT_MILES:
        return "Weight + Miles (Line-haul)"
    return "Unknown"
