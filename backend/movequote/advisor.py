"""Estimate advisor — canned, context-aware answers about an estimate.

Classifies a free-text question by keyword and answers from the request and
its EstimateResult only. It never produces a price the engine did not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from movequote.data.repository import round_half_up
from movequote.distance import is_five_digit_zip
from movequote.formatting import (
    format_billing_mode,
    format_cost_range,
    format_currency,
    format_distance,
    format_hours_range,
    format_per_lb_per_mile,
)
from movequote.models.enums import AccessFactor, AdvisorIntent, BillingMode, HomeSize

if TYPE_CHECKING:
    from movequote.models.estimate import EstimateResult
    from movequote.models.request import MoveRequest

# First matching intent wins, so order matters.
_INTENT_KEYWORDS: tuple[tuple[AdvisorIntent, tuple[str, ...]], ...] = (
    (
        AdvisorIntent.WORTH_IT,
        (
            "worth",
            "should i hire",
            "hire movers",
            "do i need",
            "dumb",
            "buy",
            "replace",
            "ship",
            "freight",
        ),
    ),
    (
        AdvisorIntent.LOWER_COST,
        ("lower", "cheaper", "reduce", "save", "cut cost", "less expensive"),
    ),
    (
        AdvisorIntent.ASSUMPTIONS,
        ("assumption", "calculate", "how", "why", "rate", "tariff", "filed"),
    ),
)

DISCLAIMER = (
    "Nonbinding guidance. Final charges depend on actual conditions on move "
    "day and filed rate applicability."
)


def classify_intent(text: str) -> AdvisorIntent:
    """Map a customer question to an advisor intent by keyword."""
    lowered = text.lower()
    for intent, keywords in _INTENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return intent
    return AdvisorIntent.UNKNOWN


def _bullets(lines: list[str]) -> str:
    return "\n".join(f"• {line}" for line in lines)


def _context_line(request: MoveRequest, result: EstimateResult) -> str:
    parts = [f"Context: {format_billing_mode(result.billing)}"]
    if result.distance_miles is not None:
        parts.append(f"~{round_half_up(result.distance_miles):.0f} mi")
    if request.home_size is not None:
        parts.append(request.home_size.value)
    if request.packing:
        parts.append("packing")
    if request.access:
        parts.append("access: " + ", ".join(a.value for a in request.access))
    return " • ".join(parts) + "."


def _range_line(result: EstimateResult, label: str) -> str:
    if not result.is_priced:
        return ""
    return f"{label}: **{format_cost_range(result.base_cost_range)}**.\n\n"


def _worth_it(request: MoveRequest, result: EstimateResult) -> str:
    small_move = request.home_size in (None, HomeSize.STUDIO, HomeSize.ONE_BED)
    long_distance = result.billing == BillingMode.WEIGHT_MILES

    if small_move and long_distance:
        recommendation = (
            "For a small, long-distance move, hiring movers is often not "
            "cost-effective unless you're moving multiple high-value items."
        )
        options = [
            "Ship a few items (freight/parcel) and buy bulky items locally",
            "Sell/replace low-value furniture instead of paying long-distance "
            "labor/truck time",
            "Combine items into one larger shipment (or wait until you have "
            "more volume)",
        ]
    else:
        recommendation = (
            "For most moves with real volume, movers make sense, especially "
            "when access constraints or time pressure are present."
        )
        options = [
            "Lower cost by packing yourself and improving access/parking "
            "where possible",
            "If flexible, choose off-peak days and a tight parking plan to "
            "reduce time",
        ]
    changes = [
        "More items / heavier furniture (value of moving increases)",
        "Stairs/long-carry/parking issues (time increases)",
        "Packing included vs self-pack (labor + materials)",
    ]
    return (
        f"{recommendation}\n\n"
        f"{_context_line(request, result)}\n\n"
        f"{_range_line(result, 'Your current estimate range')}"
        f"What would change the decision:\n{_bullets(changes)}\n\n"
        f"Alternatives / optimizations:\n{_bullets(options)}\n\n"
        f"{DISCLAIMER}"
    )


def _lower_cost(request: MoveRequest, result: EstimateResult) -> str:
    tips = [
        "Pack non-fragile items yourself (packing adds labor + materials).",
        "Declutter before the move; fewer items reduces time (local) or "
        "weight (line-haul).",
        "Improve access: reserve parking, shorten carry distance, pre-stage "
        "boxes near the door.",
        "Disassemble beds/tables ahead of time (or keep hardware labeled).",
    ]
    if AccessFactor.STAIRS in request.access or AccessFactor.LONG_CARRY in request.access:
        tips.insert(0, "Access is a cost driver here; stairs/long-carry typically add time.")
    if request.packing:
        tips.insert(
            0,
            "Packing is enabled; turning it off can reduce the estimate "
            "(labor + materials).",
        )
    return (
        f"Here are the highest-impact ways to lower cost:\n{_bullets(tips)}\n\n"
        f"{_context_line(request, result)}\n\n"
        f"{_range_line(result, 'Current estimate range')}"
        "If you want, tell me roughly how many rooms/items you're moving and "
        "whether you're self-packing, and I'll suggest the best tradeoffs.\n\n"
        f"{DISCLAIMER}"
    )


def _assumptions(request: MoveRequest, result: EstimateResult) -> str:
    lines: list[str] = []
    if result.billing == BillingMode.HOURLY:
        lines.append("Billing is hourly (local).")
        if result.hours_range is not None:
            lines.append(
                f"Estimated hours range: {format_hours_range(result.hours_range)}."
            )
        else:
            lines.append("Hours are inferred from home size and access factors.")
        if result.hourly_filed_rate is not None:
            lines.append(
                "Uses a filed hourly rate for your selected crew size: "
                f"{format_currency(result.hourly_filed_rate)}/hr."
            )
        else:
            lines.append("Uses filed hourly rates within configured tariff bands.")
    else:
        lines.append("Billing is weight + miles (line-haul).")
        if result.weight_assumption_lbs is not None:
            lines.append(
                f"Assumed weight from home size: ~{result.weight_assumption_lbs:,} lbs."
            )
        else:
            lines.append("Weight is inferred from home size.")
        if result.distance_miles is not None:
            lines.append(
                f"Distance used: {format_distance(result.distance_miles)} (ZIP-based)."
            )
        if result.per_lb_per_mile_filed_rate is not None:
            lines.append(
                "Uses a filed rate within the tariff band: "
                f"{format_per_lb_per_mile(result.per_lb_per_mile_filed_rate)}."
            )

    if request.packing:
        lines.append("Packing is included (adds labor; may add materials).")
    else:
        lines.append("Packing is not included.")
    if request.access:
        lines.append(
            "Access factors applied: "
            + ", ".join(a.value for a in request.access)
            + "."
        )
    else:
        lines.append("No access factors selected.")
    lines.append("All outputs are nonbinding and depend on actual conditions.")

    return (
        f"Here's what this estimate is assuming:\n{_bullets(lines)}\n\n"
        f"{_context_line(request, result)}\n\n"
        f"{_range_line(result, 'Estimate range')}"
        f"{DISCLAIMER}"
    )


def build_answer(
    intent: AdvisorIntent, request: MoveRequest, result: EstimateResult
) -> str:
    """Compose the advisor's reply for an intent.

    Without both ZIPs there is no estimate context, so the reply points the
    customer back to the form instead of guessing.
    """
    if not is_five_digit_zip(request.pickup_zip) or not is_five_digit_zip(
        request.dropoff_zip
    ):
        return (
            "Start with your pickup and drop-off ZIP codes, and I'll answer "
            "using your estimate context.\n\n"
            + _bullets(["Enter both ZIPs", "Tap Update estimate", "Then ask again"])
        )

    if intent == AdvisorIntent.WORTH_IT:
        return _worth_it(request, result)
    if intent == AdvisorIntent.LOWER_COST:
        return _lower_cost(request, result)
    if intent == AdvisorIntent.ASSUMPTIONS:
        return _assumptions(request, result)
    return (
        "I can help with:\n"
        + _bullets(
            [
                "Should I hire movers? (worth-it / alternatives)",
                "How to lower cost (prep / packing / access)",
                "Assumptions (how the estimate is derived)",
            ]
        )
        + "\n\nTry one of the suggested questions, or rephrase your question "
        "around those topics."
    )
