"""Estimate output models for the movequote engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from movequote.models.enums import BillingMode, Confidence, DistanceMethod


class CostRange(BaseModel):
    """A bounded [low, high] range in whole dollars (or $/hr for teasers).

    We never quote a single number for a move.
    """

    model_config = ConfigDict(frozen=True)

    low: float
    high: float

    @model_validator(mode="after")
    def low_le_high(self) -> CostRange:
        if self.low > self.high:
            msg = f"Must satisfy low <= high, got {self.low} <= {self.high}"
            raise ValueError(msg)
        return self

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            return f"{format(self.low, format_spec)} – {format(self.high, format_spec)}"
        return f"{self.low:,.0f} – {self.high:,.0f}"


class HoursRange(BaseModel):
    """Estimated labor hours, low to high."""

    model_config = ConfigDict(frozen=True)

    low: float = Field(ge=0)
    high: float = Field(ge=0)

    @model_validator(mode="after")
    def low_le_high(self) -> HoursRange:
        if self.low > self.high:
            msg = f"Must satisfy low <= high, got {self.low} <= {self.high}"
            raise ValueError(msg)
        return self

    def shifted(self, low_delta: float, high_delta: float) -> HoursRange:
        """Return a new range widened by the given deltas, floored at zero."""
        return HoursRange(
            low=max(0.0, self.low + low_delta),
            high=max(0.0, self.high + high_delta),
        )


class PackingAddition(BaseModel):
    """What packing added to the estimate."""

    model_config = ConfigDict(frozen=True)

    hours_added: float = 0.0
    materials_range: CostRange | None = None


class DistanceEstimate(BaseModel):
    """Road-mile estimate between two ZIPs plus how much to trust it."""

    model_config = ConfigDict(frozen=True)

    miles: float = Field(ge=0)
    confidence: Confidence
    method: DistanceMethod


class EstimateResult(BaseModel):
    """Complete output of one estimate call.

    Pure derived value: rebuilding it from the same request and rate table
    always yields an equal result.
    """

    model_config = ConfigDict(frozen=True)

    billing: BillingMode = BillingMode.UNKNOWN
    hourly_filed_rate: float | None = None
    per_lb_per_mile_filed_rate: float | None = None
    assumed_crew: int | None = None
    assumed_trucks: int | None = None
    weight_assumption_lbs: int | None = None
    hours_range: HoursRange | None = None
    base_cost_range: CostRange = Field(
        default_factory=lambda: CostRange(low=0, high=0)
    )
    packing_added: PackingAddition | None = None
    distance_miles: float | None = None
    distance_confidence: Confidence | None = None
    notes: tuple[str, ...] = ()

    @property
    def is_priced(self) -> bool:
        """True when the range carries an actual price, not a zero placeholder."""
        return self.base_cost_range.high > 0

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for a summary sheet or chat widget.

        Values are pre-formatted strings ready for display.
        """
        from movequote.formatting import (
            format_billing_mode,
            format_cost_range,
            format_currency,
            format_distance,
            format_hours_range,
            format_per_lb_per_mile,
        )

        summary: dict[str, Any] = {
            "billing": self.billing.value,
            "billing_formatted": format_billing_mode(self.billing),
            "distance_formatted": format_distance(self.distance_miles),
            "distance_confidence": (
                self.distance_confidence.value if self.distance_confidence else None
            ),
            "cost_range_formatted": (
                format_cost_range(self.base_cost_range) if self.is_priced else None
            ),
            "notes": list(self.notes),
        }
        if self.hourly_filed_rate is not None:
            summary["filed_rate_formatted"] = (
                f"{format_currency(self.hourly_filed_rate)}/hr"
            )
        elif self.per_lb_per_mile_filed_rate is not None:
            summary["filed_rate_formatted"] = format_per_lb_per_mile(
                self.per_lb_per_mile_filed_rate
            )
        if self.hours_range is not None:
            summary["hours_range_formatted"] = format_hours_range(self.hours_range)
        if self.weight_assumption_lbs is not None:
            summary["weight_formatted"] = f"~{self.weight_assumption_lbs:,} lbs"
        if self.packing_added is not None and self.packing_added.materials_range:
            summary["packing_materials_formatted"] = format_cost_range(
                self.packing_added.materials_range
            )
        return summary
