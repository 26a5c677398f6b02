"""Core estimation engine for the movequote library.

The MoveEstimator classifies a move and prices it inside the filed tariff
bands:

1. **Distance** — use the request's distance, or derive it from the two
   ZIPs. No distance means billing stays ``unknown``.
2. **Classification** — up to ``local_threshold_miles`` is a local move
   billed hourly; anything farther is line-haul billed by weight and miles.
3. **Hourly** — crew hours for the home size, widened by access factors and
   packing, times the filed hourly rate for the crew size.
4. **Line-haul** — assumed shipment weight x miles x filed $/lb/mi, with a
   difficulty bump for access and packing and a +/- spread for uncertainty.
5. **Notes** — every branch says what it assumed or what input is missing,
   so a zero range always comes with guidance.

Partial input is the normal case; no business-logic gap raises.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from movequote.config import DEFAULT_CONFIG, EngineConfig
from movequote.data.home_profiles import HOME_SIZE_TO_HOURS, HOME_SIZE_TO_WEIGHT_LBS
from movequote.data.repository import round_half_up
from movequote.distance import resolve_distance
from movequote.models.enums import AccessFactor, BillingMode, Confidence
from movequote.models.estimate import (
    CostRange,
    EstimateResult,
    HoursRange,
    PackingAddition,
)

if TYPE_CHECKING:
    from movequote.data.repository import RateTableRepository
    from movequote.models.estimate import DistanceEstimate
    from movequote.models.request import MoveRequest

logger = logging.getLogger(__name__)

# Extra crew hours (low, high) per access factor. Additive, not capped.
_ACCESS_HOUR_DELTAS: dict[AccessFactor, tuple[float, float]] = {
    AccessFactor.STAIRS: (0.5, 1.0),
    AccessFactor.LONG_CARRY: (0.5, 1.0),
    AccessFactor.ELEVATOR: (0.25, 0.5),
    AccessFactor.PARKING: (0.25, 0.5),
}

# Line-haul difficulty bump per access factor, added on top of 1.0
_ACCESS_COST_BUMPS: dict[AccessFactor, float] = {
    AccessFactor.STAIRS: 0.05,
    AccessFactor.LONG_CARRY: 0.05,
    AccessFactor.ELEVATOR: 0.03,
    AccessFactor.PARKING: 0.03,
}

_PACKING_COST_BUMP = 0.08

NOTE_NEED_ZIPS = "Need both ZIP codes to determine local vs. line-haul."
NOTE_NO_HOURLY_BAND = "No hourly rate configured for selected crew size."
NOTE_NEED_HOME_SIZE = "Provide home size to estimate hours."
NOTE_NEED_LINEHAUL_INPUT = "Provide home size and both ZIPs to estimate weight + miles."
NOTE_NO_LINEHAUL_BAND = "No line-haul band configured for this weight."
NOTE_LOW_CONFIDENCE_DISTANCE = (
    "Distance is a rough ZIP-prefix estimate; "
    "one or both ZIPs are not in the reference table."
)


class MoveEstimator:
    """Turns a MoveRequest into an EstimateResult.

    Args:
        repository: Rate band lookups (hourly and line-haul filed rates,
            packing tables).
        config: Engine tunables. Defaults to ``DEFAULT_CONFIG``.
        centroids: Optional ZIP centroid table overriding the built-in one.

    Example::

        from movequote import MoveRequest, create_default_engine

        engine = create_default_engine()
        result = engine.estimate(
            MoveRequest(pickup_zip="98116", dropoff_zip="98103", home_size="2-bed")
        )
    """

    def __init__(
        self,
        repository: RateTableRepository,
        config: EngineConfig = DEFAULT_CONFIG,
        centroids: dict[str, tuple[float, float]] | None = None,
    ) -> None:
        self._repository = repository
        self._config = config
        self._centroids = centroids

    @property
    def config(self) -> EngineConfig:
        return self._config

    def derive(self, request: MoveRequest) -> MoveRequest:
        """Fill in ``distance_miles`` and ``is_local`` from the ZIPs.

        A distance already on the request wins over the ZIPs. ``is_local``
        is always recomputed from the distance so the two cannot disagree.
        """
        distance = request.distance_miles
        if distance is None:
            distance = self._distance_from_zips(request)[0]
        is_local = (
            distance <= self._config.local_threshold_miles
            if distance is not None
            else None
        )
        return request.model_copy(
            update={"distance_miles": distance, "is_local": is_local}
        )

    def estimate(self, request: MoveRequest) -> EstimateResult:
        """Produce an estimate for whatever is known about the move.

        Returns:
            An EstimateResult. ``billing`` is ``unknown`` exactly when no
            distance could be established; zero ranges always carry a note.
        """
        distance: float | None
        confidence: Confidence | None = None
        if request.distance_miles is not None:
            distance = request.distance_miles
        else:
            distance, confidence = self._distance_from_zips(request)

        if distance is None:
            return EstimateResult(notes=(NOTE_NEED_ZIPS,))

        if distance <= self._config.local_threshold_miles:
            logger.debug("Hourly estimate for ~%.0f mi local move", distance)
            result = self._estimate_hourly(request, distance)
        else:
            logger.debug("Line-haul estimate for ~%.0f mi move", distance)
            result = self._estimate_linehaul(request, distance)

        notes = result.notes
        if confidence == Confidence.LOW:
            notes = (*notes, NOTE_LOW_CONFIDENCE_DISTANCE)
        return result.model_copy(
            update={
                "distance_miles": distance,
                "distance_confidence": confidence,
                "notes": notes,
            }
        )

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def _estimate_hourly(self, request: MoveRequest, distance: float) -> EstimateResult:
        crew = request.crew_size or self._config.default_crew
        trucks = request.trucks or self._config.default_trucks

        hourly = self._repository.hourly_rate(crew)
        if hourly is None:
            return EstimateResult(
                billing=BillingMode.HOURLY, notes=(NOTE_NO_HOURLY_BAND,)
            )

        if request.home_size is None:
            # Teaser: one to two hours at the filed rate
            return EstimateResult(
                billing=BillingMode.HOURLY,
                hourly_filed_rate=hourly,
                assumed_crew=crew,
                assumed_trucks=trucks,
                base_cost_range=CostRange(low=hourly, high=hourly * 2),
                notes=(NOTE_NEED_HOME_SIZE,),
            )

        hours = self.hours_for_access(
            HOME_SIZE_TO_HOURS[request.home_size], request.access
        )
        notes: list[str] = []

        packing_added: PackingAddition | None = None
        if request.packing:
            entry = self._repository.get_packing(request.home_size)
            if entry is None:
                notes.append(
                    f"No packing configuration for {request.home_size}; "
                    "packing not priced."
                )
                packing_added = PackingAddition()
            else:
                hours = hours.shifted(entry.hours_added, entry.hours_added)
                packing_added = PackingAddition(
                    hours_added=entry.hours_added,
                    materials_range=entry.materials_range,
                )

        cost = CostRange(
            low=round_half_up(hours.low * hourly),
            high=round_half_up(hours.high * hourly),
        )
        notes.append(f"Local move (~{round_half_up(distance):.0f} mi).")

        return EstimateResult(
            billing=BillingMode.HOURLY,
            hourly_filed_rate=hourly,
            assumed_crew=crew,
            assumed_trucks=trucks,
            hours_range=hours,
            base_cost_range=cost,
            packing_added=packing_added,
            notes=tuple(notes),
        )

    def _estimate_linehaul(self, request: MoveRequest, distance: float) -> EstimateResult:
        if request.home_size is None:
            return EstimateResult(
                billing=BillingMode.WEIGHT_MILES, notes=(NOTE_NEED_LINEHAUL_INPUT,)
            )

        weight = HOME_SIZE_TO_WEIGHT_LBS[request.home_size]
        rate = self._repository.per_lb_per_mile_rate(weight)
        if rate is None:
            return EstimateResult(
                billing=BillingMode.WEIGHT_MILES,
                weight_assumption_lbs=weight,
                notes=(NOTE_NO_LINEHAUL_BAND,),
            )

        base = weight * distance * rate
        bump = self.linehaul_bump(request.access, packing=request.packing)

        materials: CostRange | None = None
        if request.packing:
            entry = self._repository.get_packing(request.home_size)
            if entry is not None:
                materials = entry.materials_range

        spread = self._config.linehaul_spread
        cost = CostRange(
            low=round_half_up(
                base * (1 - spread) * bump + (materials.low if materials else 0)
            ),
            high=round_half_up(
                base * (1 + spread) * bump + (materials.high if materials else 0)
            ),
        )

        return EstimateResult(
            billing=BillingMode.WEIGHT_MILES,
            per_lb_per_mile_filed_rate=rate,
            weight_assumption_lbs=weight,
            base_cost_range=cost,
            packing_added=(
                PackingAddition(hours_added=0, materials_range=materials)
                if materials is not None
                else None
            ),
            notes=(f"Line-haul estimate: ~{round_half_up(distance):.0f} miles.",),
        )

    # ------------------------------------------------------------------
    # Adjustments
    # ------------------------------------------------------------------

    @staticmethod
    def hours_for_access(
        base: HoursRange, access: tuple[AccessFactor, ...]
    ) -> HoursRange:
        """Widen a base hour range by the per-factor deltas, floored at zero."""
        low_delta = 0.0
        high_delta = 0.0
        for factor in access:
            lo, hi = _ACCESS_HOUR_DELTAS.get(factor, (0.0, 0.0))
            low_delta += lo
            high_delta += hi
        return base.shifted(low_delta, high_delta)

    @staticmethod
    def linehaul_bump(access: tuple[AccessFactor, ...], *, packing: bool) -> float:
        """Difficulty multiplier: 1.0 plus a flat increment per factor."""
        bump = 1.0
        for factor in access:
            bump += _ACCESS_COST_BUMPS.get(factor, 0.0)
        if packing:
            bump += _PACKING_COST_BUMP
        return bump

    def distance_between(
        self, pickup_zip: str | None, dropoff_zip: str | None
    ) -> DistanceEstimate | None:
        """Road-mile estimate using this engine's tunables and centroid table."""
        return resolve_distance(
            pickup_zip, dropoff_zip, config=self._config, centroids=self._centroids
        )

    def _distance_from_zips(
        self, request: MoveRequest
    ) -> tuple[float | None, Confidence | None]:
        result = self.distance_between(request.pickup_zip, request.dropoff_zip)
        if result is None:
            return None, None
        return result.miles, result.confidence
