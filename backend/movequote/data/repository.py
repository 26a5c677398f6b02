"""Rate band repository — resolves a crew size or weight to a filed rate."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from movequote.exceptions import RateTableError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from movequote.data.rates import HourlyBand, LinehaulBand, PackingEntry, RateTable
    from movequote.models.enums import HomeSize

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals with halves going up (toward +inf)."""
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale


def filed_rate_from_band(
    band_min: float,
    band_max: float,
    override: float | None,
    factor: float,
) -> float:
    """Derive the single filed rate for a tariff band.

    An override inside ``[band_min, band_max]`` is used verbatim. Otherwise
    the rate sits ``factor`` of the way into the band, rounded to cents.
    """
    if override is not None and band_min <= override <= band_max:
        return override
    return round_half_up(band_min + factor * (band_max - band_min), 2)


class RateTableRepository:
    """Read-only lookups over a validated rate table.

    The table is checked once on construction; a malformed table raises
    ``RateTableError`` here rather than producing odd estimates later.

    Args:
        table: The rate band table.
        band_position_factor: How deep into each band the filed rate sits.
    """

    def __init__(self, table: RateTable, band_position_factor: float = 0.75) -> None:
        self._table = table
        self._factor = band_position_factor
        self._validate_hourly(table.hourly_bands)
        self._validate_linehaul(table.linehaul_bands)

    @property
    def table(self) -> RateTable:
        return self._table

    @property
    def band_position_factor(self) -> float:
        return self._factor

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_hourly_band(self, crew: int) -> HourlyBand | None:
        """Exact crew-size match; no interpolation between bands."""
        for band in self._table.hourly_bands:
            if band.crew == crew:
                return band
        return None

    def get_linehaul_band(self, weight: float) -> LinehaulBand | None:
        """First band (in declaration order) whose inclusive range holds ``weight``."""
        for band in self._table.linehaul_bands:
            if band.contains(weight):
                return band
        return None

    def hourly_rate(self, crew: int) -> float | None:
        """Filed $/hr for a crew size, or None if no band is configured."""
        band = self.get_hourly_band(crew)
        if band is None:
            return None
        return filed_rate_from_band(
            band.min_hourly, band.max_hourly, band.override_hourly, self._factor
        )

    def per_lb_per_mile_rate(self, weight: float) -> float | None:
        """Filed $/lb/mi for a shipment weight, or None if no band covers it."""
        band = self.get_linehaul_band(weight)
        if band is None:
            return None
        return filed_rate_from_band(
            band.per_lb_per_mile_min,
            band.per_lb_per_mile_max,
            band.override_per_lb_per_mile,
            self._factor,
        )

    def get_packing(self, home_size: HomeSize) -> PackingEntry | None:
        return self._table.packing.get(home_size)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_coverage(self, weights: Iterable[float]) -> None:
        """Check that every expected shipment weight falls in some line-haul band.

        Raises:
            RateTableError: Listing the uncovered weights.
        """
        missing = sorted(w for w in weights if self.get_linehaul_band(w) is None)
        if missing:
            msg = f"No line-haul band covers weight(s): {missing}"
            raise RateTableError(msg)

    def validate_crews(self, crews: Iterable[int]) -> None:
        """Check that every selectable crew size has an hourly band.

        Raises:
            RateTableError: Listing the crew sizes with no band.
        """
        missing = sorted(c for c in crews if self.get_hourly_band(c) is None)
        if missing:
            msg = f"No hourly band for crew size(s): {missing}"
            raise RateTableError(msg)

    @staticmethod
    def _validate_hourly(bands: tuple[HourlyBand, ...]) -> None:
        seen: set[int] = set()
        for band in bands:
            if band.crew in seen:
                msg = f"Duplicate hourly band for crew size {band.crew}"
                raise RateTableError(msg)
            seen.add(band.crew)
            if band.min_hourly > band.max_hourly:
                msg = (
                    f"Hourly band for crew {band.crew} has min "
                    f"{band.min_hourly} > max {band.max_hourly}"
                )
                raise RateTableError(msg)
            if band.override_hourly is not None and not (
                band.min_hourly <= band.override_hourly <= band.max_hourly
            ):
                logger.warning(
                    "Override %.2f for crew %d is outside band [%.2f, %.2f]; ignoring",
                    band.override_hourly,
                    band.crew,
                    band.min_hourly,
                    band.max_hourly,
                )

    @staticmethod
    def _validate_linehaul(bands: tuple[LinehaulBand, ...]) -> None:
        previous: LinehaulBand | None = None
        for band in bands:
            label = f"[{band.weight_min}, {band.weight_max}] lbs"
            if band.weight_min > band.weight_max:
                msg = f"Line-haul band {label} has weight_min > weight_max"
                raise RateTableError(msg)
            if band.per_lb_per_mile_min > band.per_lb_per_mile_max:
                msg = f"Line-haul band {label} has rate min > rate max"
                raise RateTableError(msg)
            if previous is not None:
                if band.weight_min <= previous.weight_max:
                    msg = (
                        f"Line-haul band {label} overlaps or precedes "
                        f"[{previous.weight_min}, {previous.weight_max}] lbs"
                    )
                    raise RateTableError(msg)
                if band.weight_min > previous.weight_max + 1:
                    msg = (
                        f"Gap between line-haul bands ending at "
                        f"{previous.weight_max} lbs and starting at "
                        f"{band.weight_min} lbs"
                    )
                    raise RateTableError(msg)
            if band.override_per_lb_per_mile is not None and not (
                band.per_lb_per_mile_min
                <= band.override_per_lb_per_mile
                <= band.per_lb_per_mile_max
            ):
                logger.warning(
                    "Override %.4f for line-haul band %s is outside the band; ignoring",
                    band.override_per_lb_per_mile,
                    label,
                )
            previous = band
