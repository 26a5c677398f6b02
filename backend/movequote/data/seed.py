"""Default rate band table.

Placeholder bands in the shape of a state household-goods tariff. Replace
with the bands actually filed.
"""

from movequote.data.rates import HourlyBand, LinehaulBand, PackingEntry, RateTable
from movequote.models.enums import HomeSize
from movequote.models.estimate import CostRange

DEFAULT_HOURLY_BANDS: tuple[HourlyBand, ...] = (
    HourlyBand(crew=2, min_hourly=120.0, max_hourly=200.0),
    HourlyBand(crew=3, min_hourly=160.0, max_hourly=260.0),
    HourlyBand(crew=4, min_hourly=200.0, max_hourly=320.0),
)

DEFAULT_LINEHAUL_BANDS: tuple[LinehaulBand, ...] = (
    LinehaulBand(
        weight_min=0,
        weight_max=3000,
        per_lb_per_mile_min=0.0040,
        per_lb_per_mile_max=0.0080,
    ),
    LinehaulBand(
        weight_min=3001,
        weight_max=7000,
        per_lb_per_mile_min=0.0035,
        per_lb_per_mile_max=0.0070,
    ),
    LinehaulBand(
        weight_min=7001,
        weight_max=12000,
        per_lb_per_mile_min=0.0030,
        per_lb_per_mile_max=0.0060,
    ),
)

DEFAULT_PACKING: dict[HomeSize, PackingEntry] = {
    HomeSize.STUDIO: PackingEntry(
        hours_added=1, materials_range=CostRange(low=75, high=125)
    ),
    HomeSize.ONE_BED: PackingEntry(
        hours_added=2, materials_range=CostRange(low=125, high=200)
    ),
    HomeSize.TWO_BED: PackingEntry(
        hours_added=3, materials_range=CostRange(low=200, high=325)
    ),
    HomeSize.THREE_BED: PackingEntry(
        hours_added=4, materials_range=CostRange(low=300, high=450)
    ),
    HomeSize.FOUR_BED: PackingEntry(
        hours_added=5, materials_range=CostRange(low=400, high=600)
    ),
}

DEFAULT_RATE_TABLE = RateTable(
    hourly_bands=DEFAULT_HOURLY_BANDS,
    linehaul_bands=DEFAULT_LINEHAUL_BANDS,
    packing=DEFAULT_PACKING,
)
