"""Per-home-size shipment weight and local labor hour assumptions.

Rough industry rules of thumb; not user-adjustable.
"""

from __future__ import annotations

from movequote.models.enums import HomeSize
from movequote.models.estimate import HoursRange

# Assumed shipment weight (lbs) for line-haul pricing
HOME_SIZE_TO_WEIGHT_LBS: dict[HomeSize, int] = {
    HomeSize.STUDIO: 1500,
    HomeSize.ONE_BED: 3000,
    HomeSize.TWO_BED: 5000,
    HomeSize.THREE_BED: 8000,
    HomeSize.FOUR_BED: 11000,
}

# Base crew hours for a local move with no access factors
HOME_SIZE_TO_HOURS: dict[HomeSize, HoursRange] = {
    HomeSize.STUDIO: HoursRange(low=2, high=4),
    HomeSize.ONE_BED: HoursRange(low=3, high=5),
    HomeSize.TWO_BED: HoursRange(low=5, high=7),
    HomeSize.THREE_BED: HoursRange(low=7, high=10),
    HomeSize.FOUR_BED: HoursRange(low=9, high=13),
}
