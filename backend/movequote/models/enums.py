"""Enums for the movequote domain models."""

from enum import StrEnum


class HomeSize(StrEnum):
    """Home size categories. Drive the default weight and hour assumptions."""

    STUDIO = "studio"
    ONE_BED = "1-bed"
    TWO_BED = "2-bed"
    THREE_BED = "3-bed"
    FOUR_BED = "4-bed"


class AccessFactor(StrEnum):
    """Physical conditions at pickup or drop-off that add labor.

    ``NONE`` is a form sentinel for "nothing selected" and never appears
    alongside a real factor on a validated request.
    """

    STAIRS = "stairs"
    ELEVATOR = "elevator"
    LONG_CARRY = "long-carry"
    PARKING = "parking"
    NONE = "none"


class BillingMode(StrEnum):
    """How the move is billed."""

    HOURLY = "hourly"
    WEIGHT_MILES = "weight+miles"
    UNKNOWN = "unknown"


class Confidence(StrEnum):
    """Confidence level for a derived value."""

    HIGH = "high"
    LOW = "low"


class DistanceMethod(StrEnum):
    """Which path the distance estimator took."""

    CENTROID = "centroid"
    ZIP3_FALLBACK = "zip3_fallback"


class AdvisorIntent(StrEnum):
    """What a customer is asking the estimate advisor."""

    WORTH_IT = "worth_it"
    LOWER_COST = "lower_cost"
    ASSUMPTIONS = "assumptions"
    UNKNOWN = "unknown"
