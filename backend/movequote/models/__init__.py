"""Domain models for the movequote engine."""

from movequote.models.enums import (
    AccessFactor,
    AdvisorIntent,
    BillingMode,
    Confidence,
    DistanceMethod,
    HomeSize,
)
from movequote.models.estimate import (
    CostRange,
    DistanceEstimate,
    EstimateResult,
    HoursRange,
    PackingAddition,
)
from movequote.models.request import CrewSize, MoveInput, MoveRequest, TruckCount

__all__ = [
    "AccessFactor",
    "AdvisorIntent",
    "BillingMode",
    "Confidence",
    "CostRange",
    "CrewSize",
    "DistanceEstimate",
    "DistanceMethod",
    "EstimateResult",
    "HomeSize",
    "HoursRange",
    "MoveInput",
    "MoveRequest",
    "PackingAddition",
    "TruckCount",
]
