"""movequote — tariff-based residential move estimation engine.

Usage::

    from movequote import MoveRequest, create_default_engine

    engine = create_default_engine()
    result = engine.estimate(MoveRequest(pickup_zip="98116", dropoff_zip="98103"))
"""

from movequote.config import EngineConfig
from movequote.distance import estimate_distance, resolve_distance
from movequote.engine import MoveEstimator
from movequote.factory import create_default_engine, create_engine, create_engine_from_file
from movequote.models.enums import (
    AccessFactor,
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
from movequote.models.request import MoveInput, MoveRequest

__all__ = [
    "AccessFactor",
    "BillingMode",
    "Confidence",
    "CostRange",
    "DistanceEstimate",
    "DistanceMethod",
    "EngineConfig",
    "EstimateResult",
    "HomeSize",
    "HoursRange",
    "MoveEstimator",
    "MoveInput",
    "MoveRequest",
    "PackingAddition",
    "create_default_engine",
    "create_engine",
    "create_engine_from_file",
    "estimate_distance",
    "resolve_distance",
]
