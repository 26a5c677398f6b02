"""ZIP-to-ZIP road distance estimation.

Two paths:

1. **Centroid** — both ZIPs are in the reference table: great-circle
   (haversine) distance between centroids times a road circuity factor,
   rounded to whole miles and floored at the configured minimum.
2. **ZIP3 fallback** — either ZIP is unknown: a deterministic placeholder
   from the difference of the 3-digit prefixes. Low confidence; it keeps
   the estimator usable while the reference table is incomplete.

No network calls. Routing varies with traffic and ferries, so treat the
result as a ballpark.
"""

from __future__ import annotations

import logging
import math
import re

from movequote.config import DEFAULT_CONFIG, EngineConfig
from movequote.data.repository import round_half_up
from movequote.data.zip_centroids import ZIP_CENTROIDS
from movequote.models.enums import Confidence, DistanceMethod
from movequote.models.estimate import DistanceEstimate

logger = logging.getLogger(__name__)

_ZIP_RE = re.compile(r"[0-9]{5}")


def is_five_digit_zip(value: str | None) -> bool:
    return value is not None and bool(_ZIP_RE.fullmatch(value.strip()))


def haversine_miles(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius_miles: float = DEFAULT_CONFIG.earth_radius_miles,
) -> float:
    """Great-circle distance in miles between two lat/lng points."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * radius_miles * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def zip3_fallback_miles(
    zip1: str, zip2: str, config: EngineConfig = DEFAULT_CONFIG
) -> float:
    """Placeholder distance from the ZIP3 prefixes: ``|p1 - p2| * step + base``."""
    p1 = int(zip1[:3])
    p2 = int(zip2[:3])
    return abs(p1 - p2) * config.zip3_miles_per_step + config.zip3_base_miles


def resolve_distance(
    pickup_zip: str | None,
    dropoff_zip: str | None,
    config: EngineConfig = DEFAULT_CONFIG,
    centroids: dict[str, tuple[float, float]] | None = None,
) -> DistanceEstimate | None:
    """Estimate road miles between two ZIPs and report which path was used.

    Returns None when either ZIP is missing or not exactly five digits;
    callers should read that as "not enough input yet".
    """
    z1 = (pickup_zip or "").strip()
    z2 = (dropoff_zip or "").strip()
    if not _ZIP_RE.fullmatch(z1) or not _ZIP_RE.fullmatch(z2):
        return None

    table = ZIP_CENTROIDS if centroids is None else centroids
    p1 = table.get(z1)
    p2 = table.get(z2)

    if p1 is not None and p2 is not None:
        straight = haversine_miles(
            p1[0], p1[1], p2[0], p2[1], radius_miles=config.earth_radius_miles
        )
        road = round_half_up(straight * config.road_circuity_factor)
        return DistanceEstimate(
            miles=max(config.min_distance_miles, road),
            confidence=Confidence.HIGH,
            method=DistanceMethod.CENTROID,
        )

    logger.debug("No centroid for %s or %s; using ZIP3 fallback", z1, z2)
    return DistanceEstimate(
        miles=zip3_fallback_miles(z1, z2, config),
        confidence=Confidence.LOW,
        method=DistanceMethod.ZIP3_FALLBACK,
    )


def estimate_distance(
    pickup_zip: str | None,
    dropoff_zip: str | None,
    config: EngineConfig = DEFAULT_CONFIG,
    centroids: dict[str, tuple[float, float]] | None = None,
) -> float | None:
    """Approximate road miles between two ZIPs, or None if undetermined.

    Use ``resolve_distance`` to tell a centroid-based figure from a ZIP3
    guess.
    """
    result = resolve_distance(pickup_zip, dropoff_zip, config, centroids)
    return result.miles if result is not None else None
