"""Engine tunables.

Everything that shapes an estimate but is not a tariff band lives here, so
tests and operators can run the engine with alternate tunings without
touching module globals.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "MOVEQUOTE_"


class EngineConfig(BaseModel):
    """Tunable constants for distance estimation and pricing."""

    model_config = ConfigDict(frozen=True)

    # How deep into the filed band the company prices (0 = band min, 1 = max)
    band_position_factor: float = Field(default=0.75, ge=0.0, le=1.0)

    # Centroid distance -> road distance. 1.20-1.35 is typical.
    road_circuity_factor: float = Field(default=1.25, gt=0)
    min_distance_miles: int = Field(default=1, ge=0)
    earth_radius_miles: float = Field(default=3958.7613, gt=0)

    # ZIP3 fallback: |zip3(a) - zip3(b)| * miles_per_step + base_miles
    zip3_miles_per_step: float = Field(default=6.0, ge=0)
    zip3_base_miles: float = Field(default=9.0, ge=0)

    local_threshold_miles: float = Field(default=55.0, gt=0)
    default_crew: int = Field(default=3, ge=2, le=4)
    default_trucks: int = Field(default=1, ge=1, le=2)

    # Line-haul uncertainty band around the base cost
    linehaul_spread: float = Field(default=0.10, ge=0.0, lt=1.0)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> EngineConfig:
        """Build a config from ``MOVEQUOTE_*`` environment variables.

        Only variables that are set override the defaults, e.g.
        ``MOVEQUOTE_BAND_POSITION_FACTOR=0.5``.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            value = env.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None and value.strip():
                overrides[name] = value.strip()
        return cls.model_validate(overrides)


DEFAULT_CONFIG = EngineConfig()
