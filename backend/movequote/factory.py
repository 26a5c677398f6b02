"""Factory functions for creating pre-configured MoveEstimator instances."""

from __future__ import annotations

from typing import TYPE_CHECKING, get_args

from movequote.config import DEFAULT_CONFIG, EngineConfig
from movequote.data.home_profiles import HOME_SIZE_TO_WEIGHT_LBS
from movequote.data.rates import load_rate_table
from movequote.data.repository import RateTableRepository
from movequote.data.seed import DEFAULT_RATE_TABLE
from movequote.data.zip_centroids import ZIP_CENTROIDS, validate_centroids
from movequote.engine import MoveEstimator
from movequote.models.request import CrewSize

if TYPE_CHECKING:
    from pathlib import Path

    from movequote.data.rates import RateTable


def create_engine(
    table: RateTable,
    config: EngineConfig = DEFAULT_CONFIG,
    centroids: dict[str, tuple[float, float]] | None = None,
) -> MoveEstimator:
    """Wire a MoveEstimator around a rate table, validating everything up front.

    Raises:
        RateTableError: If the bands are malformed, leave a selectable crew
            size without a band, or miss a home-size shipment weight.
        ReferenceDataError: If the centroid table is malformed.
    """
    repository = RateTableRepository(
        table, band_position_factor=config.band_position_factor
    )
    repository.validate_crews(get_args(CrewSize))
    repository.validate_coverage(HOME_SIZE_TO_WEIGHT_LBS.values())
    validate_centroids(ZIP_CENTROIDS if centroids is None else centroids)
    return MoveEstimator(repository, config=config, centroids=centroids)


def create_default_engine(config: EngineConfig = DEFAULT_CONFIG) -> MoveEstimator:
    """Create a MoveEstimator wired to the built-in rate table and ZIP centroids.

    This is the recommended way to get an engine for typical usage.

    Example::

        from movequote import create_default_engine

        engine = create_default_engine()
        result = engine.estimate(request)
    """
    return create_engine(DEFAULT_RATE_TABLE, config=config)


def create_engine_from_file(
    path: str | Path, config: EngineConfig = DEFAULT_CONFIG
) -> MoveEstimator:
    """Create a MoveEstimator from an operator-edited JSON rate table."""
    return create_engine(load_rate_table(path), config=config)
