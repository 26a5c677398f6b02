"""Schemas for the rate band table.

The table holds the tariff bands the company files inside, plus packing
tables. Operators edit it; the engine only reads it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from movequote.exceptions import RateTableError
from movequote.models.enums import HomeSize
from movequote.models.estimate import CostRange

logger = logging.getLogger(__name__)


class HourlyBand(BaseModel):
    """Tariff band for local hourly moves with a given crew size ($/hr)."""

    model_config = ConfigDict(frozen=True)

    crew: Literal[2, 3, 4]
    min_hourly: float = Field(ge=0)
    max_hourly: float = Field(ge=0)
    override_hourly: float | None = None


class LinehaulBand(BaseModel):
    """Tariff band for line-haul moves within a weight bracket ($/lb/mi).

    ``weight_min`` and ``weight_max`` are both inclusive.
    """

    model_config = ConfigDict(frozen=True)

    weight_min: int = Field(ge=0)
    weight_max: int = Field(ge=0)
    per_lb_per_mile_min: float = Field(ge=0)
    per_lb_per_mile_max: float = Field(ge=0)
    override_per_lb_per_mile: float | None = None

    def contains(self, weight: float) -> bool:
        return self.weight_min <= weight <= self.weight_max


class PackingEntry(BaseModel):
    """Packing labor and blended materials budget for one home size."""

    model_config = ConfigDict(frozen=True)

    hours_added: float = Field(ge=0)
    materials_range: CostRange


class RateTable(BaseModel):
    """The full operator-editable rate configuration.

    ``linehaul_bands`` are matched first-to-last, so they must be listed
    in ascending weight order without overlaps.
    """

    model_config = ConfigDict(frozen=True)

    hourly_bands: tuple[HourlyBand, ...]
    linehaul_bands: tuple[LinehaulBand, ...]
    packing: dict[HomeSize, PackingEntry] = Field(default_factory=dict)


def load_rate_table(path: str | Path) -> RateTable:
    """Load a rate table from a JSON file.

    Raises:
        RateTableError: If the file cannot be read or does not match the
            rate table schema. Structural checks (overlaps, gaps, duplicate
            crews) happen when the table is wrapped in a repository.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Could not read rate table from {path}: {exc}"
        raise RateTableError(msg) from exc

    try:
        table = RateTable.model_validate(raw)
    except ValidationError as exc:
        msg = f"Invalid rate table in {path}: {exc}"
        raise RateTableError(msg) from exc

    logger.info(
        "Loaded rate table from %s (%d hourly, %d line-haul bands)",
        path,
        len(table.hourly_bands),
        len(table.linehaul_bands),
    )
    return table
