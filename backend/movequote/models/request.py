"""Move request models — the engine's input slots."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from movequote.models.enums import AccessFactor, HomeSize

CrewSize = Literal[2, 3, 4]
TruckCount = Literal[1, 2]

# Longer than any drive in the contiguous US; keeps cost arithmetic finite
MAX_DISTANCE_MILES = 10_000


class MoveInput(BaseModel):
    """What a customer tells us about a move.

    Every field is optional: a conversational flow fills slots one at a
    time and the engine has to say something useful at each step. Accepts
    camelCase keys (``pickupZip``) as well as field names.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    pickup_zip: str | None = None
    dropoff_zip: str | None = None
    home_size: HomeSize | None = None
    crew_size: CrewSize | None = None
    trucks: TruckCount | None = None
    packing: bool = False
    access: tuple[AccessFactor, ...] = ()

    @field_validator("pickup_zip", "dropoff_zip")
    @classmethod
    def strip_zip(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("access")
    @classmethod
    def normalize_access(
        cls, v: tuple[AccessFactor, ...]
    ) -> tuple[AccessFactor, ...]:
        """Drop duplicates and the ``none`` sentinel.

        ``none`` on its own means "no factors"; combined with a real factor
        it is contradictory input.
        """
        factors: list[AccessFactor] = []
        for factor in v:
            if factor not in factors:
                factors.append(factor)
        if AccessFactor.NONE in factors:
            if len(factors) > 1:
                msg = "access 'none' cannot be combined with other access factors"
                raise ValueError(msg)
            return ()
        return tuple(factors)

    def to_request(self) -> MoveRequest:
        """Engine request whose distance will come from the ZIPs only."""
        return MoveRequest.model_validate(self.model_dump())


class MoveRequest(MoveInput):
    """Everything known about a move so far, including derived slots.

    ``distance_miles`` and ``is_local`` are derived from the ZIP codes by
    the engine when not supplied.
    """

    distance_miles: float | None = Field(
        default=None, ge=0, le=MAX_DISTANCE_MILES, allow_inf_nan=False
    )
    is_local: bool | None = None
