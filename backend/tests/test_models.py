"""Tests for the MoveInput and MoveRequest models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from movequote.models import AccessFactor, HomeSize, MoveInput, MoveRequest
from movequote.models.request import MAX_DISTANCE_MILES


class TestMoveRequestDefaults:
    def test_everything_optional(self) -> None:
        request = MoveRequest()
        assert request.pickup_zip is None
        assert request.dropoff_zip is None
        assert request.distance_miles is None
        assert request.is_local is None
        assert request.home_size is None
        assert request.crew_size is None
        assert request.trucks is None
        assert request.packing is False
        assert request.access == ()

    def test_frozen(self) -> None:
        request = MoveRequest()
        with pytest.raises(ValidationError):
            request.packing = True  # type: ignore[misc]


class TestMoveRequestFields:
    def test_accepts_camel_case_keys(self) -> None:
        request = MoveRequest.model_validate(
            {
                "pickupZip": "98116",
                "dropoffZip": "98103",
                "homeSize": "2-bed",
                "crewSize": 4,
                "trucks": 2,
                "packing": True,
                "access": ["stairs"],
            }
        )
        assert request.pickup_zip == "98116"
        assert request.dropoff_zip == "98103"
        assert request.home_size == HomeSize.TWO_BED
        assert request.crew_size == 4
        assert request.trucks == 2
        assert request.packing is True
        assert request.access == (AccessFactor.STAIRS,)

    def test_accepts_field_names(self) -> None:
        request = MoveRequest.model_validate({"pickup_zip": "98116", "home_size": "studio"})
        assert request.pickup_zip == "98116"
        assert request.home_size == HomeSize.STUDIO

    def test_zips_are_stripped(self) -> None:
        request = MoveRequest(pickup_zip=" 98116 ", dropoff_zip="   ")
        assert request.pickup_zip == "98116"
        assert request.dropoff_zip is None

    @pytest.mark.parametrize("crew", [1, 5])
    def test_crew_size_limited(self, crew: int) -> None:
        with pytest.raises(ValidationError):
            MoveRequest(crew_size=crew)

    def test_truck_count_limited(self) -> None:
        with pytest.raises(ValidationError):
            MoveRequest(trucks=3)

    def test_unknown_home_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MoveRequest(home_size="5-bed")

    def test_negative_distance_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MoveRequest(distance_miles=-1)

    @pytest.mark.parametrize("miles", [1e308, float("inf"), float("nan"), 10_001])
    def test_unbounded_distance_rejected(self, miles: float) -> None:
        with pytest.raises(ValidationError):
            MoveRequest(distance_miles=miles)

    def test_max_distance_accepted(self) -> None:
        assert MoveRequest(distance_miles=MAX_DISTANCE_MILES).distance_miles == 10_000


class TestMoveInput:
    def test_has_no_derived_slots(self) -> None:
        move = MoveInput.model_validate(
            {"pickupZip": "98116", "distanceMiles": 500, "isLocal": False}
        )
        assert not hasattr(move, "distance_miles")
        assert not hasattr(move, "is_local")

    def test_to_request_carries_customer_slots(self) -> None:
        move = MoveInput(
            pickup_zip="98116",
            dropoff_zip="98103",
            home_size=HomeSize.TWO_BED,
            crew_size=4,
            packing=True,
            access=["stairs"],
        )
        request = move.to_request()
        assert request == MoveRequest(
            pickup_zip="98116",
            dropoff_zip="98103",
            home_size=HomeSize.TWO_BED,
            crew_size=4,
            packing=True,
            access=(AccessFactor.STAIRS,),
        )
        assert request.distance_miles is None
        assert request.is_local is None

    def test_validates_like_request(self) -> None:
        with pytest.raises(ValidationError, match="cannot be combined"):
            MoveInput(access=["none", "parking"])


class TestAccessNormalization:
    def test_none_alone_means_no_factors(self) -> None:
        assert MoveRequest(access=["none"]).access == ()

    def test_none_with_real_factor_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot be combined"):
            MoveRequest(access=["none", "stairs"])

    def test_duplicates_collapse_in_order(self) -> None:
        request = MoveRequest(access=["parking", "stairs", "parking"])
        assert request.access == (AccessFactor.PARKING, AccessFactor.STAIRS)

    def test_unknown_factor_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MoveRequest(access=["piano"])
