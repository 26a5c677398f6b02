"""Tests for ZIP-to-ZIP distance estimation."""

from __future__ import annotations

import itertools

import pytest

from movequote.config import EngineConfig
from movequote.data.zip_centroids import ZIP_CENTROIDS
from movequote.distance import (
    estimate_distance,
    haversine_miles,
    is_five_digit_zip,
    resolve_distance,
    zip3_fallback_miles,
)
from movequote.models.enums import Confidence, DistanceMethod

# ---------------------------------------------------------------------------
# Haversine
# ---------------------------------------------------------------------------


class TestHaversine:
    def test_same_point_is_zero(self) -> None:
        assert haversine_miles(47.6, -122.3, 47.6, -122.3) == 0.0

    def test_west_seattle_to_fremont(self) -> None:
        """98116 -> 98103 centroids are ~6.9 miles apart as the crow flies."""
        miles = haversine_miles(47.5776, -122.3869, 47.6727, -122.3418)
        assert miles == pytest.approx(6.9, abs=0.1)

    def test_one_degree_of_longitude_at_equator(self) -> None:
        assert haversine_miles(0, 0, 0, 1) == pytest.approx(69.09, abs=0.1)


# ---------------------------------------------------------------------------
# ZIP validation
# ---------------------------------------------------------------------------


class TestZipValidation:
    @pytest.mark.parametrize("zip_code", ["98116", " 98103 ", "00000"])
    def test_valid(self, zip_code: str) -> None:
        assert is_five_digit_zip(zip_code)

    @pytest.mark.parametrize(
        "zip_code",
        [None, "", "9811", "981166", "98l16", "98116-1234", "９８１１６", "٩٨١١٦"],
    )
    def test_invalid(self, zip_code: str | None) -> None:
        assert not is_five_digit_zip(zip_code)

    @pytest.mark.parametrize(
        ("pickup", "dropoff"),
        [
            (None, "98103"),
            ("98116", None),
            ("abcde", "98103"),
            ("98116", "9810"),
            ("９８１１６", "98103"),
        ],
    )
    def test_malformed_input_is_undetermined(
        self, pickup: str | None, dropoff: str | None
    ) -> None:
        assert estimate_distance(pickup, dropoff) is None
        assert resolve_distance(pickup, dropoff) is None


# ---------------------------------------------------------------------------
# Centroid path
# ---------------------------------------------------------------------------


class TestCentroidDistance:
    def test_west_seattle_to_fremont_is_local(self) -> None:
        """6.9 mi straight line x 1.25 circuity = 8.6 -> 9 road miles."""
        assert estimate_distance("98116", "98103") == 9

    def test_result_is_high_confidence(self) -> None:
        result = resolve_distance("98116", "98103")
        assert result is not None
        assert result.confidence == Confidence.HIGH
        assert result.method == DistanceMethod.CENTROID

    def test_whitespace_is_ignored(self) -> None:
        assert estimate_distance(" 98116", "98103 ") == 9

    def test_same_zip_is_floored_at_one_mile(self) -> None:
        assert estimate_distance("98101", "98101") == 1

    def test_seattle_to_spokane_is_long_distance(self) -> None:
        miles = estimate_distance("98101", "99201")
        assert miles is not None
        assert miles > 55

    def test_symmetric_for_all_reference_pairs(self) -> None:
        for a, b in itertools.combinations(ZIP_CENTROIDS, 2):
            assert estimate_distance(a, b) == estimate_distance(b, a), (a, b)

    def test_always_at_least_one_mile(self) -> None:
        for a, b in itertools.product(ZIP_CENTROIDS, repeat=2):
            miles = estimate_distance(a, b)
            assert miles is not None
            assert miles >= 1

    def test_results_are_whole_miles(self) -> None:
        for a, b in itertools.combinations(ZIP_CENTROIDS, 2):
            miles = estimate_distance(a, b)
            assert miles is not None
            assert miles == int(miles)

    def test_custom_centroid_table(self) -> None:
        centroids = {"10001": (0.0, 0.0), "10002": (0.0, 1.0)}
        # 69.09 * 1.25 = 86.4 -> 86
        assert estimate_distance("10001", "10002", centroids=centroids) == 86

    def test_circuity_factor_is_configurable(self) -> None:
        config = EngineConfig(road_circuity_factor=1.0)
        # 6.9 straight-line miles -> 7
        assert estimate_distance("98116", "98103", config=config) == 7


# ---------------------------------------------------------------------------
# ZIP3 fallback
# ---------------------------------------------------------------------------


class TestZip3Fallback:
    def test_unknown_same_prefix(self) -> None:
        """|999 - 999| * 6 + 9 = 9 miles."""
        assert estimate_distance("99999", "99998") == 9

    def test_one_known_one_unknown(self) -> None:
        """98116 is known but 99999 is not: |981 - 999| * 6 + 9 = 117."""
        assert estimate_distance("98116", "99999") == 117

    def test_fallback_is_low_confidence(self) -> None:
        result = resolve_distance("99999", "99998")
        assert result is not None
        assert result.confidence == Confidence.LOW
        assert result.method == DistanceMethod.ZIP3_FALLBACK

    def test_fallback_is_symmetric(self) -> None:
        assert zip3_fallback_miles("98116", "99999") == zip3_fallback_miles(
            "99999", "98116"
        )

    def test_fallback_constants_are_configurable(self) -> None:
        config = EngineConfig(zip3_miles_per_step=10, zip3_base_miles=0)
        assert zip3_fallback_miles("98000", "99000", config) == 180
