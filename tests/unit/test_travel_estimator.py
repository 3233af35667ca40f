"""Tests for travel time estimation and gap sufficiency."""

import pytest

from tripline.models import ItineraryItem
from tripline.scheduling.travel import (
    ASSUMED_AVERAGE_SPEED_KMH,
    check_sufficient_gap,
    estimate_travel_minutes,
    haversine_km,
)

# Degrees of latitude along a meridian for 30 km and ~12.5 km
LAT_30_KM = 0.2698
LAT_25_MIN = 0.1125


def make_item(
    start: str = "09:00",
    end: str = "10:00",
    lat: float | None = None,
    lon: float | None = None,
) -> ItineraryItem:
    """Helper to create test item."""
    return ItineraryItem(
        day_number=1,
        start_time=start,
        end_time=end,
        destination_latitude=lat,
        destination_longitude=lon,
    )


class TestHaversine:
    """Test great-circle distance."""

    def test_zero_distance(self) -> None:
        """Test identical points are 0 km apart."""
        assert haversine_km(38.71, -9.14, 38.71, -9.14) == 0.0

    def test_one_degree_of_latitude(self) -> None:
        """Test one degree along a meridian is ~111.19 km."""
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.01)

    def test_known_city_pair(self) -> None:
        """Test Lisbon to Porto is roughly 274 km in a straight line."""
        assert haversine_km(38.7223, -9.1393, 41.1579, -8.6291) == pytest.approx(274, abs=3)


class TestEstimateTravelMinutes:
    """Test estimate_travel_minutes."""

    def test_default_speed_is_thirty_kmh(self) -> None:
        """Test the named speed constant."""
        assert ASSUMED_AVERAGE_SPEED_KMH == 30

    def test_missing_coordinates_on_either_side(self) -> None:
        """Test None when either item lacks coordinates."""
        located = make_item(lat=0.0, lon=0.0)
        assert estimate_travel_minutes(make_item(), located) is None
        assert estimate_travel_minutes(located, make_item()) is None
        assert estimate_travel_minutes(make_item(lat=1.0), located) is None
        assert estimate_travel_minutes(located, make_item(lon=1.0)) is None

    def test_zero_coordinates_are_valid(self) -> None:
        """Test the equator/prime meridian is a real location, not a missing one."""
        a = make_item(lat=0.0, lon=0.0)
        b = make_item(lat=LAT_30_KM, lon=0.0)
        assert estimate_travel_minutes(a, b) is not None

    def test_thirty_km_is_about_an_hour(self) -> None:
        """Test 30 km at 30 km/h is ~60 minutes."""
        a = make_item(lat=0.0, lon=0.0)
        b = make_item(lat=LAT_30_KM, lon=0.0)
        assert abs(estimate_travel_minutes(a, b) - 60) <= 1

    def test_symmetric(self) -> None:
        """Test travel estimate does not depend on direction."""
        a = make_item(lat=38.7223, lon=-9.1393)
        b = make_item(lat=38.6916, lon=-9.2160)
        assert estimate_travel_minutes(a, b) == estimate_travel_minutes(b, a)

    def test_same_place_is_zero_minutes(self) -> None:
        """Test identical coordinates give a zero estimate."""
        a = make_item(lat=38.7, lon=-9.1)
        assert estimate_travel_minutes(a, a) == 0

    def test_speed_override(self) -> None:
        """Test a faster speed shortens the estimate."""
        a = make_item(lat=0.0, lon=0.0)
        b = make_item(lat=LAT_30_KM, lon=0.0)
        assert estimate_travel_minutes(a, b, speed_kmh=60) == 30


class TestCheckSufficientGap:
    """Test check_sufficient_gap."""

    def test_no_coordinates_is_permissive(self) -> None:
        """Test missing coordinates pass with an empty message."""
        check = check_sufficient_gap(make_item(end="10:00"), make_item(start="10:00"))

        assert check.sufficient is True
        assert check.message == ""
        assert check.travel_minutes is None
        assert check.gap_minutes is None

    def test_insufficient_gap(self) -> None:
        """Test a 10 minute gap against ~25 minutes of travel."""
        a = make_item(start="09:00", end="10:00", lat=0.0, lon=0.0)
        b = make_item(start="10:10", end="11:00", lat=LAT_25_MIN, lon=0.0)

        check = check_sufficient_gap(a, b)

        assert check.sufficient is False
        assert check.message == "Only 10 min gap, ~25 min travel time"
        assert check.gap_minutes == 10
        assert check.travel_minutes == 25
        assert check.overlap is False

    def test_sufficient_gap(self) -> None:
        """Test a 50 minute gap covers ~25 minutes of travel."""
        a = make_item(start="09:00", end="10:00", lat=0.0, lon=0.0)
        b = make_item(start="10:50", end="12:00", lat=LAT_25_MIN, lon=0.0)

        check = check_sufficient_gap(a, b)

        assert check.sufficient is True
        assert check.message == "~25 min travel"
        assert check.gap_minutes == 50

    def test_gap_equal_to_travel_is_sufficient(self) -> None:
        """Test the comparison is strict."""
        a = make_item(end="10:00", lat=0.0, lon=0.0)
        b = make_item(start="10:25", end="11:00", lat=LAT_25_MIN, lon=0.0)

        assert check_sufficient_gap(a, b).sufficient is True

    def test_overlap_is_flagged(self) -> None:
        """Test a negative gap is reported as an overlap."""
        a = make_item(start="09:00", end="11:00", lat=0.0, lon=0.0)
        b = make_item(start="10:45", end="12:00", lat=LAT_25_MIN, lon=0.0)

        check = check_sufficient_gap(a, b)

        assert check.sufficient is False
        assert check.overlap is True
        assert check.gap_minutes == -15
        assert check.message == "Overlaps by 15 min, ~25 min travel time"

    def test_same_place_back_to_back(self) -> None:
        """Test zero travel with zero gap passes."""
        a = make_item(end="10:00", lat=38.7, lon=-9.1)
        b = make_item(start="10:00", end="11:00", lat=38.7, lon=-9.1)

        check = check_sufficient_gap(a, b)

        assert check.sufficient is True
        assert check.message == "~0 min travel"
