"""Shared pytest fixtures for all test suites."""

from datetime import date

import pytest

from tripline.config import get_settings
from tripline.models import Itinerary, ItineraryItem


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Reload settings for every test so env overrides do not leak."""
    get_settings.cache_clear()


@pytest.fixture
def three_day_itinerary() -> Itinerary:
    """Create a 3-day trip (Mar 1-3, 2025) with day 1 items out of order.

    Item 2 ends at 12:50 at (0, 0); item 1 starts at 13:00 ~12.5 km north,
    so the 10 minute gap is short of the ~25 minute travel estimate.
    """
    return Itinerary(
        itinerary_id=42,
        title="Spring in Lisbon",
        start_date=date(2025, 3, 1),
        end_date=date(2025, 3, 3),
        items=[
            ItineraryItem(
                item_id=1,
                day_number=1,
                start_time="13:00",
                end_time="14:00",
                destination_latitude=0.1125,
                destination_longitude=0.0,
                experience_name="Tram 28 ride",
            ),
            ItineraryItem(
                item_id=2,
                day_number=1,
                start_time="09:00",
                end_time="12:50",
                destination_latitude=0.0,
                destination_longitude=0.0,
                experience_name="Alfama walking tour",
            ),
            ItineraryItem(
                item_id=3,
                day_number=3,
                start_time="10:00",
                end_time="11:00",
                experience_name="Pasteis cooking class",
            ),
        ],
    )
