"""Travel estimation - straight-line travel time and gap sufficiency between items.

Travel time is great-circle distance at a constant average speed. Road
networks, traffic and transport mode are ignored; the estimate is a coarse
lower bound used only to flag tight schedules.
"""

import logging
import math

from tripline.models.diagnostics import GapCheck
from tripline.models.itinerary import ItineraryItem
from tripline.scheduling.clock import minutes_between, round_half_up

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
ASSUMED_AVERAGE_SPEED_KMH = 30.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two WGS84 points."""
    phi1, lam1 = math.radians(lat1), math.radians(lon1)
    phi2, lam2 = math.radians(lat2), math.radians(lon2)

    dphi = phi2 - phi1
    dlam = lam2 - lam1

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    c = 2 * math.asin(min(1.0, math.sqrt(a)))
    return EARTH_RADIUS_KM * c


def estimate_travel_minutes(
    a: ItineraryItem,
    b: ItineraryItem,
    speed_kmh: float = ASSUMED_AVERAGE_SPEED_KMH,
) -> int | None:
    """Estimate travel minutes between the destinations of two items.

    Args:
        a: Item travelled from
        b: Item travelled to
        speed_kmh: Assumed constant average speed

    Returns:
        Whole minutes (nearest), or None if either item lacks coordinates
    """
    if not (a.has_coordinates and b.has_coordinates):
        return None

    distance_km = haversine_km(
        a.destination_latitude,  # type: ignore[arg-type]
        a.destination_longitude,  # type: ignore[arg-type]
        b.destination_latitude,  # type: ignore[arg-type]
        b.destination_longitude,  # type: ignore[arg-type]
    )
    return round_half_up(distance_km / speed_kmh * 60)


def check_sufficient_gap(
    a: ItineraryItem,
    b: ItineraryItem,
    speed_kmh: float = ASSUMED_AVERAGE_SPEED_KMH,
) -> GapCheck:
    """Check whether the time between `a` ending and `b` starting covers travel.

    Meant for consecutive items of one day, already sorted by start time.
    Without coordinates no judgement is possible, so the check passes with
    an empty message. A negative gap is reported as an overlap.

    Args:
        a: Earlier item
        b: Next item
        speed_kmh: Assumed constant average speed

    Returns:
        GapCheck with a display message
    """
    travel = estimate_travel_minutes(a, b, speed_kmh=speed_kmh)
    if travel is None:
        return GapCheck(sufficient=True, message="")

    gap = minutes_between(a.end_time, b.start_time)
    gap_display = round_half_up(gap)

    if gap < 0:
        logger.debug("Items overlap by %s min with ~%s min travel", -gap_display, travel)
        return GapCheck(
            sufficient=False,
            message=f"Overlaps by {-gap_display} min, ~{travel} min travel time",
            gap_minutes=gap_display,
            travel_minutes=travel,
            overlap=True,
        )

    if gap < travel:
        return GapCheck(
            sufficient=False,
            message=f"Only {gap_display} min gap, ~{travel} min travel time",
            gap_minutes=gap_display,
            travel_minutes=travel,
        )

    return GapCheck(
        sufficient=True,
        message=f"~{travel} min travel",
        gap_minutes=gap_display,
        travel_minutes=travel,
    )
