"""Itinerary annotation endpoints - timeline, conflicts and pairwise travel checks."""

import time
from collections.abc import AsyncGenerator
from datetime import date

import httpx
from fastapi import APIRouter, Depends, Header, HTTPException

from tripline.annotate import build_timeline
from tripline.client import fetch_itinerary
from tripline.config import get_settings
from tripline.models.diagnostics import ConflictType
from tripline.models.itinerary import Itinerary
from tripline.models.timeline import ConflictReport, ItineraryTimeline, TravelEstimate, TravelPair
from tripline.scheduling.conflicts import check_time_conflicts
from tripline.scheduling.travel import check_sufficient_gap, estimate_travel_minutes
from tripline.utils.logging import StructuredTimelineLogger
from tripline.utils.metrics import PrometheusTimelineMetrics

router = APIRouter()

_metrics = PrometheusTimelineMetrics()
_logger = StructuredTimelineLogger()


@router.post("/itineraries/timeline", response_model=ItineraryTimeline)
async def itinerary_timeline(itinerary: Itinerary, today: date | None = None) -> ItineraryTimeline:
    """Annotate an itinerary with per-day items, travel gaps and conflicts.

    Args:
        itinerary: Trip payload as returned by the trip API
        today: Optional query override for the current local date

    Returns:
        ItineraryTimeline
    """
    started = time.perf_counter()
    timeline = build_timeline(itinerary, today=today, settings=get_settings())
    latency_ms = (time.perf_counter() - started) * 1000

    _metrics.record_latency(latency_ms)
    _metrics.record_timeline(timeline)
    _logger.log_timeline(timeline, itinerary_id=itinerary.itinerary_id, latency_ms=latency_ms)
    return timeline


@router.post("/itineraries/conflicts", response_model=ConflictReport)
async def itinerary_conflicts(itinerary: Itinerary) -> ConflictReport:
    """List time conflicts between consecutive items of each day."""
    settings = get_settings()
    conflicts = check_time_conflicts(
        itinerary.items, min_gap_minutes=settings.min_comfortable_gap_minutes
    )
    _metrics.record_conflicts(conflicts)
    return ConflictReport(
        conflicts=conflicts,
        has_critical_conflicts=any(c.type == ConflictType.OVERLAP for c in conflicts),
    )


@router.post("/travel/estimate", response_model=TravelEstimate)
async def travel_estimate(pair: TravelPair) -> TravelEstimate:
    """Estimate travel between two items and check the gap between them."""
    speed_kmh = get_settings().assumed_average_speed_kmh
    gap = check_sufficient_gap(pair.first, pair.second, speed_kmh=speed_kmh)
    _metrics.record_gap(gap)
    return TravelEstimate(
        travel_minutes=estimate_travel_minutes(pair.first, pair.second, speed_kmh=speed_kmh),
        gap=gap,
    )


async def get_trip_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Provide an HTTP client for the trip API."""
    async with httpx.AsyncClient() as client:
        yield client


@router.get("/itineraries/{itinerary_id}/timeline", response_model=ItineraryTimeline)
async def stored_itinerary_timeline(
    itinerary_id: str,
    today: date | None = None,
    authorization: str | None = Header(default=None),
    client: httpx.AsyncClient = Depends(get_trip_client),
) -> ItineraryTimeline:
    """Fetch an itinerary from the trip API and annotate it.

    Upstream 4xx statuses are passed through; other upstream failures map to 502.
    """
    try:
        itinerary = await fetch_itinerary(itinerary_id, client, authorization=authorization)
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        raise HTTPException(
            status_code=status if 400 <= status < 500 else 502,
            detail=f"Trip API returned {status}",
        ) from e
    except (httpx.RequestError, ValueError) as e:
        # ValueError covers undecodable JSON and pydantic ValidationError
        raise HTTPException(status_code=502, detail=f"Trip API unusable: {type(e).__name__}") from e

    return await itinerary_timeline(itinerary, today=today)
