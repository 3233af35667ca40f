"""Timeline models - annotated per-day view of an itinerary."""

from datetime import date

from pydantic import BaseModel, Field

from tripline.models.diagnostics import GapCheck, TimeConflict
from tripline.models.itinerary import ItineraryItem


class DaySchedule(BaseModel):
    """Items of one trip day in start-time order, with gap checks between them.

    `gaps[i]` describes the transition from `items[i]` to `items[i + 1]`.
    Items without a day number share one undated entry (day_number None);
    date and label are None there and for days too far out to have a
    calendar date.
    """

    day_number: int | None
    date: date | None
    label: str | None
    items: list[ItineraryItem]
    gaps: list[GapCheck] = Field(default_factory=list)


class ItineraryTimeline(BaseModel):
    """Complete annotated view of an itinerary."""

    day_range: int
    current_day: int
    days: list[DaySchedule]
    conflicts: list[TimeConflict]
    has_critical_conflicts: bool


class ConflictReport(BaseModel):
    """Itinerary-wide conflict summary."""

    conflicts: list[TimeConflict]
    has_critical_conflicts: bool


class TravelPair(BaseModel):
    """Two consecutive items to check against each other."""

    first: ItineraryItem
    second: ItineraryItem


class TravelEstimate(BaseModel):
    """Travel time estimate and gap check for an item pair."""

    travel_minutes: int | None
    gap: GapCheck
