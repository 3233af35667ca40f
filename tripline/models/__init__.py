"""Models package - re-exports for convenience."""

from tripline.models.diagnostics import (
    ConflictType,
    GapCheck,
    ItemWarning,
    TimeConflict,
    WarningLevel,
)
from tripline.models.itinerary import Itinerary, ItineraryItem
from tripline.models.timeline import (
    ConflictReport,
    DaySchedule,
    ItineraryTimeline,
    TravelEstimate,
    TravelPair,
)

__all__ = [
    # Itinerary
    "Itinerary",
    "ItineraryItem",
    # Diagnostics
    "GapCheck",
    "ConflictType",
    "TimeConflict",
    "WarningLevel",
    "ItemWarning",
    # Timeline
    "DaySchedule",
    "ItineraryTimeline",
    "ConflictReport",
    "TravelPair",
    "TravelEstimate",
]
