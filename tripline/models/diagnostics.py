"""Diagnostic models - travel gaps and schedule conflicts between items."""

from enum import Enum

from pydantic import BaseModel

from tripline.models.itinerary import ItineraryItem


class GapCheck(BaseModel):
    """Whether the gap between two consecutive items covers the travel time.

    When no travel estimate is possible, the check is permissive:
    sufficient with an empty message and no minute figures.
    """

    sufficient: bool
    message: str
    gap_minutes: int | None = None
    travel_minutes: int | None = None
    overlap: bool = False


class ConflictType(str, Enum):
    """Kind of time-window conflict between consecutive items of a day."""

    OVERLAP = "overlap"
    NO_GAP = "no_gap"
    INSUFFICIENT_GAP = "insufficient_gap"


class TimeConflict(BaseModel):
    """A conflict between an item and the next item on the same day."""

    item1: ItineraryItem
    item2: ItineraryItem
    type: ConflictType
    gap_minutes: int | None = None


class WarningLevel(str, Enum):
    """Severity of a per-item warning badge."""

    ERROR = "error"
    WARNING = "warning"


class ItemWarning(BaseModel):
    """Most severe conflict warning affecting a single item."""

    type: WarningLevel
    message: str
