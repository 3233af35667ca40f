"""Date calculations - trip length, day offsets and item timing relative to now."""

from datetime import date, datetime, time, timedelta

from tripline.models.itinerary import Itinerary, ItineraryItem


def day_range(itinerary: Itinerary) -> int:
    """Total number of days spanned by the trip, inclusive (1 for a same-day trip)."""
    return (itinerary.end_date - itinerary.start_date).days + 1


def calendar_date_for_day(itinerary: Itinerary, day_number: int) -> date:
    """Calendar date of a 1-based trip day. Not bounds-checked against day_range."""
    return itinerary.start_date + timedelta(days=day_number - 1)


def date_for_day(itinerary: Itinerary, day_number: int) -> str:
    """Short label for a trip day, e.g. "Mon, Jan 5"."""
    target = calendar_date_for_day(itinerary, day_number)
    return f"{target.strftime('%a, %b')} {target.day}"


def current_day(itinerary: Itinerary, today: date | None = None) -> int:
    """Trip day number for today, never less than 1.

    There is no upper clamp: after the trip has ended this returns a day
    beyond day_range(itinerary).

    Args:
        itinerary: Trip with start_date
        today: Local date to evaluate (defaults to date.today())

    Returns:
        1-based day number
    """
    if today is None:
        today = date.today()
    elapsed = (today - itinerary.start_date).days + 1
    return max(1, elapsed)


def _at(itinerary: Itinerary, day_number: int, clock: time) -> datetime:
    return datetime.combine(calendar_date_for_day(itinerary, day_number), clock)


def is_day_past(itinerary: Itinerary, day_number: int, now: datetime | None = None) -> bool:
    """Whether the whole trip day is over."""
    if now is None:
        now = datetime.now()
    return _at(itinerary, day_number, time.max) < now


def is_item_past(item: ItineraryItem, itinerary: Itinerary, now: datetime | None = None) -> bool:
    """Whether the item has started (an ongoing item counts as past).

    Items without a day number cannot be placed in time and are never past.
    """
    if item.day_number is None:
        return False
    if now is None:
        now = datetime.now()
    return now >= _at(itinerary, item.day_number, item.start_time)


def is_item_ongoing(item: ItineraryItem, itinerary: Itinerary, now: datetime | None = None) -> bool:
    """Whether now falls inside the item's [start, end) window."""
    if item.day_number is None:
        return False
    if now is None:
        now = datetime.now()
    start = _at(itinerary, item.day_number, item.start_time)
    end = _at(itinerary, item.day_number, item.end_time)
    return start <= now < end
