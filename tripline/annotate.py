"""Timeline assembly - combine grouping, dates, travel and conflicts into one view."""

from datetime import date

from tripline.config import Settings, get_settings
from tripline.models.diagnostics import ConflictType
from tripline.models.itinerary import Itinerary
from tripline.models.timeline import DaySchedule, ItineraryTimeline
from tripline.scheduling.conflicts import check_time_conflicts
from tripline.scheduling.dates import calendar_date_for_day, current_day, date_for_day, day_range
from tripline.scheduling.days import group_items_by_day, ordered_day_numbers, sort_day_items
from tripline.scheduling.travel import check_sufficient_gap


def _day_date_and_label(
    itinerary: Itinerary, day_number: int | None
) -> tuple[date | None, str | None]:
    if day_number is None:
        return None, None
    try:
        return calendar_date_for_day(itinerary, day_number), date_for_day(itinerary, day_number)
    except OverflowError:
        return None, None


def build_timeline(
    itinerary: Itinerary,
    today: date | None = None,
    settings: Settings | None = None,
) -> ItineraryTimeline:
    """Build the annotated per-day timeline of an itinerary.

    Every trip day from 1 to day_range gets an entry (possibly empty); items
    whose day number falls outside that range get their own entries too, and
    items without a day number are collected in a final undated entry, so
    nothing is dropped. Days beyond the calendar's range keep their items
    but carry no date or label.

    Args:
        itinerary: Trip with items
        today: Local date for current_day (defaults to date.today())
        settings: Thresholds and speed (defaults to get_settings())

    Returns:
        ItineraryTimeline with days in day-number order
    """
    if settings is None:
        settings = get_settings()

    total_days = day_range(itinerary)
    grouped = group_items_by_day(itinerary.items)
    day_numbers = ordered_day_numbers([*range(1, total_days + 1), *grouped])

    days: list[DaySchedule] = []
    for day_number in day_numbers:
        ordered = sort_day_items(grouped.get(day_number, []))
        gaps = [
            check_sufficient_gap(current, nxt, speed_kmh=settings.assumed_average_speed_kmh)
            for current, nxt in zip(ordered, ordered[1:])
        ]
        day_date, label = _day_date_and_label(itinerary, day_number)
        days.append(
            DaySchedule(
                day_number=day_number,
                date=day_date,
                label=label,
                items=ordered,
                gaps=gaps,
            )
        )

    conflicts = check_time_conflicts(
        itinerary.items, min_gap_minutes=settings.min_comfortable_gap_minutes
    )

    return ItineraryTimeline(
        day_range=total_days,
        current_day=current_day(itinerary, today=today),
        days=days,
        conflicts=conflicts,
        has_critical_conflicts=any(c.type == ConflictType.OVERLAP for c in conflicts),
    )
