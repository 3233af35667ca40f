"""Day grouping - partition itinerary items into per-day buckets."""

from collections.abc import Iterable

from tripline.models.itinerary import ItineraryItem


def group_items_by_day(
    items: Iterable[ItineraryItem],
) -> dict[int | None, list[ItineraryItem]]:
    """Group items by their day number.

    Buckets keep the relative input order of their items; nothing is sorted
    by time here. Whatever day number an item carries becomes its key, so
    gaps, out-of-range days and items without a day (key None) are
    preserved as-is.

    Args:
        items: Itinerary items in any order

    Returns:
        Mapping of day_number to the items scheduled on that day
    """
    grouped: dict[int | None, list[ItineraryItem]] = {}
    for item in items:
        grouped.setdefault(item.day_number, []).append(item)
    return grouped


def ordered_day_numbers(day_numbers: Iterable[int | None]) -> list[int | None]:
    """Sort day numbers ascending, with the undated bucket (None) last."""
    return sorted(set(day_numbers), key=lambda day: (day is None, day or 0))


def sort_day_items(items: Iterable[ItineraryItem]) -> list[ItineraryItem]:
    """Sort one day's items by start time (stable for equal start times)."""
    return sorted(items, key=lambda item: item.start_time)
