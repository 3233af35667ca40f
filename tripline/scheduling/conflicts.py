"""Conflict checking - overlapping and tightly packed items within each day."""

import logging
from collections.abc import Sequence

from tripline.models.diagnostics import ConflictType, ItemWarning, TimeConflict, WarningLevel
from tripline.models.itinerary import ItineraryItem
from tripline.scheduling.clock import minutes_between, round_half_up
from tripline.scheduling.days import group_items_by_day, ordered_day_numbers, sort_day_items

logger = logging.getLogger(__name__)

MIN_COMFORTABLE_GAP_MINUTES = 30


def check_time_conflicts(
    items: Sequence[ItineraryItem],
    min_gap_minutes: int = MIN_COMFORTABLE_GAP_MINUTES,
) -> list[TimeConflict]:
    """Find conflicts between consecutive items of each day.

    Each day's items are ordered by start time, then every adjacent pair is
    classified by the gap between the first item's end and the next start:
    negative is an overlap, zero leaves no travel time, and anything under
    `min_gap_minutes` is an insufficient gap.

    Args:
        items: All itinerary items, any order
        min_gap_minutes: Smallest gap that is not flagged

    Returns:
        Conflicts in day order, then time order; items without a day
        number form one group compared last
    """
    conflicts: list[TimeConflict] = []

    grouped = group_items_by_day(items)
    for day_number in ordered_day_numbers(grouped):
        ordered = sort_day_items(grouped[day_number])
        for current, nxt in zip(ordered, ordered[1:]):
            gap = minutes_between(current.end_time, nxt.start_time)

            if gap < 0:
                conflicts.append(TimeConflict(item1=current, item2=nxt, type=ConflictType.OVERLAP))
            elif gap == 0:
                conflicts.append(
                    TimeConflict(item1=current, item2=nxt, type=ConflictType.NO_GAP, gap_minutes=0)
                )
            elif gap < min_gap_minutes:
                conflicts.append(
                    TimeConflict(
                        item1=current,
                        item2=nxt,
                        type=ConflictType.INSUFFICIENT_GAP,
                        gap_minutes=round_half_up(gap),
                    )
                )

    if conflicts:
        logger.debug("Found %d time conflicts across %d items", len(conflicts), len(items))
    return conflicts


def _same_item(a: ItineraryItem, b: ItineraryItem) -> bool:
    if a.item_id is not None and b.item_id is not None:
        return a.item_id == b.item_id
    return a is b


def item_warning_status(
    item: ItineraryItem,
    all_items: Sequence[ItineraryItem],
    min_gap_minutes: int = MIN_COMFORTABLE_GAP_MINUTES,
) -> ItemWarning | None:
    """Most severe warning for one item: overlap, then no gap, then a tight gap."""
    item_conflicts = [
        c
        for c in check_time_conflicts(all_items, min_gap_minutes=min_gap_minutes)
        if _same_item(c.item1, item) or _same_item(c.item2, item)
    ]

    if any(c.type == ConflictType.OVERLAP for c in item_conflicts):
        return ItemWarning(type=WarningLevel.ERROR, message="Time overlap!")

    if any(c.type == ConflictType.NO_GAP for c in item_conflicts):
        return ItemWarning(type=WarningLevel.WARNING, message="No travel time")

    tight_gaps = [
        c.gap_minutes
        for c in item_conflicts
        if c.type == ConflictType.INSUFFICIENT_GAP and c.gap_minutes is not None
    ]
    if tight_gaps:
        return ItemWarning(type=WarningLevel.WARNING, message=f"Only {min(tight_gaps)}min gap")

    return None


def has_critical_conflicts(items: Sequence[ItineraryItem]) -> bool:
    """Whether any two items of the same day overlap."""
    return any(c.type == ConflictType.OVERLAP for c in check_time_conflicts(items))
