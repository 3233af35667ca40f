"""Clock-time arithmetic for items scheduled on the same day."""

import math
from datetime import time


def minutes_since_midnight(t: time) -> float:
    """Convert a time of day into minutes since midnight."""
    return t.hour * 60 + t.minute + t.second / 60


def minutes_between(end: time, start: time) -> float:
    """Minutes from `end` to a later `start` on the same day (negative if start is earlier)."""
    return minutes_since_midnight(start) - minutes_since_midnight(end)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
