"""Display formatting for clock times, dates and image paths."""

from datetime import date, time

from tripline.config import get_settings


def format_time(value: str | time | None) -> str:
    """Format a 24-hour clock time for display, e.g. "14:05" -> "2:05 PM".

    Strings that already carry AM/PM, or that have no minutes part, are
    returned unchanged.
    """
    if value is None or value == "":
        return "Invalid Time"

    if isinstance(value, time):
        hours, minutes = value.hour, f"{value.minute:02d}"
    else:
        text = value.strip()
        if "AM" in text or "PM" in text:
            return text

        parts = text.split(":")
        if len(parts) < 2:
            return text

        try:
            hours = int(parts[0])
        except ValueError:
            hours = 0
        minutes = parts[1] or "00"

    suffix = "PM" if hours >= 12 else "AM"
    display_hour = hours % 12 or 12
    return f"{display_hour}:{minutes} {suffix}"


def format_time_range(start: str | time, end: str | time) -> str:
    """Format a time window, e.g. "9:00 AM - 10:30 AM"."""
    return f"{format_time(start)} - {format_time(end)}"


def format_date(value: date | str) -> str:
    """Format a date as month name and day, e.g. "January 5"."""
    if isinstance(value, str):
        value = date.fromisoformat(value.split("T", 1)[0])
    return f"{value.strftime('%B')} {value.day}"


def image_uri(image_path: str, api_url: str | None = None) -> str:
    """Resolve an image path returned by the API into an absolute URL."""
    if image_path.startswith("http"):
        return image_path

    base = (api_url if api_url is not None else get_settings().api_url).rstrip("/")
    path = image_path.replace("\\", "/")
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base}{path}"
