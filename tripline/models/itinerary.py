"""Itinerary models - trip payload as returned by the trip API."""

from datetime import date, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItineraryItem(BaseModel):
    """Single scheduled activity tied to a trip day and a local time window.

    Display fields (experience name, descriptions, images) are opaque here and
    are kept as extra attributes so they round-trip unchanged.
    """

    model_config = ConfigDict(extra="allow")

    item_id: int | str | None = None
    day_number: int | None = None
    start_time: time
    end_time: time
    destination_latitude: float | None = None
    destination_longitude: float | None = None

    @field_validator("destination_latitude", "destination_longitude", mode="before")
    @classmethod
    def blank_coordinate_is_missing(cls, v: Any) -> Any:
        """Treat empty strings from the API as an absent coordinate."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are present."""
        return self.destination_latitude is not None and self.destination_longitude is not None


class Itinerary(BaseModel):
    """Trip record with an inclusive date range and its scheduled items."""

    model_config = ConfigDict(extra="allow")

    itinerary_id: int | str | None = None
    title: str | None = None
    status: str | None = None
    start_date: date
    end_date: date
    items: list[ItineraryItem] = Field(default_factory=list)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def truncate_timestamp(cls, v: Any) -> Any:
        """Keep only the date part of ISO timestamps such as 2025-01-05T00:00:00.000Z."""
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v
