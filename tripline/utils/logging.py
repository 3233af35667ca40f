"""Structured logging for itinerary timelines."""

import logging
from typing import Any

from tripline.models.timeline import ItineraryTimeline

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the service process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


class StructuredTimelineLogger:
    """Structured logger for built timelines."""

    def log_timeline(
        self,
        timeline: ItineraryTimeline,
        itinerary_id: int | str | None = None,
        latency_ms: float | None = None,
    ) -> None:
        """Log a timeline summary with structured data."""
        tight_gaps = sum(1 for day in timeline.days for gap in day.gaps if not gap.sufficient)
        log_data: dict[str, Any] = {
            "itinerary_id": itinerary_id,
            "day_range": timeline.day_range,
            "current_day": timeline.current_day,
            "num_items": sum(len(day.items) for day in timeline.days),
            "num_conflicts": len(timeline.conflicts),
            "num_tight_gaps": tight_gaps,
            "critical": timeline.has_critical_conflicts,
        }

        if latency_ms is not None:
            log_data["latency_ms"] = round(latency_ms, 2)

        log_msg = f"Timeline built: itinerary={itinerary_id} conflicts={len(timeline.conflicts)}"

        if timeline.conflicts or tight_gaps:
            logger.warning(log_msg, extra={"structured": log_data})
        else:
            logger.info(log_msg, extra={"structured": log_data})
