"""Prometheus metrics for timeline annotation."""

from prometheus_client import Counter, Histogram

from tripline.models.diagnostics import GapCheck, TimeConflict
from tripline.models.timeline import ItineraryTimeline

timeline_latency_ms = Histogram(
    "timeline_latency_ms",
    "Timeline build latency in milliseconds",
    buckets=[1, 5, 10, 25, 50, 100, 250, 500],
)

timelines_built_total = Counter(
    "timelines_built_total",
    "Total itinerary timelines built",
    ["critical"],
)

time_conflicts_total = Counter(
    "time_conflicts_total",
    "Total time conflicts detected",
    ["type"],
)

gap_checks_total = Counter(
    "gap_checks_total",
    "Total travel gap checks",
    ["outcome"],
)


def gap_outcome(gap: GapCheck) -> str:
    """Metric label for a gap check result."""
    if gap.travel_minutes is None:
        return "no_coordinates"
    if gap.overlap:
        return "overlap"
    return "sufficient" if gap.sufficient else "insufficient"


class PrometheusTimelineMetrics:
    """Prometheus-based timeline metrics implementation."""

    def record_latency(self, latency_ms: float) -> None:
        """Record timeline build latency."""
        timeline_latency_ms.observe(latency_ms)

    def record_conflicts(self, conflicts: list[TimeConflict]) -> None:
        """Increment conflict counters by type."""
        for conflict in conflicts:
            time_conflicts_total.labels(type=conflict.type.value).inc()

    def record_gap(self, gap: GapCheck) -> None:
        """Increment gap check counter."""
        gap_checks_total.labels(outcome=gap_outcome(gap)).inc()

    def record_timeline(self, timeline: ItineraryTimeline) -> None:
        """Record all counters for a built timeline."""
        timelines_built_total.labels(critical=str(timeline.has_critical_conflicts).lower()).inc()
        self.record_conflicts(timeline.conflicts)
        for day in timeline.days:
            for gap in day.gaps:
                self.record_gap(gap)
