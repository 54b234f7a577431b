"""Metric range model and the table of known report metrics."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class MetricRange:
    """
    Integer bounds for a randomized metric value.

    Values are drawn from the half-open interval [min, max).
    """

    min: int
    max: int

    def contains(self, value: int) -> bool:
        """Check whether a value lies inside [min, max)."""
        return self.min <= value < self.max

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {'min': self.min, 'max': self.max}


# Plausible value ranges for every metric the mock knows about
METRIC_RANGES: MappingProxyType = MappingProxyType({
    "impressions": MetricRange(1000, 100000),
    "clicks": MetricRange(50, 5000),
    "spend": MetricRange(100, 10000),
    "video_watched_2s": MetricRange(800, 80000),
    "video_views_p75": MetricRange(200, 20000),
    "conversion": MetricRange(10, 1000),
    "video_play_actions": MetricRange(500, 50000),
    "video_watched_6s": MetricRange(400, 40000),
    "average_video_play": MetricRange(3, 15),
    "video_views_p25": MetricRange(600, 60000),
    "video_views_p50": MetricRange(400, 40000),
    "video_views_p100": MetricRange(100, 10000),
})
