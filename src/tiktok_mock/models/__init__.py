"""Mock API Models and Data Types."""

from .metric_range import METRIC_RANGES, MetricRange
from .report import PageInfo, ReportEnvelope, ReportRow

__all__ = [
    "METRIC_RANGES",
    "MetricRange",
    "PageInfo",
    "ReportEnvelope",
    "ReportRow",
]
