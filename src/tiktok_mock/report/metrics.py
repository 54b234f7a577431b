"""
Metric value generation for synthesized report rows.

Known metrics get a random integer from their configured range;
unknown metric names are reported as "0".
"""

import math
import secrets
from typing import Iterable, Optional

from ..models.metric_range import METRIC_RANGES
from ..utils.constants import UNKNOWN_METRIC_VALUE

_default_rng = secrets.SystemRandom()


def draw_metric_value(name: str, rng=None) -> str:
    """
    Draw a single metric value as a base-10 string.

    Args:
        name: Metric name
        rng: Random source with a random() method (default: SystemRandom)

    Returns:
        floor(random() * (max - min) + min) for known metrics, "0" otherwise
    """
    metric_range = METRIC_RANGES.get(name)
    if metric_range is None:
        return UNKNOWN_METRIC_VALUE
    source = rng or _default_rng
    span = metric_range.max - metric_range.min
    return str(math.floor(source.random() * span + metric_range.min))


def generate_metrics(names: Iterable[str], rng: Optional[object] = None) -> dict[str, str]:
    """
    Generate a value for each requested metric name.

    Duplicate names are drawn again and overwrite the earlier value,
    so the result holds each distinct name once.
    """
    metrics: dict[str, str] = {}
    for name in names:
        metrics[name] = draw_metric_value(name, rng=rng)
    return metrics
