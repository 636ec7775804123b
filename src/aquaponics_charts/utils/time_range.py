from datetime import datetime, timedelta
from typing import List, Tuple

from ..enums.granularity import GranularityBucket

# Upper bound (inclusive) of each bucket, finest first
SPAN_BREAKPOINTS: List[Tuple[timedelta, GranularityBucket]] = [
    (timedelta(minutes=120), GranularityBucket.MINUTES),
    (timedelta(hours=48), GranularityBucket.HOURS),
    (timedelta(days=14), GranularityBucket.DAYS),
    (timedelta(days=90), GranularityBucket.WEEKS),
    (timedelta(days=730), GranularityBucket.MONTHS),
]


def classify_span(span: timedelta) -> GranularityBucket:
    """Bucket for a time span; anything past the last breakpoint is years."""
    for limit, bucket in SPAN_BREAKPOINTS:
        if span <= limit:
            return bucket
    return GranularityBucket.YEARS


def classify_time_range(start: datetime, end: datetime) -> GranularityBucket:
    """
    Classify the span between two timestamps into a display granularity.

    Args:
        start: First timestamp of the displayed range
        end: Last timestamp of the displayed range

    Returns:
        The finest bucket whose breakpoint covers ``end - start``. A negative
        span is treated like a zero-length one.
    """
    return classify_span(end - start)
