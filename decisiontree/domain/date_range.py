"""
Date range value used to express when a rule is valid.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# datetime.max truncated to whole milliseconds; its epoch-millisecond value
# fits in a signed 64-bit integer so it can be persisted as a long.
MAX = datetime.max.replace(microsecond=999000, tzinfo=timezone.utc)


def to_epoch_millis(instant: datetime) -> int:
    """Convert an aware datetime to whole milliseconds since the epoch."""
    return (instant - EPOCH) // timedelta(milliseconds=1)


@dataclass(frozen=True)
class DateRange:
    """Pair of instants bounding a validity window."""

    start: datetime
    finish: datetime
