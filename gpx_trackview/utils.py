"""General utility helpers shared across modules."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

# Sentinel used for missing timestamps and for the bounds of an empty view.
EPOCH_ZERO = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_utc_aware(value: datetime) -> datetime:
    """Return ``value`` as a timezone-aware UTC datetime.

    Naive datetimes are assumed to already be in UTC.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``; NaN maps to ``low``."""

    if math.isnan(value):
        return low
    return min(max(value, low), high)


def format_duration(duration: timedelta) -> str:
    """Format a duration into a ``Hh Mm Ss`` string."""

    seconds = max(int(duration.total_seconds()), 0)
    hours, rem = divmod(seconds, 3600)
    mins, sec = divmod(rem, 60)
    if hours:
        return f"{hours}h {mins}m {sec}s"
    return f"{mins}m {sec}s"
