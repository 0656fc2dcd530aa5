"""
Resolution of symbolic range tokens into absolute time windows.
"""

from datetime import datetime, timedelta
from typing import Dict, Optional

from ..exceptions import InvalidRangeError
from ..models import TimeRange, MIN_TIMESTAMP

DEFAULT_RANGE = "last-day"
ALL_RANGE = "all"

RANGE_OFFSETS: Dict[str, timedelta] = {
    "last-hour": timedelta(hours=1),
    "last-day": timedelta(days=1),
    "last-week": timedelta(days=7),
    "last-month": timedelta(days=30),
}


def resolve_range(token: Optional[str], now: datetime) -> TimeRange:
    """Map a range token to the window ending at ``now``.

    A missing or blank token means ``last-day``. Tokens match exactly.

    Raises:
        InvalidRangeError: The token is not recognized
    """
    if token is None or not token.strip():
        token = DEFAULT_RANGE

    if token == ALL_RANGE:
        return TimeRange(start=MIN_TIMESTAMP, end=now)

    offset = RANGE_OFFSETS.get(token)
    if offset is None:
        raise InvalidRangeError()

    return TimeRange(start=now - offset, end=now)
