"""
Time window used to select exported messages.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

# Earliest representable timestamp, used for the unbounded "all" range
MIN_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class TimeRange:
    """Window of message timestamps, inclusive on both ends."""
    start: datetime
    end: datetime

    @property
    def is_unbounded(self) -> bool:
        """True when the window reaches back to the earliest timestamp."""
        return self.start == MIN_TIMESTAMP

    def contains(self, when: datetime) -> bool:
        return self.start <= when <= self.end
