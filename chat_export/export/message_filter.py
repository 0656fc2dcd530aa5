"""
Time window filtering of room messages.
"""

from typing import Iterable, Iterator

from ..models import ChatMessage, TimeRange


class MessageFilter:
    """Selects the messages of a room that fall inside a time window."""

    def filter_messages(
        self,
        messages: Iterable[ChatMessage],
        time_range: TimeRange,
    ) -> Iterator[ChatMessage]:
        """Lazily yield messages with ``start <= when <= end``.

        Source order is preserved.
        """
        return (message for message in messages if time_range.contains(message.when))
