"""
Request dispatcher for message exports.

Turns a room/format/range/download request into an HTTP response:
resolve the range, authorize the room, pick a renderer, then read and
filter the room messages and write the body. Any failure writes a JSON
error and stops.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from fastapi.responses import Response

from ..config.settings import ExportConfig
from ..data.base import ChatRepository
from ..exceptions import ExportError, InvalidRangeError
from .download import build_download_filename, content_disposition, parse_download_flag
from .message_filter import MessageFilter
from .range_resolver import resolve_range
from .renderers import (
    ErrorRenderer, OutputFormat, RenderContext, RenderedBody, build_renderers
)
from .room_gate import RoomGate, read_with_timeout

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RequestDispatcher:
    """Orchestrates a single message export request."""

    def __init__(
        self,
        repository: ChatRepository,
        config: ExportConfig,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize dispatcher.

        Args:
            repository: Read-only message store
            config: Service configuration
            clock: Returns the current time; defaults to UTC now
        """
        self.repository = repository
        self.config = config
        self.timeout = config.repository_config.timeout
        self.room_gate = RoomGate(repository, timeout=self.timeout)
        self.message_filter = MessageFilter()
        self.renderers = build_renderers(config)
        self.error_renderer = ErrorRenderer()
        self._clock = clock or utc_now

    async def dispatch(
        self,
        room_name: str,
        format_name: str,
        range_token: Optional[str] = None,
        download: Optional[str] = None,
    ) -> Response:
        """Handle an export request.

        Args:
            room_name: Room path parameter
            format_name: Format path parameter (``json`` or ``rss``)
            range_token: Range query parameter
            download: Download query parameter, parsed as a boolean

        Returns:
            The rendered export, or a JSON error response
        """
        now = self._clock()

        try:
            time_range = resolve_range(range_token, now)
        except InvalidRangeError as e:
            return self._write_error(e, room_name)

        access = await self.room_gate.authorize(room_name)
        if not access.ok:
            return self._write_error(access.error, room_name)
        room = access.room

        headers: Dict[str, str] = {}
        if parse_download_flag(download):
            filename = build_download_filename(
                room_name, time_range, format_name, self.config.filename_date_format
            )
            headers["Content-Disposition"] = content_disposition(filename)

        try:
            output_format = OutputFormat.parse(format_name)
        except ExportError as e:
            # The attachment header is already set and stays on the error
            return self._write_error(e, room_name, headers)

        try:
            room_messages = await read_with_timeout(
                self.repository.get_messages_by_room(room_name), self.timeout
            )
        except ExportError as e:
            return self._write_error(e, room_name)

        messages = self.message_filter.filter_messages(room_messages, time_range)

        renderer = self.renderers[output_format]
        body = renderer.render(messages, RenderContext(room_name=room.name, time_range=time_range))

        logger.debug(
            f"Exported room {room.name} as {output_format.value} "
            f"({time_range.start.isoformat()} .. {time_range.end.isoformat()})"
        )
        return self._write(body, headers)

    def _write_error(
        self,
        error: ExportError,
        room_name: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        body = self.error_renderer.render(error)
        # Client input problems, not service failures
        logger.info(
            f"Export of room {room_name!r} rejected: {body.status_code} "
            f"{body.status_description} [{error.error_code}] {error.message}"
        )
        return self._write(body, headers)

    @staticmethod
    def _write(body: RenderedBody, headers: Optional[Dict[str, str]] = None) -> Response:
        return Response(
            content=body.content,
            status_code=body.status_code,
            media_type=body.media_type,
            headers=headers,
        )
