"""
Message export endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import Response

from .dependencies import get_dispatcher
from ..export.dispatcher import RequestDispatcher
from ..export.schemas import ClientError

router = APIRouter()


@router.get(
    "/api/v1/messages/{room}/{format}",
    summary="Export room messages",
    description="Export the messages of a public room as JSON or RSS 2.0.",
    responses={
        200: {
            "content": {"application/json": {}, "application/rss+xml": {}},
            "description": "Messages in the requested format",
        },
        400: {"model": ClientError, "description": "Unknown range or format"},
        404: {"model": ClientError, "description": "Room not found"},
        503: {"model": ClientError, "description": "Message store unavailable"},
    },
)
async def export_messages(
    room: str = Path(..., description="Room name"),
    format: str = Path(..., description="Output format: json or rss"),
    range: Optional[str] = Query(
        None,
        description="last-hour, last-day (default), last-week, last-month or all",
    ),
    download: Optional[str] = Query(None, description="'true' to download as a file"),
    dispatcher: RequestDispatcher = Depends(get_dispatcher),
) -> Response:
    """Export a room's messages."""
    return await dispatcher.dispatch(
        room_name=room,
        format_name=format,
        range_token=range,
        download=download,
    )
