"""
Message export pipeline: range resolution, room gating, filtering and
rendering.
"""

from .range_resolver import resolve_range, RANGE_OFFSETS, DEFAULT_RANGE, ALL_RANGE
from .room_gate import RoomGate, RoomAccess, read_with_timeout
from .message_filter import MessageFilter
from .renderers import (
    OutputFormat, RenderContext, RenderedBody, ResponseRenderer,
    JsonRenderer, RssRenderer, ErrorRenderer, build_renderers
)
from .download import parse_download_flag, build_download_filename, content_disposition
from .dispatcher import RequestDispatcher

__all__ = [
    'resolve_range',
    'RANGE_OFFSETS',
    'DEFAULT_RANGE',
    'ALL_RANGE',
    'RoomGate',
    'RoomAccess',
    'read_with_timeout',
    'MessageFilter',
    'OutputFormat',
    'RenderContext',
    'RenderedBody',
    'ResponseRenderer',
    'JsonRenderer',
    'RssRenderer',
    'ErrorRenderer',
    'build_renderers',
    'parse_download_flag',
    'build_download_filename',
    'content_disposition',
    'RequestDispatcher',
]
