"""
Response renderers for message exports.

Two output formats are supported, each selected by an ``OutputFormat`` tag.
Errors always render as JSON, whatever format was requested.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable

from ..config.settings import ExportConfig
from ..exceptions import ExportError, UnsupportedFormatError
from ..feeds import FeedGenerator
from ..models import ChatMessage, TimeRange
from .schemas import ClientError, MessageView, MessageViewList

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"


class OutputFormat(str, Enum):
    """Supported export formats."""
    JSON = "json"
    RSS = "rss"

    @classmethod
    def parse(cls, token: str) -> 'OutputFormat':
        """Exact, case-sensitive match of a format token."""
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedFormatError() from None


@dataclass(frozen=True)
class RenderContext:
    """Request details a renderer may need."""
    room_name: str
    time_range: TimeRange


@dataclass(frozen=True)
class RenderedBody:
    """Serialized response body."""
    content: bytes
    media_type: str
    status_code: int = 200
    status_description: str = "OK"


class ResponseRenderer(ABC):
    """Serializes filtered messages into a response body."""

    media_type: str

    @abstractmethod
    def render(self, messages: Iterable[ChatMessage], context: RenderContext) -> RenderedBody:
        pass


class JsonRenderer(ResponseRenderer):
    """Indented JSON array of ``{content, username, when}`` objects."""

    media_type = JSON_MEDIA_TYPE

    def render(self, messages: Iterable[ChatMessage], context: RenderContext) -> RenderedBody:
        views = [
            MessageView(content=m.content, username=m.username, when=m.when)
            for m in messages
        ]
        # dump_json already yields UTF-8 bytes
        data = MessageViewList.dump_json(views, by_alias=True, indent=2)
        return RenderedBody(content=data, media_type=self.media_type)


class RssRenderer(ResponseRenderer):
    """RSS 2.0 feed, newest message first."""

    media_type = RSS_MEDIA_TYPE

    def __init__(self, feed_generator: FeedGenerator):
        self.feed_generator = feed_generator

    def render(self, messages: Iterable[ChatMessage], context: RenderContext) -> RenderedBody:
        data = self.feed_generator.generate_rss(messages, context.room_name)
        return RenderedBody(content=data, media_type=self.media_type)


class ErrorRenderer:
    """Renders an export error as a ``{"message": ...}`` JSON body."""

    def render(self, error: ExportError) -> RenderedBody:
        body = ClientError(message=error.message)
        return RenderedBody(
            content=body.model_dump_json(by_alias=True, indent=2).encode("utf-8"),
            media_type=JSON_MEDIA_TYPE,
            status_code=error.status_code,
            status_description=error.status_description,
        )


def build_renderers(config: ExportConfig) -> Dict[OutputFormat, ResponseRenderer]:
    """Create one renderer per supported output format."""
    return {
        OutputFormat.JSON: JsonRenderer(),
        OutputFormat.RSS: RssRenderer(FeedGenerator(config.app_name, config.base_url)),
    }
