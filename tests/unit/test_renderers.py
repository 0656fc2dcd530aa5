"""
Tests for the JSON, RSS and error renderers.
"""

import json
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from xml.etree import ElementTree

import pytest

from chat_export.exceptions import (
    InvalidRangeError, RoomNotFoundError, UnsupportedFormatError
)
from chat_export.export import (
    ErrorRenderer, JsonRenderer, OutputFormat, RenderContext, RssRenderer,
    build_renderers, resolve_range
)
from chat_export.feeds import FeedGenerator

from tests.factories import NOW, make_message

DC_NS = "http://purl.org/dc/elements/1.1/"
ATOM_NS = "http://www.w3.org/2005/Atom"


@pytest.fixture
def context():
    return RenderContext(room_name="Lobby", time_range=resolve_range("last-day", NOW))


@pytest.fixture
def rss_renderer():
    return RssRenderer(FeedGenerator("JabbR", "http://jabbr.net/"))


class TestOutputFormat:
    """Tests for format token selection."""

    def test_known_formats(self):
        assert OutputFormat.parse("json") is OutputFormat.JSON
        assert OutputFormat.parse("rss") is OutputFormat.RSS

    @pytest.mark.parametrize("token", ["xml", "JSON", "", "atom"])
    def test_unknown_format(self, token):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            OutputFormat.parse(token)
        assert exc_info.value.message == "format not supported."

    def test_registry_covers_every_format(self, config):
        renderers = build_renderers(config)
        assert set(renderers) == set(OutputFormat)
        assert isinstance(renderers[OutputFormat.JSON], JsonRenderer)
        assert isinstance(renderers[OutputFormat.RSS], RssRenderer)


class TestJsonRenderer:
    """Tests for JsonRenderer."""

    def test_single_message_projection(self, context):
        when = datetime(2026, 10, 19, 11, 0, 0, tzinfo=timezone.utc)
        body = JsonRenderer().render([make_message("m1", "hi", "alice", when)], context)

        data = json.loads(body.content.decode("utf-8"))
        assert data == [{"content": "hi", "username": "alice", "when": data[0]["when"]}]
        assert datetime.fromisoformat(data[0]["when"]) == when
        assert body.media_type.startswith("application/json")
        assert body.status_code == 200

    def test_output_is_indented_utf8(self, context):
        when = NOW - timedelta(minutes=1)
        body = JsonRenderer().render([make_message("m1", "héllo ☃", "zoë", when)], context)

        assert isinstance(body.content, bytes)
        text = body.content.decode("utf-8")
        assert "\n  " in text
        assert json.loads(text)[0]["content"] == "héllo ☃"

    def test_order_follows_input(self, context):
        messages = [
            make_message("b", "later", "x", NOW - timedelta(minutes=1)),
            make_message("a", "earlier", "x", NOW - timedelta(minutes=9)),
        ]
        data = json.loads(JsonRenderer().render(messages, context).content)
        assert [m["content"] for m in data] == ["later", "earlier"]

    def test_empty_sequence(self, context):
        body = JsonRenderer().render(iter([]), context)
        assert json.loads(body.content) == []


class TestRssRenderer:
    """Tests for RssRenderer and the underlying FeedGenerator."""

    def test_entries_newest_first(self, rss_renderer, context):
        t1 = NOW - timedelta(hours=3)
        t2 = NOW - timedelta(hours=2)
        t3 = NOW - timedelta(hours=1)
        messages = [
            make_message("two", "b", "bob", t2),
            make_message("three", "c", "carol", t3),
            make_message("one", "a", "alice", t1),
        ]

        body = rss_renderer.render(messages, context)
        root = ElementTree.fromstring(body.content)
        guids = [item.findtext("guid") for item in root.iter("item")]

        assert guids == ["three", "two", "one"]

    def test_channel_metadata(self, rss_renderer, context):
        newest = NOW - timedelta(minutes=5)
        messages = [
            make_message("m1", "a", "alice", NOW - timedelta(hours=1)),
            make_message("m2", "b", "bob", newest),
        ]

        root = ElementTree.fromstring(rss_renderer.render(messages, context).content)
        channel = root.find("channel")

        assert root.tag == "rss"
        assert root.get("version") == "2.0"
        assert channel.findtext("title") == "JabbR - Lobby"
        assert channel.findtext("link") == "http://jabbr.net/#/rooms/Lobby"
        assert parsedate_to_datetime(channel.findtext("lastBuildDate")) == newest
        assert channel.findtext(f"{{{ATOM_NS}}}id") == "Lobby"

    def test_item_fields(self, rss_renderer, context):
        when = NOW - timedelta(minutes=7)
        message = make_message("msg-42", "<b>bold</b> & more", "alice", when)

        root = ElementTree.fromstring(rss_renderer.render([message], context).content)
        item = root.find("channel/item")

        assert item.findtext("guid") == "msg-42"
        assert item.find("guid").get("isPermaLink") == "false"
        assert parsedate_to_datetime(item.findtext("pubDate")) == when
        assert datetime.fromisoformat(item.findtext(f"{{{ATOM_NS}}}updated")) == when
        assert item.findtext("description") == "<b>bold</b> & more"
        assert item.findtext(f"{{{DC_NS}}}creator") == "alice"

    def test_empty_feed_uses_epoch(self, rss_renderer, context):
        root = ElementTree.fromstring(rss_renderer.render([], context).content)
        last_build = parsedate_to_datetime(root.findtext("channel/lastBuildDate"))

        assert last_build == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert root.findall("channel/item") == []

    def test_document_is_utf8_with_declaration(self, rss_renderer, context):
        message = make_message("m1", "café", "zoë", NOW)
        body = rss_renderer.render([message], context)

        assert body.content.startswith(b'<?xml version="1.0" encoding="utf-8"?>')
        assert "zoë".encode("utf-8") in body.content
        assert body.media_type.startswith("application/rss+xml")


class TestErrorRenderer:
    """Tests for ErrorRenderer."""

    @pytest.mark.parametrize("error,status,description", [
        (InvalidRangeError(), 400, "Bad request"),
        (UnsupportedFormatError(), 400, "Bad request"),
        (RoomNotFoundError("Unable to locate room x."), 404, "Not found"),
    ])
    def test_error_envelope(self, error, status, description):
        body = ErrorRenderer().render(error)

        assert json.loads(body.content) == {"message": error.message}
        assert body.status_code == status
        assert body.status_description == description
        assert body.media_type.startswith("application/json")
