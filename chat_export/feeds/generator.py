"""
RSS 2.0 feed generator for chat room message exports.
"""

import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable, List
from xml.etree.ElementTree import Element, SubElement, tostring, register_namespace
from xml.dom import minidom

from ..models import ChatMessage

ATOM_NS = 'http://www.w3.org/2005/Atom'
DC_NS = 'http://purl.org/dc/elements/1.1/'

# Register namespace prefixes to avoid duplicate/ns0 declarations
register_namespace('atom', ATOM_NS)
register_namespace('dc', DC_NS)

# lastBuildDate of a feed with no entries
EMPTY_FEED_UPDATED = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile('[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]')


def xml_safe(text: str) -> str:
    """Drop characters that cannot appear in an XML document."""
    return INVALID_XML_CHARS.sub('', text)


class FeedGenerator:
    """Generates RSS 2.0 documents from chat messages."""

    def __init__(self, app_name: str, base_url: str):
        """Initialize feed generator.

        Args:
            app_name: Application name used as the feed title prefix
            base_url: Base URL of the web client (e.g., http://jabbr.net)
        """
        self.app_name = app_name
        self.base_url = base_url.rstrip('/')

    def generate_rss(self, messages: Iterable[ChatMessage], room_name: str) -> bytes:
        """Generate an RSS 2.0 feed for a room.

        Entries are written newest first whatever the input order.

        Args:
            messages: Messages to include
            room_name: Display name of the room

        Returns:
            UTF-8 encoded RSS 2.0 XML document
        """
        ordered = self.order_newest_first(messages)

        rss = Element('rss', {'version': '2.0'})
        channel = SubElement(rss, 'channel')

        # Channel metadata
        SubElement(channel, 'title').text = xml_safe(self.feed_title(room_name))
        SubElement(channel, 'link').text = xml_safe(self.room_link(room_name))
        SubElement(channel, 'description').text = ''
        SubElement(channel, 'lastBuildDate').text = self._format_rss_date(
            self.get_last_updated(ordered)
        )
        SubElement(channel, f'{{{ATOM_NS}}}id').text = xml_safe(room_name)

        for message in ordered:
            self._add_rss_item(channel, message)

        return self._prettify_xml(rss)

    def _add_rss_item(self, channel: Element, message: ChatMessage) -> None:
        """Add an RSS item element for a message."""
        item = SubElement(channel, 'item')

        guid = SubElement(item, 'guid', {'isPermaLink': 'false'})
        guid.text = xml_safe(message.id)

        SubElement(item, 'pubDate').text = self._format_rss_date(message.when)

        # HTML content goes out as-is; the XML writer escapes it as text
        SubElement(item, 'description').text = xml_safe(message.content)

        SubElement(item, f'{{{ATOM_NS}}}updated').text = message.when.isoformat()

        # Dublin Core creator (message author)
        SubElement(item, f'{{{DC_NS}}}creator').text = xml_safe(message.username)

    def feed_title(self, room_name: str) -> str:
        return f"{self.app_name} - {room_name}"

    def room_link(self, room_name: str) -> str:
        return f"{self.base_url}/#/rooms/{room_name}"

    @staticmethod
    def order_newest_first(messages: Iterable[ChatMessage]) -> List[ChatMessage]:
        return sorted(messages, key=lambda m: m.when, reverse=True)

    @staticmethod
    def get_last_updated(messages: Iterable[ChatMessage]) -> datetime:
        """Get the timestamp of the newest message, or the epoch if empty."""
        return max((m.when for m in messages), default=EMPTY_FEED_UPDATED)

    def _format_rss_date(self, dt: datetime) -> str:
        """Format datetime for RSS 2.0 (RFC 822)."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return format_datetime(dt)

    def _prettify_xml(self, elem: Element) -> bytes:
        """Convert Element to a pretty-printed UTF-8 XML document."""
        rough_string = tostring(elem, encoding='unicode')
        reparsed = minidom.parseString(rough_string)
        return reparsed.toprettyxml(indent="  ", encoding="utf-8")
