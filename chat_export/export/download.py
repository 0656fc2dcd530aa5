"""
Download mode helpers: flag parsing and attachment filenames.
"""

from typing import Optional
from urllib.parse import quote

from ..config.settings import FILENAME_DATE_FORMAT
from ..models import TimeRange


def parse_download_flag(value: Optional[str]) -> bool:
    """Strict boolean parse; anything but ``true``/``false`` is False."""
    if value is None:
        return False
    return value.strip().lower() == "true"


def build_download_filename(
    room_name: str,
    time_range: TimeRange,
    format_name: str,
    date_format: str = FILENAME_DATE_FORMAT,
) -> str:
    """Build ``{room}.[{start}.]{end}.{format}``.

    The start segment is left out for the unbounded ``all`` range.
    """
    parts = [room_name]
    if not time_range.is_unbounded:
        parts.append(time_range.start.strftime(date_format))
    parts.append(time_range.end.strftime(date_format))
    parts.append(format_name)
    return ".".join(parts)


def content_disposition(filename: str) -> str:
    """Attachment header value; non-latin-1 names use the RFC 5987 form."""
    try:
        filename.encode("latin-1")
    except UnicodeEncodeError:
        return f"attachment; filename*=UTF-8''{quote(filename)}"
    return f'attachment; filename="{filename}"'
