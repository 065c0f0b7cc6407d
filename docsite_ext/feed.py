from __future__ import annotations

import calendar
import time
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any, Dict, Iterable, List, Optional, Union

import feedparser

from .config import NewsFeedSettings
from .exceptions import FeedParseError
from .models import FeedEntry

GENERATOR = "docsite-ext"


def _rfc822(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def _sub(parent: ET.Element, tag: str, text: Optional[str], **attrib: str) -> ET.Element:
    el = ET.SubElement(parent, tag, attrib)
    el.text = text or ""
    return el


def build_feed_xml(
    settings: NewsFeedSettings,
    items: Iterable[FeedEntry],
    build_date: Optional[datetime] = None,
) -> bytes:
    """
    Serialize an RSS 2.0 document with one ``<item>`` per entry, indented.

    Items are written in the order given; callers sort and cap them.
    """
    build_date = build_date or datetime.now(timezone.utc)

    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _sub(channel, "title", settings.title)
    _sub(channel, "description", settings.description)
    _sub(channel, "link", settings.site_url)
    _sub(channel, "generator", GENERATOR)
    _sub(channel, "lastBuildDate", _rfc822(build_date))
    _sub(channel, "pubDate", _rfc822(build_date))

    for it in items:
        item = ET.SubElement(channel, "item")
        _sub(item, "title", it.title)
        _sub(item, "description", it.summary)
        _sub(item, "link", it.link)
        _sub(item, "guid", it.guid or it.link, isPermaLink="true")
        if it.published_at is not None:
            _sub(item, "pubDate", _rfc822(it.published_at))

    ET.indent(rss, space="    ")
    return ET.tostring(rss, encoding="UTF-8", xml_declaration=True)


def _to_datetime(entry: Dict[str, Any]) -> Optional[datetime]:
    """
    Timezone-aware UTC datetime of a feed entry.
    Priority: published_parsed -> updated_parsed -> None.
    """
    for key in ("published_parsed", "updated_parsed"):
        val = entry.get(key)
        if isinstance(val, time.struct_time):
            return datetime.fromtimestamp(calendar.timegm(val), tz=timezone.utc)
    return None


def read_feed(data: Union[bytes, str]) -> List[FeedEntry]:
    """
    Parse a published feed document back into its entries.

    A verification helper: the build itself never reads feeds. Use it to check
    a generated ``news.atom`` (the test suite does) or a deployed one.
    Raises FeedParseError when the document is malformed (bozo).
    """
    feed = feedparser.parse(data)

    if getattr(feed, "bozo", 0):
        exc = getattr(feed, "bozo_exception", None)
        msg = "Invalid RSS/Atom feed"
        if exc:
            msg += f" ({exc})"
        raise FeedParseError(msg)

    out: List[FeedEntry] = []
    for e in feed.entries:
        guid = None
        for k in ("id", "guid"):
            v = e.get(k)
            if isinstance(v, str) and v.strip():
                guid = v.strip()
                break
        out.append(FeedEntry(
            title=(e.get("title") or "").strip(),
            summary=(e.get("summary") or e.get("description") or "").strip(),
            link=(e.get("link") or "").strip(),
            published_at=_to_datetime(e),
            guid=guid,
        ))
    return out
