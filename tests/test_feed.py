from datetime import datetime, timezone

import pytest

from docsite_ext import FeedEntry, FeedParseError, NewsFeedSettings, build_feed_xml, read_feed


@pytest.fixture
def feed_settings():
    return NewsFeedSettings(title="Site news", description="What is new", site_url="https://example.org")


def test_channel_and_items(feed_settings):
    xml = build_feed_xml(
        feed_settings,
        [
            FeedEntry("Second", "Two", "https://example.org/2.html", datetime(2024, 6, 1, tzinfo=timezone.utc)),
            FeedEntry("First", "One more", "https://example.org/1.html", datetime(2023, 1, 1)),
        ],
        build_date=datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc),
    )
    text = xml.decode("utf-8")
    assert text.startswith("<?xml")
    assert "<title>Site news</title>" in text
    assert "<link>https://example.org</link>" in text
    assert "<lastBuildDate>Mon, 01 Jul 2024 12:00:00 GMT</lastBuildDate>" in text
    assert "\n    <channel>" in text

    entries = read_feed(xml)
    assert [e.title for e in entries] == ["Second", "First"]
    assert entries[1].summary == "One more"
    assert entries[1].published_at == datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert entries[0].guid == "https://example.org/2.html"


def test_malformed_feed():
    with pytest.raises(FeedParseError):
        read_feed(b"<rss><channel><item></channel>")
