from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from .catalog import ContentCatalog
from .models import ContentFile

DEFAULT_MAX_ITEMS = 20


def _to_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value) or default
    except (TypeError, ValueError):
        return default


@dataclass
class NewsFeedSettings:
    title: str = ""
    description: str = ""
    site_url: str = ""
    max_items: int = DEFAULT_MAX_ITEMS

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "NewsFeedSettings":
        """Read the feed settings from playbook (site-wide AsciiDoc) attributes."""
        return cls(
            title=attributes.get("news-feed-title") or "",
            description=attributes.get("news-feed-description") or "",
            site_url=attributes.get("site-url") or "",
            max_items=_to_int(attributes.get("news-feed-max-items"), DEFAULT_MAX_ITEMS),
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "NewsFeedSettings":
        """Read the feed settings from the environment, loading a .env file first if there is one."""
        load_dotenv(dotenv_path)
        return cls(
            title=os.getenv("NEWS_FEED_TITLE", ""),
            description=os.getenv("NEWS_FEED_DESCRIPTION", ""),
            site_url=os.getenv("SITE_URL", ""),
            max_items=_to_int(os.getenv("NEWS_FEED_MAX_ITEMS"), DEFAULT_MAX_ITEMS),
        )


@dataclass
class ExtensionContext:
    """
    What the host hands to the extensions: its catalog, the file being processed and the settings.
    """
    catalog: ContentCatalog
    file: ContentFile
    settings: NewsFeedSettings
