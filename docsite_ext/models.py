from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class ResourceRef:
    """
    A parsed resource reference: ``version@component:module:family$relative``.

    Every field is filled in, either from the reference itself or from the
    location of the document the reference appears in.
    """
    version: Optional[str]
    component: Optional[str]
    module: Optional[str]
    family: Optional[str]
    relative: str


@dataclass(frozen=True)
class FileSrc:
    component: Optional[str]
    version: Optional[str]
    module: Optional[str]
    family: Optional[str]
    relative: str
    abspath: Optional[str] = None
    stem: Optional[str] = None
    basename: Optional[str] = None
    media_type: Optional[str] = None


@dataclass(frozen=True)
class PublishInfo:
    url: str
    module_root_path: str = "."


@dataclass(frozen=True)
class ContentFile:
    """
    A catalog entry. Owned by the host; extensions only read it.
    """
    src: FileSrc
    contents: bytes = b""
    pub: Optional[PublishInfo] = None

    @property
    def text(self) -> str:
        return self.contents.decode("utf-8")


@dataclass(frozen=True)
class ComponentVersion:
    version: str
    display_version: Optional[str] = None
    title: Optional[str] = None


@dataclass(frozen=True)
class ComponentModel:
    name: str
    versions: Tuple[ComponentVersion, ...] = ()
    latest: Optional[ComponentVersion] = None


@dataclass(frozen=True)
class NewsSummary:
    """
    Summary of one news article, ready to be rendered and put in the feed.
    """
    date: datetime
    title: str
    summary: str
    xref: str


@dataclass(frozen=True)
class FeedEntry:
    """
    An item read back from a published feed.
    """
    title: str
    summary: str
    link: str
    published_at: Optional[datetime] = None
    guid: Optional[str] = None


@dataclass(frozen=True)
class Page:
    path: str
    index: Optional[int] = None
    title: Optional[str] = None
    href: Optional[str] = None
    data: dict = field(default_factory=dict, compare=False)

    def with_href(self, href: str) -> "Page":
        return replace(self, href=href)
