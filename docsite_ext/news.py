from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from dateutil import parser as date_parser

from .attributes import MacroAttributes
from .config import ExtensionContext, NewsFeedSettings
from .document import Document, Section, load_document, parse_blocks
from .exceptions import NewsArticleError
from .feed import build_feed_xml
from .models import ContentFile, FeedEntry, FileSrc, NewsSummary
from .resource import match_content_catalog, qualify_resource_id

logger = logging.getLogger(__name__)

PUBLISH_DATE_ATTRIBUTE = "page-publish_date"
FEED_BASENAME = "news.atom"
FEED_MEDIA_TYPE = "application/rss+xml"


def _parse_date(value: str) -> datetime:
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        # date-only values are calendar dates in UTC
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def summarize(file: ContentFile, base: Optional[FileSrc] = None) -> NewsSummary:
    """
    Extract publish date, title and first paragraph of a news article.

    A missing or unparsable ``page-publish_date`` is an authoring error and
    raises NewsArticleError naming the article. The cross reference is
    written relative to the document at ``base`` (the article itself by default).
    """
    path = file.src.abspath or file.src.relative
    doc = load_document(file.text)

    publish_date = doc.attributes.get(PUBLISH_DATE_ATTRIBUTE)
    if not publish_date:
        raise NewsArticleError(f"Publish date not defined in a news article: {path}", path)
    try:
        date = _parse_date(publish_date)
    except (ValueError, OverflowError) as e:
        raise NewsArticleError(
            f"Could not parse {PUBLISH_DATE_ATTRIBUTE} attribute as a date in {path}", path
        ) from e

    first = doc.blocks[0].text if doc.blocks else ""
    return NewsSummary(
        date=date,
        title=doc.doctitle or "",
        summary=first,
        xref=qualify_resource_id(file.src, base or file.src),
    )


def collect_summaries(ref_glob: str, context: ExtensionContext) -> List[NewsSummary]:
    """Summarize every article matched by ``ref_glob``, newest first."""
    files = match_content_catalog(ref_glob, context.file.src, context.catalog)
    summaries = [summarize(f, context.file.src) for f in files]
    summaries.sort(key=lambda s: s.date, reverse=True)
    return summaries


def format_news_date(date: datetime) -> str:
    """``Sun, 01 Jan 2023``: the UTC date without the time of day."""
    return date.astimezone(timezone.utc).strftime("%a, %d %b %Y")


def render_sections(summaries: Iterable[NewsSummary], max_items: int) -> List[Section]:
    sections: List[Section] = []
    for summary in summaries:
        if len(sections) >= max_items:
            break
        section = Section(title=f"xref:{summary.xref}[{summary.title}]")
        for block in parse_blocks(f"[.news-date]\n{format_news_date(summary.date)}"):
            section.append(block)
        for block in parse_blocks(f"[.news-summary]\n{summary.summary}"):
            section.append(block)
        sections.append(section)
    return sections


def _absolute_url(site_url: str, page_url: str) -> str:
    return site_url.rstrip("/") + "/" + page_url.lstrip("/")


def generate_feed(
    context: ExtensionContext,
    summaries: Iterable[NewsSummary],
    build_date: Optional[datetime] = None,
) -> bytes:
    """Render the RSS document for the newest ``max_items`` summaries."""
    settings: NewsFeedSettings = context.settings
    items: List[FeedEntry] = []
    for summary in summaries:
        if len(items) >= settings.max_items:
            break
        page = context.catalog.resolve_resource(summary.xref, context.file.src, "page")
        if page is None or page.pub is None:
            logger.warning("News article %s has no published page; linking the site root", summary.xref)
            url = settings.site_url
        else:
            url = _absolute_url(settings.site_url, page.pub.url)
        items.append(FeedEntry(
            title=summary.title,
            summary=summary.summary,
            link=url,
            published_at=summary.date,
        ))
    return build_feed_xml(settings, items, build_date)


class NewsBlockMacro:
    """
    ``news::generate[refs=<glob>]``: list the matched articles and publish ``news.atom``.
    """

    name = "news"

    def __init__(self, context: ExtensionContext) -> None:
        self.context = context

    def process(self, parent: Document, target: str, attributes: MacroAttributes) -> None:
        if target != "generate":
            return
        refs = attributes.named("refs")
        if not refs:
            return

        summaries = collect_summaries(refs, self.context)
        for section in render_sections(summaries, self.context.settings.max_items):
            parent.append(section)

        src = self.context.file.src
        self.context.catalog.add_file(ContentFile(
            contents=generate_feed(self.context, summaries),
            src=FileSrc(
                component=src.component,
                version=src.version,
                module=src.module,
                family="attachment",
                relative=FEED_BASENAME,
                stem="news",
                basename=FEED_BASENAME,
                media_type=FEED_MEDIA_TYPE,
            ),
        ))
        logger.info("Registered %s with %d of %d article(s) for %s",
                    FEED_BASENAME, min(len(summaries), self.context.settings.max_items),
                    len(summaries), src.relative)


class NewsInlineMacro:
    """
    ``news:feed[link text]``: a link to the module's ``news.atom`` attachment.
    """

    name = "news"

    def __init__(self, context: ExtensionContext) -> None:
        self.context = context

    def process(self, parent: Optional[Document], target: str, attributes: MacroAttributes) -> Optional[str]:
        if target != "feed":
            return None
        text = attributes.only_positional() or FEED_BASENAME
        pub = self.context.file.pub
        root = pub.module_root_path if pub else "."
        return f'<a href="{root}/_attachments/{FEED_BASENAME}">{text}</a>'
