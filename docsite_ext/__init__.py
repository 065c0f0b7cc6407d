"""
docsite_ext

Content-processing extensions for a documentation site generator.

Extensions:
- component:<name>[@<version>][<field>] → version, displayVersion or title of a component version
- news::generate[refs=<glob>]          → newest articles first, plus a news.atom RSS attachment
- news:feed[<text>]                    → link to the news.atom attachment
- fref:<target>[<text>]                → relative link to a resource of any family

Also: a docs index builder and the pipeline configuration JSON schema.

Example
-------
from docsite_ext import InMemoryCatalog, ExtensionContext, MacroRegistry, NewsFeedSettings, register_extensions

context = ExtensionContext(
    catalog=InMemoryCatalog(files, components),
    file=current_file,
    settings=NewsFeedSettings.from_attributes(playbook_attributes),
)
registry = register_extensions(MacroRegistry(), context)

html = registry.process_inline("component", None, "core@latest", "displayVersion")
"""
from .attributes import MacroAttributes, parse_attrlist
from .catalog import ContentCatalog, InMemoryCatalog
from .component import ComponentMacro
from .config import ExtensionContext, NewsFeedSettings
from .docs_index import build_index
from .exceptions import FeedParseError, NewsArticleError, PipelineConfigurationError
from .feed import build_feed_xml, read_feed
from .fref import FrefMacro
from .models import (
    ComponentModel,
    ComponentVersion,
    ContentFile,
    FeedEntry,
    FileSrc,
    NewsSummary,
    Page,
    PublishInfo,
    ResourceRef,
)
from .news import NewsBlockMacro, NewsInlineMacro, summarize
from .pipeline_schema import load_pipeline_schema, validate_pipeline_configuration
from .registry import MacroRegistry, register_extensions
from .resource import match_content_catalog, parse_resource_id, split_fragment
from .urls import compute_relative_url_path

__all__ = [
    "MacroAttributes",
    "parse_attrlist",
    "ContentCatalog",
    "InMemoryCatalog",
    "ComponentMacro",
    "ExtensionContext",
    "NewsFeedSettings",
    "build_index",
    "FeedParseError",
    "NewsArticleError",
    "PipelineConfigurationError",
    "build_feed_xml",
    "read_feed",
    "FrefMacro",
    "ComponentModel",
    "ComponentVersion",
    "ContentFile",
    "FeedEntry",
    "FileSrc",
    "NewsSummary",
    "Page",
    "PublishInfo",
    "ResourceRef",
    "NewsBlockMacro",
    "NewsInlineMacro",
    "summarize",
    "load_pipeline_schema",
    "validate_pipeline_configuration",
    "MacroRegistry",
    "register_extensions",
    "match_content_catalog",
    "parse_resource_id",
    "split_fragment",
    "compute_relative_url_path",
]
