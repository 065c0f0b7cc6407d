from typing import Optional

import pytest

from docsite_ext import (
    ComponentModel,
    ComponentVersion,
    ContentFile,
    ExtensionContext,
    FileSrc,
    InMemoryCatalog,
    NewsFeedSettings,
    PublishInfo,
)


def page(relative: str, contents: str = "", *, component: str = "site", version: str = "main",
         module: str = "ROOT", family: str = "page", url: Optional[str] = None) -> ContentFile:
    if url is None:
        url = f"/{component}/{version}/" + relative.replace(".adoc", ".html")
    return ContentFile(
        src=FileSrc(
            component=component,
            version=version,
            module=module,
            family=family,
            relative=relative,
            abspath=f"/repo/{component}/modules/{module}/pages/{relative}",
        ),
        contents=contents.encode("utf-8"),
        pub=PublishInfo(url=url, module_root_path=".."),
    )


def article(relative: str, date: Optional[str], title: str = "Title", summary: str = "Summary.") -> ContentFile:
    header = [f"= {title}"] if title is not None else []
    if date is not None:
        header.append(f":page-publish_date: {date}")
    return page(relative, "\n".join(header) + f"\n\n{summary}\n\nMore text.\n")


@pytest.fixture
def index_page() -> ContentFile:
    return page("news.adoc", "= News\n\nnews::generate[refs=news/*.adoc]\n")


@pytest.fixture
def catalog(index_page) -> InMemoryCatalog:
    return InMemoryCatalog(
        files=[
            index_page,
            article("news/2023-new-year.adoc", "2023-01-01", "New year", "Happy new year."),
            article("news/2024-release.adoc", "2024-06-01", "Release 1.0", "Version 1.0 is out."),
            article("news/2022-hello.adoc", "2022-03-03", "Hello", "Hello world."),
            page("docs/intro.adoc", "= Intro\n\nIntro text.\n"),
        ],
        components=[
            ComponentModel(
                name="core",
                versions=(
                    ComponentVersion("main", "Main", "Core"),
                    ComponentVersion("1.0", "1.0.0", "Core 1.0"),
                    ComponentVersion("0.9", "0.9.0", "Core 0.9"),
                ),
                latest=ComponentVersion("1.0", "1.0.0", "Core 1.0"),
            ),
            ComponentModel(
                name="single",
                versions=(ComponentVersion("main", "Main", "Single"),),
                latest=ComponentVersion("main", "Main", "Single"),
            ),
        ],
    )


@pytest.fixture
def settings() -> NewsFeedSettings:
    return NewsFeedSettings(
        title="Site news",
        description="What is new",
        site_url="https://example.org",
        max_items=20,
    )


@pytest.fixture
def context(catalog, index_page, settings) -> ExtensionContext:
    return ExtensionContext(catalog=catalog, file=index_page, settings=settings)
