from docsite_ext import NewsFeedSettings


def test_from_attributes():
    settings = NewsFeedSettings.from_attributes({
        "news-feed-title": "News",
        "news-feed-description": "Latest",
        "site-url": "https://example.org",
        "news-feed-max-items": "5",
    })
    assert settings == NewsFeedSettings("News", "Latest", "https://example.org", 5)


def test_max_items_defaults_to_twenty():
    assert NewsFeedSettings.from_attributes({}).max_items == 20
    assert NewsFeedSettings.from_attributes({"news-feed-max-items": "many"}).max_items == 20


def test_from_env(tmp_path, monkeypatch):
    for name in ("NEWS_FEED_TITLE", "NEWS_FEED_DESCRIPTION", "SITE_URL", "NEWS_FEED_MAX_ITEMS"):
        # registers the variable so that whatever .env loading sets is undone
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env = tmp_path / ".env"
    env.write_text("NEWS_FEED_TITLE=From env\nSITE_URL=https://docs.example.org\nNEWS_FEED_MAX_ITEMS=3\n")

    settings = NewsFeedSettings.from_env(str(env))
    assert settings.title == "From env"
    assert settings.site_url == "https://docs.example.org"
    assert settings.max_items == 3
    assert settings.description == ""
