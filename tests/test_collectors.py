"""Tests for feed and page collection."""

from datetime import datetime, timezone

import pytest
from unittest.mock import Mock, AsyncMock, patch
from freezegun import freeze_time

from domains.news.config import NO_SUMMARY, SUMMARY_PENDING
from domains.news.models import SourceDescriptor, SourceKind
from domains.news.services.feeds import collect_articles, parse_feed_entries, scrape_feeds
from domains.news.services.pages import extract_article_links, scrape_pages

FEED = SourceDescriptor("Creative Bloq", "https://www.creativebloq.com/feeds.xml", SourceKind.FEED)
PAGE = SourceDescriptor("RunwayML", "https://runwayml.com/news", SourceKind.PAGE)

RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Creative Bloq</title>
    <item>
      <title>Fresh AI brushes</title>
      <link>https://www.creativebloq.com/fresh</link>
      <description><![CDATA[<p>New <b>AI</b> brushes for illustrators.</p>]]></description>
      <pubDate>Wed, 28 Jan 2026 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Old news</title>
      <link>https://www.creativebloq.com/old</link>
      <description>From two weeks ago.</description>
      <pubDate>Thu, 15 Jan 2026 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Already posted</title>
      <link>https://www.creativebloq.com/posted</link>
      <description>Posted yesterday.</description>
      <pubDate>Wed, 28 Jan 2026 09:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Undated</title>
      <link>https://www.creativebloq.com/undated</link>
    </item>
  </channel>
</rss>
"""

HTML = """
<html><body>
  <article><a href="/news/gen-4">Gen-4</a></article>
  <article><a href="https://runwayml.com/news/act-two">Act-Two</a></article>
  <h2><a href="/news/posted">Posted</a></h2>
  <h2><a>No href</a></h2>
  <h2><a href="/news/frames">Frames</a></h2>
  <h2><a href="/news/sixth">Sixth link</a></h2>
  <p><a href="/about">About</a></p>
</body></html>
"""


class TestParseFeedEntries:

    @freeze_time("2026-01-29 12:00:00")
    def test_recency_and_dedup(self, store):
        store.append("https://www.creativebloq.com/posted")

        articles = parse_feed_entries(FEED, RSS, store)
        urls = [a.url for a in articles]

        assert "https://www.creativebloq.com/fresh" in urls
        assert "https://www.creativebloq.com/old" not in urls
        assert "https://www.creativebloq.com/posted" not in urls

    @freeze_time("2026-01-29 12:00:00")
    def test_old_entries_excluded_even_when_unposted(self, store):
        articles = parse_feed_entries(FEED, RSS, store)

        assert all(a.url != "https://www.creativebloq.com/old" for a in articles)

    def test_entry_fields(self, store):
        now = datetime(2026, 1, 29, 12, tzinfo=timezone.utc)
        articles = parse_feed_entries(FEED, RSS, store, now=now)
        fresh = next(a for a in articles if a.url.endswith("/fresh"))

        assert fresh.source == "Creative Bloq"
        assert fresh.title == "Fresh AI brushes"
        assert fresh.summary == "New AI brushes for illustrators."
        assert fresh.published == datetime(2026, 1, 28, 10, tzinfo=timezone.utc)

    def test_undated_entry_kept_with_placeholder_summary(self, store):
        now = datetime(2026, 1, 29, 12, tzinfo=timezone.utc)
        articles = parse_feed_entries(FEED, RSS, store, now=now)
        undated = next(a for a in articles if a.url.endswith("/undated"))

        assert undated.published is None
        assert undated.summary == NO_SUMMARY


class TestExtractArticleLinks:

    def test_first_five_matches_resolved_and_deduped(self, store):
        store.append("https://runwayml.com/news/posted")

        articles = extract_article_links(PAGE, HTML, store)
        urls = [a.url for a in articles]

        # Five matches considered: gen-4, act-two, posted, no-href, frames
        assert urls == [
            "https://runwayml.com/news/gen-4",
            "https://runwayml.com/news/act-two",
            "https://runwayml.com/news/frames",
        ]

    def test_page_articles_await_summary(self, store):
        articles = extract_article_links(PAGE, HTML, store)

        assert all(a.summary == SUMMARY_PENDING for a in articles)
        assert all(a.source == "RunwayML" for a in articles)
        assert all(a.title is None for a in articles)

    def test_image_and_headline_links_to_same_page_kept_once(self, store):
        html = """
        <article><a href="/news/gen-4"><img src="gen-4.png"></a><h2><a href="/news/gen-4">Gen-4</a></h2></article>
        <article><a href="/news/act-two"><img src="act-two.png"></a><h2><a href="/news/act-two">Act-Two</a></h2></article>
        """

        articles = extract_article_links(PAGE, html, store)

        assert [a.url for a in articles] == [
            "https://runwayml.com/news/gen-4",
            "https://runwayml.com/news/act-two",
        ]


class TestScraping:

    @pytest.mark.asyncio
    @freeze_time("2026-01-29 12:00:00", real_asyncio=True)
    async def test_failed_feed_does_not_abort_batch(self, store, mock_httpx_client):
        broken = SourceDescriptor("Broken", "https://broken.example/feed", SourceKind.FEED)

        async def fake_get(url, **kwargs):
            if "broken" in url:
                raise RuntimeError("connection refused")
            return Mock(content=RSS.encode(), raise_for_status=Mock())

        mock_httpx_client.get = AsyncMock(side_effect=fake_get)

        articles = await scrape_feeds([broken, FEED], store)

        assert {a.source for a in articles} == {"Creative Bloq"}
        assert any(a.url.endswith("/fresh") for a in articles)

    @pytest.mark.asyncio
    async def test_page_fetch_uses_timeout_and_encoding(self, store, mock_httpx_client):
        mock_httpx_client.get = AsyncMock(return_value=Mock(text=HTML, raise_for_status=Mock()))

        articles = await scrape_pages([PAGE], store)

        assert len(articles) == 4
        kwargs = mock_httpx_client.get.call_args.kwargs
        assert kwargs["timeout"] == 10
        assert kwargs["headers"]["Accept-Encoding"] == "gzip, deflate, br"

    @pytest.mark.asyncio
    async def test_failed_page_yields_nothing(self, store, mock_httpx_client):
        mock_httpx_client.get = AsyncMock(side_effect=TimeoutError("timed out"))

        assert await scrape_pages([PAGE], store) == []

    @pytest.mark.asyncio
    async def test_collect_combines_feed_and_page_results(self, store, make_article):
        feed_article = make_article("Wired")
        page_article = make_article("RunwayML")

        with patch('domains.news.services.feeds.scrape_feeds', AsyncMock(return_value=[feed_article])) as feeds, \
             patch('domains.news.services.feeds.scrape_pages', AsyncMock(return_value=[page_article])) as pages:
            articles = await collect_articles([FEED, PAGE], store)

        assert articles == [feed_article, page_article]
        assert feeds.call_args.args[0] == [FEED]
        assert pages.call_args.args[0] == [PAGE]

    @pytest.mark.asyncio
    async def test_collect_drops_repeated_urls(self, store, make_article):
        first = make_article("Wired", 1)
        repeat = make_article("Wired", 1)
        other = make_article("Wired", 2)

        with patch('domains.news.services.feeds.scrape_feeds', AsyncMock(return_value=[first, repeat, other])), \
             patch('domains.news.services.feeds.scrape_pages', AsyncMock(return_value=[make_article("Wired", 2)])):
            articles = await collect_articles([FEED, PAGE], store)

        assert articles == [first, other]
        assert articles[0] is first and articles[1] is other
