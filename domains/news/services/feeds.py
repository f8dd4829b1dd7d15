"""RSS/Atom feed collection and the combined collection pass."""

import asyncio
from datetime import datetime, timedelta, timezone

import feedparser
import httpx
from bs4 import BeautifulSoup

from logger import logger
from ..config import FEED_TIMEOUT, NO_SUMMARY, RECENCY_DAYS
from ..models import Article, SourceDescriptor, SourceKind
from .pages import scrape_pages
from .store import ArticleStore


def _entry_published(entry) -> datetime | None:
    """Publication time of a feed entry as an aware UTC datetime."""
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    return datetime(*parsed[:6], tzinfo=timezone.utc)


def _entry_summary(entry) -> str:
    """Plain-text snippet of a feed entry."""
    raw = entry.get("summary") or entry.get("description") or ""
    text = BeautifulSoup(raw, "html.parser").get_text(" ", strip=True)
    return text or NO_SUMMARY


def parse_feed_entries(
    source: SourceDescriptor,
    content: str | bytes,
    store: ArticleStore,
    now: datetime | None = None
) -> list[Article]:
    """Turn raw feed content into recent, not-yet-posted articles.

    Entries older than RECENCY_DAYS are dropped; entries with no date are kept.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=RECENCY_DAYS)

    feed = feedparser.parse(content)
    articles = []

    for entry in feed.entries:
        published = _entry_published(entry)
        if published and published < cutoff:
            continue

        url = entry.get("link", "")
        if not url or store.contains(url):
            continue

        articles.append(Article(
            source=source.name,
            title=entry.get("title"),
            url=url,
            summary=_entry_summary(entry),
            published=published
        ))

    return articles


async def _fetch_feed(client: httpx.AsyncClient, source: SourceDescriptor, store: ArticleStore) -> list[Article]:
    """Fetch one feed; failures are logged and yield no articles."""
    try:
        logger.info(f"Fetching RSS feed: {source.name}")
        response = await client.get(source.url)
        response.raise_for_status()
        return parse_feed_entries(source, response.content, store)
    except Exception as e:
        logger.error(f"Error fetching RSS feed from {source.name}: {e}")
        return []


async def scrape_feeds(sources: list[SourceDescriptor], store: ArticleStore) -> list[Article]:
    """Fetch all feed sources concurrently."""
    articles: list[Article] = []

    async with httpx.AsyncClient(follow_redirects=True, timeout=FEED_TIMEOUT) as client:
        async def fetch_single(source: SourceDescriptor):
            articles.extend(await _fetch_feed(client, source, store))

        await asyncio.gather(*[fetch_single(s) for s in sources])

    return articles


async def collect_articles(sources: list[SourceDescriptor], store: ArticleStore) -> list[Article]:
    """Run feed and page collection in parallel and combine the results."""
    logger.info("Scraping RSS feeds and HTML pages...")

    feed_sources = [s for s in sources if s.kind is SourceKind.FEED]
    page_sources = [s for s in sources if s.kind is SourceKind.PAGE]

    feed_articles, page_articles = await asyncio.gather(
        scrape_feeds(feed_sources, store),
        scrape_pages(page_sources, store)
    )

    # One article per URL, first occurrence wins
    articles = []
    seen = set()
    for article in feed_articles + page_articles:
        if article.url in seen:
            continue
        seen.add(article.url)
        articles.append(article)

    logger.info(f"Found {len(articles)} new articles")
    return articles
