"""HTML page scraping for sources without a feed."""

import asyncio
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from logger import logger
from ..config import MAX_LINKS_PER_PAGE, PAGE_SELECTOR, PAGE_TIMEOUT, SUMMARY_PENDING
from ..models import Article, SourceDescriptor
from .store import ArticleStore


def extract_article_links(source: SourceDescriptor, html: str, store: ArticleStore) -> list[Article]:
    """Pull candidate article links out of a listing page.

    Only the first MAX_LINKS_PER_PAGE selector matches are considered and a
    link repeated on the page is kept once.
    """
    soup = BeautifulSoup(html, "html.parser")
    articles = []
    seen = set()

    for element in soup.select(PAGE_SELECTOR)[:MAX_LINKS_PER_PAGE]:
        href = element.get("href")
        if not href:
            continue

        url = href if href.startswith("http") else urljoin(source.url, href)
        if url in seen or store.contains(url):
            continue
        seen.add(url)

        articles.append(Article(
            source=source.name,
            url=url,
            summary=SUMMARY_PENDING
        ))

    return articles


async def _scrape_page(client: httpx.AsyncClient, source: SourceDescriptor, store: ArticleStore) -> list[Article]:
    """Scrape one page; failures are logged and yield no articles."""
    try:
        logger.info(f"Scraping website: {source.name}")
        response = await client.get(
            source.url,
            headers={"Accept-Encoding": "gzip, deflate, br"},
            timeout=PAGE_TIMEOUT
        )
        response.raise_for_status()
        return extract_article_links(source, response.text, store)
    except Exception as e:
        logger.error(f"Error scraping {source.name}: {e}")
        return []


async def scrape_pages(sources: list[SourceDescriptor], store: ArticleStore) -> list[Article]:
    """Scrape all page sources concurrently."""
    articles: list[Article] = []

    async with httpx.AsyncClient(follow_redirects=True) as client:
        async def scrape_single(source: SourceDescriptor):
            articles.extend(await _scrape_page(client, source, store))

        await asyncio.gather(*[scrape_single(s) for s in sources])

    return articles
