"""Daily digest pipeline: collect, curate, publish."""

import asyncio
from dataclasses import dataclass, field

from claude_client import ClaudeClient
from logger import logger
from ..models import Article, SourceDescriptor
from .curation import enforce_source_diversity, fill_missing_summaries, filter_articles, rank_articles
from .feeds import collect_articles
from .publisher import publish_articles
from .store import ArticleStore


@dataclass
class DigestContext:
    """Everything a digest run needs, built once at startup."""
    store: ArticleStore
    claude: ClaudeClient
    sources: list[SourceDescriptor]
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


async def select_top_articles(context: DigestContext, articles: list[Article]) -> list[Article]:
    """Summarise, filter and rank collected articles down to the final picks."""
    await fill_missing_summaries(context.claude, articles)

    relevant = filter_articles(articles)
    if not relevant:
        logger.info("No relevant articles found")
        return []

    ranked = await rank_articles(context.claude, relevant)
    return enforce_source_diversity(ranked)


async def run_digest(channel, context: DigestContext) -> list[Article]:
    """Run one full digest cycle against `channel`.

    Overlapping runs are skipped rather than queued, so only one run at a time
    writes to the store.

    Returns:
        Articles posted this cycle
    """
    if context.lock.locked():
        logger.warning("Digest already running, skipping this trigger")
        return []

    async with context.lock:
        logger.info("Checking for new articles...")
        articles = await collect_articles(context.sources, context.store)

        top_articles = await select_top_articles(context, articles)
        if not top_articles:
            return []

        return await publish_articles(channel, top_articles, context.store)
