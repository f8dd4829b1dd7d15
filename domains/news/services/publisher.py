"""Posting selected articles to the news channel."""

import asyncio
import re
import time
from typing import Awaitable, Callable

from logger import logger
from ..config import DISCORD_MESSAGE_LIMIT, POST_INTERVAL_SECONDS
from ..models import Article
from .store import ArticleStore

_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")


def trim_to_sentences(text: str, count: int = 2) -> str:
    """Keep the first `count` sentences, ending with terminal punctuation."""
    sentences = _SENTENCE_END.split(text.strip())
    trimmed = " ".join(sentences[:count]).strip()
    if trimmed and trimmed[-1] not in ".!?":
        trimmed += "."
    return trimmed


def format_article_message(article: Article) -> str:
    """Discord message for a single article, within the message limit."""
    summary = trim_to_sentences(article.summary or "")
    message = f"📰 **{article.source} Update**\n{summary}\n🔗 [Read more]({article.url})"

    if len(message) > DISCORD_MESSAGE_LIMIT:
        logger.warning(f"Trimming long message from {article.source}")
        message = message[:DISCORD_MESSAGE_LIMIT - 10] + "..."

    return message


async def publish_articles(
    channel,
    articles: list[Article],
    store: ArticleStore,
    interval: float = POST_INTERVAL_SECONDS,
    sleep: Callable[[float], Awaitable] = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic
) -> list[Article]:
    """Post articles one at a time, article i at `i * interval` seconds after start.

    Each successful send is recorded in the store and persisted immediately.
    A failed send or persist is logged and the remaining articles still go out.

    Returns:
        Articles that were posted and recorded
    """
    logger.info(f"Posting {len(articles)} articles, {interval}s apart")

    posted = []
    start = clock()

    for i, article in enumerate(articles):
        delay = start + i * interval - clock()
        if delay > 0:
            await sleep(delay)

        try:
            await channel.send(format_article_message(article))
            store.append(article.url)
            store.persist()
            posted.append(article)
            logger.info(f"Posted: {article.source} - {article.url}")
        except Exception as e:
            logger.error(f"Failed to post {article.url}: {e}")

    return posted
