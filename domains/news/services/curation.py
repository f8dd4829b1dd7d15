"""Article summarising, filtering, ranking and source diversity."""

import re

from claude_client import ClaudeClient
from logger import logger
from ..config import (
    POLITICAL_KEYWORDS,
    RANK_CANDIDATE_LIMIT,
    RANK_PROMPT,
    SUMMARIZE_PROMPT,
    SUMMARY_MAX_CHARS,
    SUMMARY_PENDING,
    SUMMARY_UNAVAILABLE,
    TOP_N,
    TOPIC_KEYWORDS,
)
from ..models import Article

_TOPIC_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in TOPIC_KEYWORDS) + r")s?\b",
    re.IGNORECASE
)
_ARTICLE_REF = re.compile(r"Article (\d+)")


def truncate_summary(summary: str, limit: int = SUMMARY_MAX_CHARS) -> str:
    """Hard-cut a summary to `limit` characters including the "..." marker."""
    if len(summary) <= limit:
        return summary
    return summary[:limit - 3] + "..."


async def summarize_article(claude: ClaudeClient, url: str) -> str:
    """Ask Claude for a short creative-tech summary of an article."""
    try:
        summary = await claude.complete([
            {"role": "system", "content": SUMMARIZE_PROMPT},
            {
                "role": "user",
                "content": f"Article URL: {url}\n\nPlease summarize in 1-2 sentences, "
                           "focusing ONLY on generative AI, creative technology, and innovation."
            }
        ], max_tokens=200)
        return truncate_summary(summary.strip())
    except Exception as e:
        logger.error(f"Claude error while summarizing {url}: {e}")
        return SUMMARY_UNAVAILABLE


async def fill_missing_summaries(claude: ClaudeClient, articles: list[Article]) -> None:
    """Summarise, in place, every article still carrying the pending placeholder."""
    for article in articles:
        if article.summary == SUMMARY_PENDING:
            article.summary = await summarize_article(claude, article.url)


def is_political(article: Article) -> bool:
    text = f"{article.title or ''} {article.summary or ''}".lower()
    return any(keyword in text for keyword in POLITICAL_KEYWORDS)


def is_on_topic(article: Article) -> bool:
    return bool(
        _TOPIC_PATTERN.search(article.title or "")
        or _TOPIC_PATTERN.search(article.summary or "")
    )


def filter_articles(articles: list[Article]) -> list[Article]:
    """Keep on-topic, non-political articles that have a URL."""
    relevant = []

    for article in articles:
        if not article.url or not article.url.strip():
            logger.warning(f"Skipping article from {article.source} because it has no URL")
            continue

        if is_political(article):
            logger.warning(f"Skipping political article: {article.title or article.url}")
            continue

        if not is_on_topic(article):
            continue

        relevant.append(article)

    logger.info(f"{len(relevant)} relevant articles found")
    return relevant


def enforce_source_diversity(articles: list[Article], limit: int = TOP_N) -> list[Article]:
    """Pick up to `limit` articles, one per source first, then backfill in order."""
    selected: list[Article] = []
    used_sources = set()

    for article in articles:
        if len(selected) == limit:
            break
        if article.source not in used_sources:
            selected.append(article)
            used_sources.add(article.source)

    if len(selected) < limit:
        for article in articles:
            if len(selected) == limit:
                break
            if article.url not in {s.url for s in selected}:
                selected.append(article)

    logger.info(f"Final selected articles (diverse sources): {[a.source for a in selected]}")
    return selected


def format_candidates(articles: list[Article]) -> str:
    return "\n\n".join(
        f"Article {i + 1}:\nSource: {a.source}\nTitle: {a.title or ''}\nSummary: {a.summary}\nLink: {a.url}"
        for i, a in enumerate(articles)
    )


def parse_ranking(text: str, candidates: list[Article], limit: int = TOP_N) -> list[Article]:
    """Map "Article N" references in a ranking reply back to candidates.

    Out-of-range and repeated references are ignored.
    """
    ranked: list[Article] = []
    seen = set()

    for match in _ARTICLE_REF.finditer(text):
        index = int(match.group(1)) - 1
        if index in seen or not 0 <= index < len(candidates):
            continue
        seen.add(index)
        ranked.append(candidates[index])
        if len(ranked) == limit:
            break

    return ranked


async def rank_articles(claude: ClaudeClient, articles: list[Article]) -> list[Article]:
    """Have Claude pick the top articles; fall back to source diversity."""
    if not articles:
        return []

    candidates = articles[:RANK_CANDIDATE_LIMIT]

    try:
        reply = await claude.complete([
            {"role": "system", "content": RANK_PROMPT},
            {
                "role": "user",
                "content": f"Here are {len(candidates)} articles:\n\n{format_candidates(candidates)}\n\n"
                           f"Please rank the top {TOP_N} based strictly on AI, creative technology, and innovation."
            }
        ])
    except Exception as e:
        logger.error(f"Claude error while ranking articles: {e}")
        return enforce_source_diversity(candidates)

    logger.info(f"Ranking results:\n{reply}")

    ranked = parse_ranking(reply, candidates)
    if not ranked:
        logger.warning("No article references in ranking reply, using source diversity")
        return enforce_source_diversity(candidates)

    # Ranked picks first, remaining candidates as backfill for duplicate sources
    rest = [a for a in candidates if not any(a is r for r in ranked)]
    return enforce_source_diversity(ranked + rest)
