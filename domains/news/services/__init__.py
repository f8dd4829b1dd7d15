"""News domain services."""

from .store import ArticleStore, JsonArticleStore
from .feeds import collect_articles
from .pipeline import DigestContext, run_digest

__all__ = ["ArticleStore", "JsonArticleStore", "collect_articles", "DigestContext", "run_digest"]
