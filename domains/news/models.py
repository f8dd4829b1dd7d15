"""News domain data types."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class SourceKind(Enum):
    """How a source is collected."""
    FEED = "feed"    # RSS/Atom
    PAGE = "page"    # HTML scraped with CSS selectors


@dataclass(frozen=True)
class SourceDescriptor:
    """A static news source."""
    name: str
    url: str
    kind: SourceKind


@dataclass
class Article:
    """A candidate article. Identity is the URL."""
    source: str
    url: str
    title: Optional[str] = None
    summary: Optional[str] = None
    published: Optional[datetime] = None
