"""Record of article URLs already posted to the news channel.

The pipeline only talks to the ArticleStore interface, so the JSON file
backend can be swapped for a database without touching collection or
publishing code.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path

from logger import logger


class ArticleStore(ABC):
    """Dedup store of posted article URLs."""

    @abstractmethod
    def load(self) -> None:
        """Load persisted state."""

    @abstractmethod
    def contains(self, url: str) -> bool:
        """True if the URL has been posted before."""

    @abstractmethod
    def append(self, url: str) -> None:
        """Record a posted URL in memory."""

    @abstractmethod
    def persist(self) -> None:
        """Write current state to durable storage."""


class JsonArticleStore(ArticleStore):
    """Store backed by a JSON array of URL strings.

    Appends are not deduplicated; the whole file is rewritten on persist.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._urls: list[str] = []

    @property
    def urls(self) -> list[str]:
        return list(self._urls)

    def load(self) -> None:
        if not self.path.exists():
            logger.info(f"No article history at {self.path}, starting empty")
            self._urls = []
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read article history {self.path}: {e}")
            self._urls = []
            return

        if not isinstance(data, list):
            logger.error(f"Article history {self.path} is not a JSON array, ignoring")
            self._urls = []
            return

        self._urls = [str(url) for url in data]
        logger.info(f"Loaded {len(self._urls)} previously shared articles")

    def contains(self, url: str) -> bool:
        return url in self._urls

    def append(self, url: str) -> None:
        self._urls.append(url)

    def persist(self) -> None:
        self.path.write_text(json.dumps(self._urls, indent=2), encoding="utf-8")
