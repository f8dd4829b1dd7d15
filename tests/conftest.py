"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import Mock, AsyncMock, patch

from domains.chat.persona import Persona
from domains.news.models import Article
from domains.news.services.store import JsonArticleStore
from helpers import make_author


@pytest.fixture
def mock_discord_bot():
    """Create a mock Discord bot."""
    bot = Mock()
    bot.get_channel = Mock(return_value=Mock(send=AsyncMock()))
    bot.fetch_channel = AsyncMock()
    bot.user = make_author(999, "CuratorBot", bot=True)
    return bot


@pytest.fixture
def mock_claude():
    """ClaudeClient stand-in with an awaitable complete()."""
    claude = Mock()
    claude.complete = AsyncMock(return_value="")
    return claude


@pytest.fixture
def mock_anthropic_client():
    """Create a mock Anthropic client."""
    with patch('anthropic.AsyncAnthropic') as mock:
        client = Mock()
        client.messages.create = AsyncMock()
        mock.return_value = client
        yield client


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client


@pytest.fixture
def store(tmp_path):
    """Empty JSON-backed article store in a temp dir."""
    s = JsonArticleStore(tmp_path / "shared_articles.json")
    s.load()
    return s


@pytest.fixture
def persona():
    return Persona(
        role="You are a creative technologist.",
        persona={"name": "Pixel"},
        interactions=[{"user": "hi", "assistant": "hey!"}]
    )


@pytest.fixture
def make_article():
    def _make(source="Wired", n=1, title=None, summary=None):
        return Article(
            source=source,
            url=f"https://example.com/{source.lower().replace(' ', '-')}/{n}",
            title=title or f"{source} story {n}",
            summary=summary or f"A new AI tool from {source} helps artists make videos."
        )
    return _make
