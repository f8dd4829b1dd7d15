"""Shared test doubles for Discord objects."""

from unittest.mock import Mock, AsyncMock, MagicMock


class AsyncIter:
    """Async iterator over a list, standing in for channel.history()."""

    def __init__(self, items):
        self._items = list(items)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._items:
            raise StopAsyncIteration
        return self._items.pop(0)


def make_author(user_id: int, name: str, bot: bool = False):
    author = Mock(id=user_id, bot=bot)
    author.name = name  # `name` is reserved in the Mock constructor
    return author


def make_message(content: str, author, channel_id: int = 942424044790231070, mentions=None):
    message = Mock(content=content, author=author, mentions=mentions or [])
    message.channel = MagicMock(id=channel_id)
    message.reply = AsyncMock()
    return message


class FakeClock:
    """Monotonic clock whose sleep just advances time."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.now += seconds
