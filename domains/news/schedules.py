"""News domain scheduled tasks."""

from domains.base import ScheduledTask
from .services import run_digest
from .config import CHANNEL_ID

from logger import logger


async def daily_digest(bot, domain):
    """Post the daily creative-tech news digest."""
    channel = bot.get_channel(CHANNEL_ID)
    if not channel:
        try:
            channel = await bot.fetch_channel(CHANNEL_ID)
        except Exception as e:
            logger.error(f"Could not find news channel {CHANNEL_ID}: {e}")
            return

    try:
        posted = await run_digest(channel, domain.context)
        logger.info(f"Daily digest finished, {len(posted)} articles posted")
    except Exception as e:
        logger.error(f"Failed to post daily digest: {e}")


SCHEDULES = [
    ScheduledTask(
        name="daily_digest",
        handler=daily_digest,
        hour=9,
        minute=0,
        timezone="UTC"
    )
]
