"""News Curator - Main Bot.

A Discord bot that chats in character in its chat channels and posts a
daily digest of creative-tech news to its news channel.
"""

import discord
from discord.ext import commands
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from claude_client import ClaudeClient
from registry import registry
from logger import logger
from config import (
    DISCORD_TOKEN,
    ANTHROPIC_API_KEY,
    CLAUDE_MODEL,
    SHARED_ARTICLES_FILE,
    PERSONALITY_FILE,
)

from domains.chat import ChatDomain, Persona
from domains.news import NewsDomain
from domains.news.config import SOURCES
from domains.news.schedules import daily_digest
from domains.news.services import DigestContext, JsonArticleStore

# Initialize bot
intents = discord.Intents.default()
intents.message_content = True
intents.members = True
bot = commands.Bot(command_prefix="/", intents=intents)

# Initialize scheduler
scheduler = AsyncIOScheduler()

# on_ready fires again after reconnects; only the first one starts things
_started = False


def build_domains() -> None:
    """Load persisted state and register all domains."""
    claude = ClaudeClient(api_key=ANTHROPIC_API_KEY, model=CLAUDE_MODEL)

    store = JsonArticleStore(SHARED_ARTICLES_FILE)
    store.load()

    persona = Persona.load(PERSONALITY_FILE)

    registry.register(NewsDomain(DigestContext(store=store, claude=claude, sources=SOURCES)))
    registry.register(ChatDomain(persona, claude), handles_mentions=True)


@bot.event
async def on_ready():
    """Called when bot is connected and ready."""
    global _started
    logger.info(f"Logged in as {bot.user}")

    if _started:
        return
    _started = True

    for domain in registry.all_domains():
        domain.register_schedules(scheduler, bot)
        logger.info(f"Registered domain: {domain.name} (channels: {domain.channel_ids})")

    scheduler.start()
    logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")

    # Run once on startup as well as on the daily schedule
    news = registry.get_by_name("news")
    if news:
        await daily_digest(bot, news)


@bot.event
async def on_message(message):
    """Route inbound messages to their domain."""
    if message.author.bot:
        return

    domain = registry.route(message, bot.user.id)
    if not domain:
        # Silently ignore messages in unregistered channels
        return

    try:
        await domain.handle_message(message, bot)
    except Exception as e:
        logger.error(f"Error handling message in {domain.name}: {e}")


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.error(f"Bot error in {event}: {args}")


def main():
    """Entry point."""
    if not DISCORD_TOKEN:
        logger.error("DISCORD_TOKEN not set")
        return
    if not ANTHROPIC_API_KEY:
        logger.error("ANTHROPIC_API_KEY not set")
        return

    try:
        build_domains()
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Failed to load configuration: {e}")
        return

    logger.info("Starting News Curator...")
    # Logging is already configured in logger.py
    bot.run(DISCORD_TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
