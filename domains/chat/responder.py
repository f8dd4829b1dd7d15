"""Persona chat replies built from recent channel history."""

import re

from claude_client import ClaudeClient
from logger import logger
from .config import APOLOGY, DISCORD_MESSAGE_LIMIT, HISTORY_LIMIT, IGNORE_PREFIX
from .persona import Persona


def is_ignored(message) -> bool:
    """Messages opting out of the conversation with the ignore prefix."""
    return (message.content or "").startswith(IGNORE_PREFIX)


def should_respond(message, bot_user, channel_ids: list[int]) -> bool:
    """True for human, non-ignored messages in a chat channel or mentioning the bot."""
    if message.author.bot or is_ignored(message):
        return False
    if message.channel.id in channel_ids:
        return True
    return any(user.id == bot_user.id for user in message.mentions)


def clean_username(name: str) -> str:
    return re.sub(r"[^\w]", "", re.sub(r"\s+", "_", name))


def build_conversation(persona: Persona, history: list, bot_user_id: int) -> list[dict]:
    """System persona message followed by chronological channel history.

    Other bots' messages and ignore-prefixed messages are left out.
    """
    conversation = [{"role": "system", "content": persona.system_prompt}]

    for msg in history:
        if msg.author.bot and msg.author.id != bot_user_id:
            continue
        if is_ignored(msg):
            continue

        username = clean_username(msg.author.name)
        if msg.author.id == bot_user_id:
            conversation.append({"role": "assistant", "name": username, "content": msg.content})
        else:
            conversation.append({"role": "user", "name": username, "content": f"{username}: {msg.content}"})

    return conversation


def chunk_reply(text: str, limit: int = DISCORD_MESSAGE_LIMIT) -> list[str]:
    """Split text into consecutive pieces of at most `limit` characters."""
    return [text[i:i + limit] for i in range(0, len(text), limit)]


async def fetch_recent_messages(channel, limit: int = HISTORY_LIMIT) -> list:
    """Last `limit` channel messages, oldest first."""
    messages = [msg async for msg in channel.history(limit=limit)]
    messages.reverse()
    return messages


async def respond(message, bot_user, persona: Persona, claude: ClaudeClient) -> None:
    """Reply to `message` in character, splitting long replies."""
    async with message.channel.typing():
        history = await fetch_recent_messages(message.channel)
        conversation = build_conversation(persona, history, bot_user.id)
        logger.info(f"Chat message in #{message.channel}: {len(conversation) - 1} messages of context")

        try:
            reply = await claude.complete(conversation)
        except Exception as e:
            logger.error(f"Error generating chat reply: {e}")
            reply = None

    if reply is None:
        await message.reply(APOLOGY)
        return

    for chunk in chunk_reply(reply):
        await message.reply(chunk)

    logger.info(f"Response sent ({len(reply)} chars)")
