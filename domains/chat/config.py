"""Chat domain configuration."""

import os

CHANNEL_IDS = [
    int(channel_id)
    for channel_id in os.getenv("CHAT_CHANNEL_IDS", "942424044790231070").split(",")
    if channel_id.strip()
]

# Messages starting with this are neither answered nor used as context
IGNORE_PREFIX = "!"

HISTORY_LIMIT = 10
DISCORD_MESSAGE_LIMIT = 2000

APOLOGY = "I'm having some trouble with the AI service. Try again in a moment."
