"""Global configuration for the news curator bot."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Discord
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")

# Claude API
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
CLAUDE_MODEL = os.getenv("CLAUDE_MODEL", "claude-sonnet-4-20250514")

# Persistence
SHARED_ARTICLES_FILE = Path(os.getenv("SHARED_ARTICLES_FILE", "shared_articles.json"))
PERSONALITY_FILE = Path(os.getenv("PERSONALITY_FILE", "personality.json"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOCALAPPDATA", ".")) / "news-curator" / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)
