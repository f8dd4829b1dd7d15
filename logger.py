"""Logging configuration for the news curator bot.

The bot's own logger and discord.py's "discord" logger share the same
handlers, so gateway reconnects and rate-limit warnings land in the dated
log file next to digest and chat activity.
"""

import logging
import sys
from datetime import datetime

from config import LOG_DIR, LOG_LEVEL

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _build_handlers(level: int) -> list[logging.Handler]:
    log_file = LOG_DIR / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handlers: list[logging.Handler] = [file_handler]

    # Console only when attached to a terminal
    if sys.stdout is not None and sys.stdout.isatty():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        handlers.append(console_handler)

    return handlers


def setup_logging() -> logging.Logger:
    """Configure the bot logger and attach discord.py's logger to it."""
    level = logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handlers = _build_handlers(level)

    logger = logging.getLogger("news_curator")
    discord_logger = logging.getLogger("discord")

    for target, target_level in ((logger, level), (discord_logger, max(level, logging.INFO))):
        target.setLevel(target_level)
        target.handlers.clear()
        for handler in handlers:
            target.addHandler(handler)
        target.propagate = False

    return logger


logger = setup_logging()
