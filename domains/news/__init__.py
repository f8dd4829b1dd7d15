"""News domain - scraping, curation and the daily digest."""

from .domain import NewsDomain
from .config import CHANNEL_ID

__all__ = ["NewsDomain", "CHANNEL_ID"]
