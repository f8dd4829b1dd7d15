"""Domain modules for the news curator bot."""

from .base import Domain, ScheduledTask

__all__ = ["Domain", "ScheduledTask"]
