"""Base domain class and supporting types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from apscheduler.schedulers.asyncio import AsyncIOScheduler


@dataclass
class ScheduledTask:
    """Cron-style scheduled task."""

    name: str
    handler: Callable
    hour: int
    minute: int = 0
    day_of_week: str = "*"  # "*" = daily, "mon-fri" = weekdays, etc.
    timezone: str = "UTC"


class Domain(ABC):
    """Base class for all domains."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Domain identifier."""
        pass

    @property
    @abstractmethod
    def channel_ids(self) -> list[int]:
        """Discord channels this domain handles."""
        pass

    @property
    def schedules(self) -> list[ScheduledTask]:
        """Scheduled tasks (optional, default empty)."""
        return []

    async def handle_message(self, message, bot) -> None:
        """Respond to an inbound message routed to this domain (optional)."""
        return None

    def register_schedules(self, scheduler: AsyncIOScheduler, bot) -> None:
        """Register all scheduled tasks with the scheduler."""
        for task in self.schedules:
            scheduler.add_job(
                task.handler,
                'cron',
                args=[bot, self],
                hour=task.hour,
                minute=task.minute,
                day_of_week=task.day_of_week,
                timezone=task.timezone,
                id=f"{self.name}_{task.name}"
            )
