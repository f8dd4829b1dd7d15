"""News domain implementation."""

from domains.base import Domain, ScheduledTask
from .config import CHANNEL_ID
from .schedules import SCHEDULES
from .services import DigestContext


class NewsDomain(Domain):
    """Daily creative-tech news digest."""

    def __init__(self, context: DigestContext):
        self.context = context

    @property
    def name(self) -> str:
        return "news"

    @property
    def channel_ids(self) -> list[int]:
        return [CHANNEL_ID]

    @property
    def schedules(self) -> list[ScheduledTask]:
        return SCHEDULES
