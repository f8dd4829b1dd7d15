"""Domain registry for channel- and mention-based routing."""

from domains.base import Domain


class DomainRegistry:
    """Central registry for all domains."""

    def __init__(self):
        self._domains: dict[int, Domain] = {}  # channel_id → domain
        self._by_name: dict[str, Domain] = {}  # name → domain
        self._mention_domain: Domain | None = None

    def register(self, domain: Domain, handles_mentions: bool = False) -> None:
        """Register a domain for each of its channels.

        A domain registered with handles_mentions also receives messages that
        mention the bot in any channel.
        """
        for channel_id in domain.channel_ids:
            self._domains[channel_id] = domain
        self._by_name[domain.name] = domain
        if handles_mentions:
            self._mention_domain = domain

    def get_by_channel(self, channel_id: int) -> Domain | None:
        """Get domain for a channel."""
        return self._domains.get(channel_id)

    def get_by_name(self, name: str) -> Domain | None:
        """Get domain by name."""
        return self._by_name.get(name)

    def all_domains(self) -> list[Domain]:
        """Get all registered domains."""
        return list(self._by_name.values())

    def route(self, message, bot_user_id: int) -> Domain | None:
        """Pick the domain for an inbound message; mentions win over channel."""
        if self._mention_domain and any(user.id == bot_user_id for user in message.mentions):
            return self._mention_domain
        return self.get_by_channel(message.channel.id)


# Global registry instance
registry = DomainRegistry()
