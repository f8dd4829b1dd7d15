"""Chat domain implementation."""

from claude_client import ClaudeClient
from domains.base import Domain
from .config import CHANNEL_IDS
from .persona import Persona
from .responder import respond, should_respond


class ChatDomain(Domain):
    """Conversational persona for the chat channels and direct mentions."""

    def __init__(self, persona: Persona, claude: ClaudeClient):
        self.persona = persona
        self.claude = claude

    @property
    def name(self) -> str:
        return "chat"

    @property
    def channel_ids(self) -> list[int]:
        return CHANNEL_IDS

    async def handle_message(self, message, bot) -> None:
        if not should_respond(message, bot.user, self.channel_ids):
            return
        await respond(message, bot.user, self.persona, self.claude)
