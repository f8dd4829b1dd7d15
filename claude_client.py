"""Thin Claude API client for summaries, rankings and chat replies."""

import anthropic

from logger import logger


class ClaudeClient:
    """Claude API client taking role-tagged message lists."""

    def __init__(self, api_key: str | None, model: str = "claude-sonnet-4-20250514"):
        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model

    async def complete(self, messages: list[dict], max_tokens: int = 1024) -> str:
        """
        Send a conversation and return the generated text.

        Args:
            messages: Role-tagged messages. Any "system" entries are joined
                into the system prompt; the rest are sent in order.
            max_tokens: Generation limit

        Returns:
            Text of the model's reply

        Raises:
            anthropic.APIError: on any API failure (logged first)
            ValueError: when no user/assistant messages remain
        """
        system_parts = [m["content"] for m in messages if m["role"] == "system"]
        conversation = [
            {"role": m["role"], "content": m["content"]}
            for m in messages
            if m["role"] in ("user", "assistant")
        ]

        # Claude wants the exchange to open and close on a user turn
        while conversation and conversation[0]["role"] != "user":
            conversation = conversation[1:]
        while conversation and conversation[-1]["role"] != "user":
            conversation = conversation[:-1]

        if not conversation:
            raise ValueError("No user message to respond to")

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                system="\n\n".join(system_parts) if system_parts else anthropic.NOT_GIVEN,
                messages=conversation
            )
        except anthropic.APIError as e:
            logger.error(f"Claude API error: {e}")
            raise

        text_blocks = [b.text for b in response.content if b.type == "text"]
        return "\n".join(text_blocks)
