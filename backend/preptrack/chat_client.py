"""OpenAI-backed reply generation for the site assistant."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from openai import AsyncOpenAI, OpenAIError

from .config import Settings, get_settings
from .errors import TransportError

logger = logging.getLogger(__name__)

ChatReplyFn = Callable[[str, str], Awaitable[str]]


class OpenAIChatClient:
    """Stateless single-turn chat: only the current user text is sent upstream."""

    def __init__(self, settings: Optional[Settings] = None, *, client: Optional[AsyncOpenAI] = None) -> None:
        resolved = settings or get_settings()
        self.model = resolved.chat_model
        self._api_key = resolved.openai_api_key
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            try:
                self._client = AsyncOpenAI(api_key=self._api_key) if self._api_key else AsyncOpenAI()
            except OpenAIError as exc:
                raise TransportError(f"OpenAI client is not configured: {exc}") from exc
        return self._client

    async def generate_chat_reply(self, user_text: str, system_instruction: str) -> str:
        client = self._get_client()
        try:
            response = await client.responses.create(
                model=self.model,
                instructions=system_instruction,
                input=user_text,
            )
        except OpenAIError as exc:
            raise TransportError(f"Chat reply request failed: {exc}") from exc
        return getattr(response, "output_text", None) or ""


__all__ = ["ChatReplyFn", "OpenAIChatClient"]
