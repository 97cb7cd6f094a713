"""Site assistant conversation with single-flight request dispatch."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .chat_client import ChatReplyFn
from .constants import CHAT_EMPTY_FALLBACK, CHAT_ERROR_FALLBACK, CHAT_SYSTEM_INSTRUCTION
from .models import ChatMessage
from .telemetry import emit_event

logger = logging.getLogger(__name__)

AppendListener = Callable[[ChatMessage], None]


class ChatAssistantController:
    """Owns an append-only conversation log and at most one in-flight reply request.

    Each turn is sent upstream on its own; earlier messages only exist in ``history``.
    ``on_append`` runs after a message is visible in ``history``, which is where the
    view scrolls to the latest entry.
    """

    def __init__(
        self,
        reply_fn: ChatReplyFn,
        *,
        system_instruction: str = CHAT_SYSTEM_INSTRUCTION,
        on_append: Optional[AppendListener] = None,
    ) -> None:
        self._reply_fn = reply_fn
        self._system_instruction = system_instruction
        self._on_append = on_append
        self._history: List[ChatMessage] = []
        self._is_sending = False
        self._is_open = False
        self.draft_input = ""

    @property
    def history(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._history)

    @property
    def is_sending(self) -> bool:
        return self._is_sending

    @property
    def is_open(self) -> bool:
        return self._is_open

    def toggle(self) -> bool:
        self._is_open = not self._is_open
        return self._is_open

    def _append(self, message: ChatMessage) -> None:
        self._history.append(message)
        if self._on_append is not None:
            try:
                self._on_append(message)
            except Exception:  # noqa: BLE001
                logger.exception("Chat append listener failed")

    async def send_message(self, draft: Optional[str] = None) -> bool:
        """Dispatch the draft as one turn. Returns False when the call is a no-op."""
        text = self.draft_input if draft is None else draft
        if not text.strip() or self._is_sending:
            return False

        self._append(ChatMessage(role="user", text=text))
        self.draft_input = ""
        self._is_sending = True
        try:
            reply = await self._reply_fn(text, self._system_instruction)
            if reply:
                emit_event("chat_reply_received", length=len(reply))
                self._append(ChatMessage(role="assistant", text=reply))
            else:
                logger.warning("Chat assistant returned an empty reply")
                emit_event("chat_reply_empty")
                self._append(ChatMessage(role="assistant", text=CHAT_EMPTY_FALLBACK))
        except Exception as exc:  # noqa: BLE001
            logger.exception("Chat reply failed", exc_info=exc)
            emit_event("chat_reply_failed", error=str(exc))
            self._append(ChatMessage(role="assistant", text=CHAT_ERROR_FALLBACK))
        finally:
            self._is_sending = False
        return True


__all__ = ["AppendListener", "ChatAssistantController"]
