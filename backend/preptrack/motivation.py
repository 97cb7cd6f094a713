"""Motivation feed backed by one throwaway on-demand session per fetch."""

from __future__ import annotations

import logging
from typing import Optional

from .config import Settings, get_settings
from .constants import (
    MOTIVATION_EMPTY_FALLBACK,
    MOTIVATION_ERROR_FALLBACK,
    MOTIVATION_PLACEHOLDER,
    MOTIVATION_PROMPT,
    MOTIVATION_QUERY,
)
from .on_demand import QueryOptions, SessionTransport
from .telemetry import emit_event

logger = logging.getLogger(__name__)


class MotivationOrchestrator:
    """Fetches a short motivational quote for the current learner.

    Refreshes are not serialized: overlapping calls all run to completion and the last
    one to settle overwrites ``motivation_text``. Every write of the text goes through
    ``_apply_motivation``.
    """

    def __init__(
        self,
        transport: SessionTransport,
        credential: str,
        *,
        display_name: str = "",
        options: Optional[QueryOptions] = None,
    ) -> None:
        self._transport = transport
        self._credential = credential
        self._display_name = display_name
        self._options = options or QueryOptions(
            fulfillment_prompt=MOTIVATION_PROMPT,
            temperature=0.6,
            max_tokens=50,
        )
        self._motivation_text = MOTIVATION_PLACEHOLDER
        self._is_loading = False
        self._mounted_for: Optional[str] = None

    @classmethod
    def from_settings(
        cls,
        transport: SessionTransport,
        settings: Optional[Settings] = None,
        *,
        display_name: str = "",
    ) -> "MotivationOrchestrator":
        resolved = settings or get_settings()
        options = QueryOptions(
            fulfillment_prompt=MOTIVATION_PROMPT,
            temperature=resolved.motivation_temperature,
            max_tokens=resolved.motivation_max_tokens,
        )
        return cls(transport, resolved.motivation_api_key, display_name=display_name, options=options)

    @property
    def motivation_text(self) -> str:
        return self._motivation_text

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def display_name(self) -> str:
        return self._display_name

    def _apply_motivation(self, text: str) -> None:
        self._motivation_text = text

    async def set_learner(self, display_name: str) -> bool:
        """Refresh once when the learner identity changes. Returns True if a refresh ran."""
        if display_name == self._mounted_for:
            return False
        self._mounted_for = display_name
        self._display_name = display_name
        await self.refresh()
        return True

    async def refresh(self) -> str:
        self._is_loading = True
        display_name = self._display_name
        try:
            session_id = await self._transport.create_session(display_name, self._credential)
            quote = await self._transport.query(session_id, MOTIVATION_QUERY, self._credential, self._options)
            if quote:
                self._apply_motivation(quote)
                emit_event("motivation_refreshed", learner=display_name, length=len(quote))
            else:
                logger.warning("Motivation query for %s returned an empty reply", display_name)
                emit_event("motivation_empty", learner=display_name)
                self._apply_motivation(MOTIVATION_EMPTY_FALLBACK)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Motivation fetch failed for %s", display_name, exc_info=exc)
            emit_event("motivation_failed", learner=display_name, error=str(exc))
            self._apply_motivation(MOTIVATION_ERROR_FALLBACK)
        finally:
            self._is_loading = False
        return self._motivation_text


__all__ = ["MotivationOrchestrator"]
