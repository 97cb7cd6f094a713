"""HTTP client for the on-demand chat sessions that back the motivation feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

import httpx

from .config import Settings, get_settings
from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryOptions:
    fulfillment_prompt: str
    temperature: float
    max_tokens: int

    def __post_init__(self) -> None:
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError("temperature must be within [0, 1]")
        if self.max_tokens < 1:
            raise ValueError("max_tokens must be positive")


class SessionTransport(Protocol):
    async def create_session(self, display_name: str, credential: str) -> str: ...

    async def query(self, session_id: str, user_text: str, credential: str, options: QueryOptions) -> str: ...


def _data_field(body: Any, key: str) -> Any:
    if not isinstance(body, dict):
        raise TransportError(f"On-demand API returned a non-object payload: {type(body).__name__}")
    data = body.get("data")
    if not isinstance(data, dict):
        raise TransportError("On-demand API payload is missing the 'data' object.")
    return data.get(key)


class OnDemandClient:
    """Creates short-lived chat sessions and issues single synchronous queries."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        resolved = settings or get_settings()
        self.base_url = resolved.on_demand_base_url.rstrip("/")
        self.endpoint_id = resolved.on_demand_endpoint_id
        self.timeout_seconds = resolved.on_demand_timeout_seconds
        self._client = client

    def _headers(self, credential: str) -> Dict[str, str]:
        return {
            "apikey": credential,
            "Content-Type": "application/json",
        }

    async def _post(self, path: str, credential: str, payload: Dict[str, Any]) -> Any:
        client = self._client or httpx.AsyncClient(timeout=self.timeout_seconds)
        close_client = self._client is None
        try:
            response = await client.post(f"{self.base_url}{path}", headers=self._headers(credential), json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"On-demand call to {path} failed with status {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"On-demand call to {path} failed: {exc}") from exc
        finally:
            if close_client:
                await client.aclose()

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"On-demand call to {path} returned invalid JSON: {exc}") from exc

    async def create_session(self, display_name: str, credential: str) -> str:
        body = await self._post(
            "/chat/v1/sessions",
            credential,
            {"pluginIds": [], "externalUserId": display_name},
        )
        session_id = _data_field(body, "id")
        if not isinstance(session_id, str) or not session_id:
            raise TransportError("On-demand API did not return a session id.")
        logger.debug("Created on-demand session %s for %s", session_id, display_name)
        return session_id

    async def query(self, session_id: str, user_text: str, credential: str, options: QueryOptions) -> str:
        body = await self._post(
            f"/chat/v1/sessions/{session_id}/query",
            credential,
            {
                "endpointId": self.endpoint_id,
                "query": user_text,
                "pluginIds": [],
                "responseMode": "sync",
                "modelConfigs": {
                    "fulfillmentPrompt": options.fulfillment_prompt,
                    "temperature": options.temperature,
                    "maxTokens": options.max_tokens,
                },
            },
        )
        answer = _data_field(body, "answer")
        if answer is None:
            return ""
        return str(answer)


__all__ = ["OnDemandClient", "QueryOptions", "SessionTransport"]
