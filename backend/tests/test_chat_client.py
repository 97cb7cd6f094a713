"""Tests for the OpenAI chat reply client."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List

import pytest
from openai import OpenAIError

from preptrack.config import Settings
from preptrack.errors import TransportError
from preptrack.chat_client import OpenAIChatClient


class _FakeResponses:
    def __init__(self, output_text: Any = "Use STAR for HR answers.", error: Exception | None = None) -> None:
        self.output_text = output_text
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(output_text=self.output_text)


def _client(responses: _FakeResponses) -> OpenAIChatClient:
    fake_openai = SimpleNamespace(responses=responses)
    return OpenAIChatClient(Settings(chat_model="test-model"), client=fake_openai)  # type: ignore[arg-type]


@pytest.mark.anyio
async def test_reply_sends_only_current_turn_with_instruction() -> None:
    responses = _FakeResponses()

    reply = await _client(responses).generate_chat_reply("How do I prep for HR?", "Be concise.")

    assert reply == "Use STAR for HR answers."
    assert responses.calls == [
        {"model": "test-model", "instructions": "Be concise.", "input": "How do I prep for HR?"}
    ]


@pytest.mark.anyio
async def test_missing_output_text_returns_empty() -> None:
    reply = await _client(_FakeResponses(output_text=None)).generate_chat_reply("hi", "sys")

    assert reply == ""


@pytest.mark.anyio
async def test_openai_error_is_wrapped() -> None:
    responses = _FakeResponses(error=OpenAIError("rate limited"))

    with pytest.raises(TransportError, match="rate limited"):
        await _client(responses).generate_chat_reply("hi", "sys")


@pytest.mark.anyio
async def test_reply_text_is_returned_unchanged() -> None:
    reply = await _client(_FakeResponses(output_text="  Line one.\n\nLine two.\n")).generate_chat_reply("hi", "sys")

    assert reply == "  Line one.\n\nLine two.\n"
