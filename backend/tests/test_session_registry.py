from __future__ import annotations

import pytest

from preptrack.cache import LearnerSession, SessionRegistry
from preptrack.chat_assistant import ChatAssistantController
from preptrack.motivation import MotivationOrchestrator


class _NullTransport:
    async def create_session(self, display_name: str, credential: str) -> str:
        return "sess"

    async def query(self, session_id, user_text, credential, options) -> str:
        return ""


async def _reply(user_text: str, system_instruction: str) -> str:
    return ""


def _factory(name: str) -> LearnerSession:
    return LearnerSession(
        display_name=name,
        motivation=MotivationOrchestrator(_NullTransport(), "key", display_name=name),
        chat=ChatAssistantController(_reply),
    )


def test_get_or_create_normalizes_names() -> None:
    registry = SessionRegistry(_factory)

    first = registry.get_or_create("  Asha ")
    second = registry.get_or_create("asha")

    assert first is second
    assert first.display_name == "Asha"
    assert len(registry) == 1


def test_clear_drops_every_session() -> None:
    registry = SessionRegistry(_factory)
    first = registry.get_or_create("Asha")
    registry.get_or_create("Ravi")

    registry.clear()

    assert len(registry) == 0
    assert registry.get_or_create("Asha") is not first


def test_empty_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        SessionRegistry(_factory).get_or_create("   ")


def test_missing_factory_raises() -> None:
    registry = SessionRegistry()

    assert registry.configured is False
    with pytest.raises(RuntimeError):
        registry.get_or_create("Asha")
