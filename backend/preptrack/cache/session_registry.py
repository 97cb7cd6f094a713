"""Process-local registry of per-learner dashboard sessions."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Callable, Dict, Optional

from ..chat_assistant import ChatAssistantController
from ..motivation import MotivationOrchestrator


def _normalize_name(display_name: str) -> str:
    normalized = display_name.strip().lower()
    if not normalized:
        raise ValueError("Learner name cannot be empty when resolving a dashboard session.")
    return normalized


@dataclass
class LearnerSession:
    display_name: str
    motivation: MotivationOrchestrator
    chat: ChatAssistantController


SessionFactory = Callable[[str], LearnerSession]


class SessionRegistry:
    """Volatile store: sessions live only as long as the process."""

    def __init__(self, factory: Optional[SessionFactory] = None) -> None:
        self._factory = factory
        self._entries: Dict[str, LearnerSession] = {}
        self._lock = RLock()

    @property
    def configured(self) -> bool:
        return self._factory is not None

    def configure(self, factory: SessionFactory) -> None:
        with self._lock:
            self._factory = factory

    def get_or_create(self, display_name: str) -> LearnerSession:
        key = _normalize_name(display_name)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                return entry
            if self._factory is None:
                raise RuntimeError("Session registry has no factory configured.")
            entry = self._factory(display_name.strip())
            self._entries[key] = entry
            return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


session_registry = SessionRegistry()

__all__ = ["LearnerSession", "SessionFactory", "SessionRegistry", "session_registry"]
