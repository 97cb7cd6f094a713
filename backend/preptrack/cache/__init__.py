"""In-memory caches shared across backend services."""

from .session_registry import LearnerSession, SessionRegistry, session_registry

__all__ = ["LearnerSession", "SessionRegistry", "session_registry"]
