"""Structured diagnostics for the motivation feed and site assistant.

Empty replies and transport failures both end in fallback copy on screen; the events
emitted here keep the two cases apart in the logs.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from threading import RLock
from typing import Any, Callable, Dict, Iterator, List

logger = logging.getLogger("preptrack.telemetry")

KNOWN_EVENTS = frozenset(
    {
        "motivation_refreshed",
        "motivation_empty",
        "motivation_failed",
        "chat_reply_received",
        "chat_reply_empty",
        "chat_reply_failed",
    }
)


@dataclass(frozen=True)
class TelemetryEvent:
    name: str
    payload: Dict[str, Any]

    @property
    def feature(self) -> str:
        return self.name.split("_", 1)[0]


Listener = Callable[[TelemetryEvent], None]

_listeners: List[Listener] = []
_lock = RLock()


def register_listener(listener: Listener) -> None:
    with _lock:
        _listeners.append(listener)


def unregister_listener(listener: Listener) -> None:
    with _lock:
        if listener in _listeners:
            _listeners.remove(listener)


def clear_listeners() -> None:
    with _lock:
        _listeners.clear()


@contextmanager
def capture_events() -> Iterator[List[TelemetryEvent]]:
    """Collect every event emitted inside the block."""
    captured: List[TelemetryEvent] = []
    register_listener(captured.append)
    try:
        yield captured
    finally:
        unregister_listener(captured.append)


def emit_event(name: str, **fields: Any) -> None:
    if name not in KNOWN_EVENTS:
        logger.warning("Emitting unregistered telemetry event %s", name)
    event = TelemetryEvent(name=name, payload={key: _jsonable(value) for key, value in fields.items()})

    with _lock:
        listeners = list(_listeners)

    for listener in listeners:
        try:
            listener(event)
        except Exception:  # noqa: BLE001
            logger.exception("Telemetry listener failed for %s", name)

    logger.info("TELEMETRY %s", json.dumps({"event": name, **event.payload}, default=str))


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return value


__all__ = [
    "KNOWN_EVENTS",
    "TelemetryEvent",
    "capture_events",
    "clear_listeners",
    "emit_event",
    "register_listener",
    "unregister_listener",
]
