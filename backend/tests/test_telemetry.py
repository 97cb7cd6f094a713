from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

import pytest

from preptrack.logging_config import JSONFormatter, configure_logging
from preptrack.telemetry import capture_events, emit_event, register_listener


def test_capture_events_collects_and_detaches() -> None:
    with capture_events() as events:
        emit_event("chat_reply_empty")
    emit_event("chat_reply_received", length=3)

    assert [event.name for event in events] == ["chat_reply_empty"]
    assert events[0].feature == "chat"


def test_payload_values_are_json_friendly() -> None:
    stamp = datetime(2024, 5, 1, tzinfo=timezone.utc)

    with capture_events() as events:
        emit_event("motivation_failed", at=stamp, tags={"b", "a"})

    assert events[0].payload == {"at": stamp.isoformat(), "tags": ["a", "b"]}


def test_failing_listener_does_not_block_others() -> None:
    def broken(event) -> None:
        raise RuntimeError("listener bug")

    register_listener(broken)
    with capture_events() as events:
        emit_event("motivation_refreshed", length=12)

    assert len(events) == 1


def test_unknown_event_is_flagged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="preptrack.telemetry"):
        emit_event("made_up_event")

    assert "unregistered telemetry event made_up_event" in caplog.text


def test_json_formatter_emits_structured_line() -> None:
    record = logging.LogRecord("preptrack.motivation", logging.WARNING, __file__, 1, "empty reply for %s", ("Asha",), None)

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "preptrack.motivation"
    assert payload["message"] == "empty reply for Asha"


def test_configure_logging_quiets_http_clients(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PREPTRACK_LOG_LEVEL", "debug")
    monkeypatch.delenv("PREPTRACK_DEBUG_HTTP", raising=False)

    configure_logging()

    assert logging.getLogger("preptrack").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
