from __future__ import annotations

import pytest

from preptrack.cache import session_registry
from preptrack.telemetry import clear_listeners


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_process_state():
    yield
    clear_listeners()
    session_registry.clear()
