"""Shared test fixtures for the jsonresp test suite."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from jsonresp.config.settings import get_settings
from jsonresp.sink import RecordingSink


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def fresh_settings():
    """Drop the cached settings so env changes made by the test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class FailingSink(RecordingSink):
    """Sink whose body write blows up after the status is committed."""

    def write(self, data: bytes) -> None:
        raise ConnectionResetError("peer went away")


class CallLog:
    """Sink that only records which methods were called, in order."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def set_header(self, key: str, value: str) -> None:
        self.calls.append("set_header")

    def write_status(self, code: int) -> None:
        self.calls.append("write_status")

    def write(self, data: bytes) -> None:
        self.calls.append("write")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


# ---------------------------------------------------------------------------
# Payload types
# ---------------------------------------------------------------------------

class Item(BaseModel):
    id: int
    name: str = ""


@pytest.fixture
def item_model() -> type[BaseModel]:
    return Item
