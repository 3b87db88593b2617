"""Shared test fixtures for all test modules."""

import pytest

from lumbersend.adapters.transport.in_memory import InMemoryTransport
from lumbersend.client import LogSender
from lumbersend.core import records
from lumbersend.core.generator import TrafficGenerator

FIXED_TIMESTAMP = "2024-03-01T12:00:00+00:00"


@pytest.fixture
def transport() -> InMemoryTransport:
    """Provide an empty in-memory transport."""
    return InMemoryTransport(address="localhost:5044")


@pytest.fixture
def sender(transport: InMemoryTransport) -> LogSender:
    """Provide a sender bound to the in-memory transport."""
    return LogSender(transport)


@pytest.fixture
def generator() -> TrafficGenerator:
    """Provide a seeded traffic generator."""
    return TrafficGenerator(seed=1234)


@pytest.fixture
def fixed_clock(monkeypatch: pytest.MonkeyPatch) -> str:
    """Freeze record and envelope timestamps at FIXED_TIMESTAMP."""
    monkeypatch.setattr(records, "current_timestamp", lambda: FIXED_TIMESTAMP)
    return FIXED_TIMESTAMP

