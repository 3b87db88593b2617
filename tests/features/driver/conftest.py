"""Step definitions for the send loop feature."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime

import pytest
from pytest_bdd import given, parsers, then, when

from lumbersend.adapters.transport.in_memory import InMemoryTransport
from lumbersend.client import LogSender
from lumbersend.core.generator import TrafficGenerator
from lumbersend.driver import RunSummary, run


@dataclass
class SendLoopContext:
    """State shared between the steps of one scenario."""

    transport: InMemoryTransport | None = None
    generator: TrafficGenerator | None = None
    summary: RunSummary | None = None
    sleeps: list[float] = field(default_factory=list)


def kind_of(obj: dict) -> str:
    """Tell the record kind from the keys of its JSON object."""
    if "status_code" in obj:
        return "access log"
    if "metric_name" in obj:
        return "metric log"
    if obj.get("level") == "ERROR" and "error_code" in obj:
        return "error log"
    return "message"


@pytest.fixture
def ctx() -> SendLoopContext:
    """Fresh scenario context for each test."""
    return SendLoopContext()


# === Background Steps ===
@given("an in-memory collector")
def step_collector(ctx: SendLoopContext) -> None:
    ctx.transport = InMemoryTransport()


@given(parsers.parse("a traffic generator seeded with {seed:d}"))
def step_generator(ctx: SendLoopContext, seed: int) -> None:
    ctx.generator = TrafficGenerator(seed=seed)


@given(parsers.parse("the collector rejects send number {number:d}"))
def step_reject_send(ctx: SendLoopContext, number: int) -> None:
    ctx.transport = InMemoryTransport(fail_on=[number])


# === Action Steps ===
@when(
    parsers.re(
        r'(?P<count>\d+) "(?P<pattern>\w+)" records are sent '
        r"(?P<interval>\d+) seconds? apart"
    ),
    converters={"count": int, "interval": int},
)
def step_send(ctx: SendLoopContext, count: int, pattern: str, interval: int) -> None:
    ctx.summary = run(
        LogSender(ctx.transport),
        ctx.generator.records(pattern, count),
        interval,
        sleep=ctx.sleeps.append,
    )


# === Assertion Steps ===
@then(parsers.parse("the collector receives {count:d} batches of {size:d} envelope"))
def step_batches(ctx: SendLoopContext, count: int, size: int) -> None:
    assert len(ctx.transport.batches) == count
    assert all(len(batch) == size for batch in ctx.transport.batches)


@then(parsers.parse("the summary reports {sent:d} sent and {failed:d} failed"))
def step_summary(ctx: SendLoopContext, sent: int, failed: int) -> None:
    assert ctx.summary.sent == sent
    assert ctx.summary.failed == failed


@then(parsers.parse("the loop paused {times:d} times"))
def step_paused(ctx: SendLoopContext, times: int) -> None:
    assert len(ctx.sleeps) == times


@then("the record kinds received are:")
def step_kinds(ctx: SendLoopContext, datatable: list[list[str]]) -> None:
    expected = [row[0] for row in datatable[1:]]
    received = [
        kind_of(json.loads(envelope["message"]))
        for envelope in ctx.transport.envelopes
    ]
    assert received == expected


@then(parsers.parse('a warning mentions "{text}"'))
def step_warning(caplog: pytest.LogCaptureFixture, text: str) -> None:
    warnings = [
        r.getMessage() for r in caplog.records if r.levelno == logging.WARNING
    ]
    assert any(text in message for message in warnings), warnings


@then(parsers.parse('every envelope has a parseable "{key}"'))
def step_envelope_timestamps(ctx: SendLoopContext, key: str) -> None:
    assert ctx.transport.envelopes
    for envelope in ctx.transport.envelopes:
        datetime.fromisoformat(envelope[key])
