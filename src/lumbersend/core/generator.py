"""Synthetic traffic generator.

Cycles through record kinds and picks field values from fixed pools so the
collector receives realistic-looking test traffic. Pass a seed (or a
``random.Random``) for reproducible output; the default is unseeded.
"""

import random
from collections.abc import Iterator

from lumbersend.core import records
from lumbersend.core.models import (
    DEBUG,
    ERROR,
    INFO,
    WARN,
    AccessLog,
    ErrorLog,
    LogMessage,
    MetricLog,
    Record,
)

LEVEL_CYCLE = (INFO, DEBUG, WARN, ERROR, INFO, INFO, DEBUG, INFO)

BASIC_SERVICE = "lumbersend-test"
ENVIRONMENT = "testing"

METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")
PATHS = ("/api/users", "/api/orders", "/api/products", "/health", "/metrics")
STATUS_CODES = (200, 201, 204, 400, 404, 500)
USER_AGENT = "Mozilla/5.0 (compatible; Test/1.0)"

# (name, unit, upper bound of the random value)
METRICS = (
    ("cpu_usage", "percent", 100.0),
    ("memory_usage", "MB", 2048.0),
    ("request_rate", "req/s", 1000.0),
    ("error_rate", "errors/s", 10.0),
)
METRIC_TAGS = {"host": "server-01", "environment": ENVIRONMENT, "region": "us-east-1"}

ERRORS = (
    ("Database connection timeout", "DB_TIMEOUT"),
    ("Unable to parse request body", "PARSE_ERROR"),
    ("Authentication failed", "AUTH_FAILED"),
    ("Service unavailable", "SERVICE_DOWN"),
)

PATTERNS = ("basic", "mixed")


def level_for_index(index: int) -> str:
    """Return a log level that varies with the message index."""
    return LEVEL_CYCLE[index % len(LEVEL_CYCLE)]


def synthetic_stacktrace(seq: int) -> str:
    """Return a three-frame traceback whose innermost frame is at line seq."""
    lines = [
        "Traceback (most recent call last):",
        '  File "app/handlers.py", line 123, in handle',
        '  File "app/middleware.py", line 45, in dispatch',
        '  File "app/main.py", line %d, in serve' % seq,
    ]
    return "\n".join(lines)


class TrafficGenerator:
    """Builds synthetic records.

    Args:
        rng: Random source to draw field values from.
        seed: Seed for a fresh random source; ignored when rng is given.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self._rng = rng if rng is not None else random.Random(seed)

    def basic_message(self, index: int) -> LogMessage:
        """Build the index-th plain test message (zero-based)."""
        return records.log_message(
            level_for_index(index),
            BASIC_SERVICE,
            f"Test message number {index + 1} from lumbersend client",
            {
                "sequence": index + 1,
                "environment": ENVIRONMENT,
                "host": "experimentation-host",
            },
        )

    def access_log(self, seq: int) -> AccessLog:
        rng = self._rng
        return records.access_log(
            "api-gateway",
            rng.choice(METHODS),
            rng.choice(PATHS),
            f"192.168.1.{rng.randrange(255)}",
            rng.choice(STATUS_CODES),
            rng.random() * 1000,
            {
                "sequence": seq,
                "request_id": f"req-{seq}",
                "environment": ENVIRONMENT,
            },
            user_agent=USER_AGENT,
        )

    def metric_log(self, seq: int) -> MetricLog:
        name, unit, upper = self._rng.choice(METRICS)
        return records.metric_log(
            "monitoring",
            name,
            unit,
            self._rng.random() * upper,
            dict(METRIC_TAGS),
            {"sequence": seq},
        )

    def error_log(self, seq: int) -> ErrorLog:
        message, code = self._rng.choice(ERRORS)
        return records.error_log(
            "backend-service",
            message,
            code,
            synthetic_stacktrace(seq),
            {
                "sequence": seq,
                "environment": ENVIRONMENT,
                "trace_id": f"trace-{seq}",
            },
        )

    def basic(self, count: int) -> Iterator[LogMessage]:
        """Yield count plain messages with cycling levels."""
        for index in range(count):
            yield self.basic_message(index)

    def mixed(self, count: int) -> Iterator[Record]:
        """Yield count records, round-robin over access, metric and error logs."""
        builders = (self.access_log, self.metric_log, self.error_log)
        for seq in range(count):
            yield builders[seq % len(builders)](seq)

    def records(self, pattern: str, count: int) -> Iterator[Record]:
        """Yield count records of the named pattern ("basic" or "mixed").

        Raises:
            ValueError: If the pattern is unknown.
        """
        if pattern == "basic":
            return self.basic(count)
        if pattern == "mixed":
            return self.mixed(count)
        raise ValueError(
            f"unknown traffic pattern: {pattern!r}, want one of {', '.join(PATTERNS)}"
        )
