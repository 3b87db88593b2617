"""Core domain models for synthetic log records."""

from dataclasses import dataclass, field
from typing import Any, ClassVar

DEBUG = "DEBUG"
INFO = "INFO"
WARN = "WARN"
ERROR = "ERROR"


@dataclass(frozen=True)
class LogMessage:
    """A plain log message.

    Attributes:
        timestamp: ISO-8601 creation time.
        level: Log level (e.g., INFO, ERROR, DEBUG).
        service: Name of the emitting service.
        message: The log message.
        metadata: Additional structured fields.
    """

    kind: ClassVar[str] = "message"

    timestamp: str
    level: str
    service: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AccessLog:
    """An HTTP access log entry.

    Attributes:
        timestamp: ISO-8601 creation time.
        level: Derived from status_code.
        service: Name of the emitting service.
        method: HTTP method (GET, POST, ...).
        path: Request path.
        status_code: HTTP response status.
        duration_ms: Request duration in milliseconds.
        client_ip: Client address.
        user_agent: Optional User-Agent header value.
        metadata: Additional structured fields.
    """

    kind: ClassVar[str] = "access log"

    timestamp: str
    level: str
    service: str
    method: str
    path: str
    status_code: int
    duration_ms: float
    client_ip: str
    user_agent: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MetricLog:
    """A single metric data point.

    Attributes:
        timestamp: ISO-8601 creation time.
        level: Always INFO.
        service: Name of the emitting service.
        metric_name: Metric name (e.g., cpu_usage).
        value: The metric value.
        unit: Unit of the value (e.g., percent, MB).
        tags: Key-value pairs for metric dimensions.
        metadata: Additional structured fields.
    """

    kind: ClassVar[str] = "metric log"

    timestamp: str
    level: str
    service: str
    metric_name: str
    value: float
    unit: str
    tags: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ErrorLog:
    """An error log entry with optional code and stack trace.

    Attributes:
        timestamp: ISO-8601 creation time.
        level: Always ERROR.
        service: Name of the emitting service.
        message: The error message.
        error_code: Optional machine-readable error code.
        stacktrace: Optional stack trace text.
        metadata: Additional structured fields.
    """

    kind: ClassVar[str] = "error log"

    timestamp: str
    level: str
    service: str
    message: str
    error_code: str | None = None
    stacktrace: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


Record = LogMessage | AccessLog | MetricLog | ErrorLog
