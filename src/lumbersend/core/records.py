"""Record constructors that timestamp and classify synthetic log data."""

from datetime import datetime
from typing import Any

from lumbersend.core.models import (
    DEBUG,
    ERROR,
    INFO,
    WARN,
    AccessLog,
    ErrorLog,
    LogMessage,
    MetricLog,
)


def current_timestamp() -> str:
    """Return the current local time as ISO-8601 text with UTC offset."""
    return datetime.now().astimezone().isoformat(timespec="seconds")


def classify_status(status_code: int) -> str:
    """Map an HTTP status code to a log level.

    5xx and above are ERROR, 4xx are WARN, everything else is INFO.
    """
    if status_code >= 500:
        return ERROR
    if status_code >= 400:
        return WARN
    return INFO


def log_message(
    level: str,
    service: str,
    message: str,
    metadata: dict[str, Any] | None = None,
) -> LogMessage:
    """Create a plain log message with automatic timestamp.

    Args:
        level: Log level (e.g., "INFO", "ERROR", "DEBUG")
        service: Name of the emitting service
        message: The log message
        metadata: Additional structured fields

    Returns:
        LogMessage with current timestamp
    """
    return LogMessage(
        timestamp=current_timestamp(),
        level=level,
        service=service,
        message=message,
        metadata=dict(metadata or {}),
    )


def access_log(
    service: str,
    method: str,
    path: str,
    client_ip: str,
    status_code: int,
    duration_ms: float,
    metadata: dict[str, Any] | None = None,
    user_agent: str | None = None,
) -> AccessLog:
    """Create an access log entry whose level follows the status code.

    Args:
        service: Name of the emitting service
        method: HTTP method
        path: Request path
        client_ip: Client address
        status_code: HTTP response status
        duration_ms: Request duration in milliseconds
        metadata: Additional structured fields
        user_agent: Optional User-Agent header value

    Returns:
        AccessLog with current timestamp
    """
    return AccessLog(
        timestamp=current_timestamp(),
        level=classify_status(status_code),
        service=service,
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
        client_ip=client_ip,
        user_agent=user_agent,
        metadata=dict(metadata or {}),
    )


def metric_log(
    service: str,
    metric_name: str,
    unit: str,
    value: float,
    tags: dict[str, str] | None = None,
    metadata: dict[str, Any] | None = None,
) -> MetricLog:
    """Create an INFO metric log entry.

    Args:
        service: Name of the emitting service
        metric_name: Metric name (e.g., "cpu_usage")
        unit: Unit of the value (e.g., "percent")
        value: The metric value
        tags: Optional dimension tags
        metadata: Additional structured fields

    Returns:
        MetricLog with current timestamp
    """
    return MetricLog(
        timestamp=current_timestamp(),
        level=INFO,
        service=service,
        metric_name=metric_name,
        value=value,
        unit=unit,
        tags=dict(tags or {}),
        metadata=dict(metadata or {}),
    )


def error_log(
    service: str,
    message: str,
    error_code: str | None = None,
    stacktrace: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> ErrorLog:
    """Create an ERROR log entry.

    Args:
        service: Name of the emitting service
        message: The error message
        error_code: Optional machine-readable error code
        stacktrace: Optional stack trace text
        metadata: Additional structured fields

    Returns:
        ErrorLog with current timestamp
    """
    return ErrorLog(
        timestamp=current_timestamp(),
        level=ERROR,
        service=service,
        message=message,
        error_code=error_code,
        stacktrace=stacktrace,
        metadata=dict(metadata or {}),
    )


def info(service: str, message: str, **metadata: Any) -> LogMessage:
    """Create an INFO log message."""
    return log_message(INFO, service, message, metadata)


def debug(service: str, message: str, **metadata: Any) -> LogMessage:
    """Create a DEBUG log message."""
    return log_message(DEBUG, service, message, metadata)


def warn(service: str, message: str, **metadata: Any) -> LogMessage:
    """Create a WARN log message."""
    return log_message(WARN, service, message, metadata)


def error(service: str, message: str, **metadata: Any) -> LogMessage:
    """Create an ERROR log message.

    Unlike error_log(), this carries no error code or stack trace.
    """
    return log_message(ERROR, service, message, metadata)
