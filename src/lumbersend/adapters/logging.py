"""Python logging handler adapter for lumbersend.

This adapter bridges Python's standard library logging module to a
LogSender, so an application's own log records reach the collector as
LogMessage or ErrorLog records.
"""

import logging
import traceback
from typing import Any

from lumbersend.client import LogSender
from lumbersend.core import records
from lumbersend.core.models import DEBUG, ERROR, INFO, WARN, ErrorLog, LogMessage

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def level_for_record(levelno: int) -> str:
    """Map a stdlib logging level number to a collector level."""
    if levelno >= logging.ERROR:
        return ERROR
    if levelno >= logging.WARNING:
        return WARN
    if levelno >= logging.INFO:
        return INFO
    return DEBUG


class CollectorLogHandler(logging.Handler):
    """Logging handler that forwards log records to a collector.

    Example:
        ```python
        from lumbersend import CollectorLogHandler, LogSender, LumberjackTransport

        sender = LogSender(LumberjackTransport.connect())
        logging.getLogger().addHandler(CollectorLogHandler(sender, "billing"))
        ```
    """

    def __init__(
        self,
        sender: LogSender,
        service: str,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler.

        Args:
            sender: Sender bound to a connected transport.
            service: Service name stamped on every forwarded record.
            level: Minimum level to forward.
        """
        super().__init__(level)
        self._sender = sender
        self._service = service

    def to_record(self, record: logging.LogRecord) -> LogMessage | ErrorLog:
        """Convert a LogRecord to a LogMessage, or an ErrorLog if it has exc_info."""
        metadata: dict[str, Any] = {
            "module": record.name,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                metadata[key] = value

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            return records.error_log(
                self._service,
                record.getMessage(),
                error_code=exc_type.__name__,
                stacktrace="".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                ),
                metadata=metadata,
            )

        return records.log_message(
            level_for_record(record.levelno),
            self._service,
            record.getMessage(),
            metadata,
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Send a log record to the collector.

        Args:
            record: The log record to emit.
        """
        try:
            self._sender.send(self.to_record(record))
        except Exception:
            self.handleError(record)
