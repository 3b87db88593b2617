"""lumbersend - synthetic log traffic for Lumberjack (Beats) collectors."""

from lumbersend.adapters.logging import CollectorLogHandler
from lumbersend.adapters.transport.in_memory import InMemoryTransport
from lumbersend.adapters.transport.lumberjack import LumberjackTransport
from lumbersend.client import LogSender
from lumbersend.config import ClientConfig
from lumbersend.core.encoding.envelope import (
    decode_record,
    encode_batch,
    encode_record,
    make_envelope,
)
from lumbersend.core.errors import (
    ConnectionFailedError,
    EncodingError,
    LumbersendError,
    SendError,
)
from lumbersend.core.generator import TrafficGenerator
from lumbersend.core.models import (
    AccessLog,
    ErrorLog,
    LogMessage,
    MetricLog,
    Record,
)
from lumbersend.core.ports import TransportPort
from lumbersend.core.records import (
    access_log,
    classify_status,
    debug,
    error,
    error_log,
    info,
    log_message,
    metric_log,
    warn,
)
from lumbersend.driver import RunSummary, run

__all__ = [
    "AccessLog",
    "ClientConfig",
    "CollectorLogHandler",
    "ConnectionFailedError",
    "EncodingError",
    "ErrorLog",
    "InMemoryTransport",
    "LogMessage",
    "LogSender",
    "LumberjackTransport",
    "LumbersendError",
    "MetricLog",
    "Record",
    "RunSummary",
    "SendError",
    "TrafficGenerator",
    "TransportPort",
    "access_log",
    "classify_status",
    "debug",
    "decode_record",
    "encode_batch",
    "encode_record",
    "error",
    "error_log",
    "info",
    "log_message",
    "make_envelope",
    "metric_log",
    "run",
    "warn",
]
