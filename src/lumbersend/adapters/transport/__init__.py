"""Transport adapters implementing TransportPort."""

from lumbersend.adapters.transport.in_memory import InMemoryTransport
from lumbersend.adapters.transport.lumberjack import LumberjackTransport

__all__ = [
    "InMemoryTransport",
    "LumberjackTransport",
]
