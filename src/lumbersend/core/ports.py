"""Port interfaces for transport adapters.

The client and driver depend only on this protocol, not on a concrete
network library.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class TransportPort(Protocol):
    """Port for delivering envelope batches to a log collector.

    Adapters implementing this protocol own framing, compression and
    acknowledgment. Examples: LumberjackTransport, InMemoryTransport.
    """

    def send(self, batch: Sequence[Mapping[str, str]]) -> int:
        """Send a batch of envelopes.

        Args:
            batch: Envelope dicts with "message" and "@timestamp" keys.

        Returns:
            Number of envelopes acknowledged by the collector.

        Raises:
            SendError: If the batch could not be delivered.
        """
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...
