"""In-memory transport adapter."""

from collections.abc import Mapping, Sequence

from lumbersend.core.errors import SendError


class InMemoryTransport:
    """In-memory implementation of TransportPort.

    Stores every batch it is given instead of sending it. Suitable for
    testing and for dry runs where no collector is available.

    Args:
        address: Label reported as the collector address.
        fail_on: 1-based send numbers that should raise SendError.
    """

    def __init__(
        self, address: str = "memory", fail_on: Sequence[int] = ()
    ) -> None:
        self._address = address
        self._fail_on = set(fail_on)
        self._fail_next = 0
        self._calls = 0
        self.batches: list[list[dict[str, str]]] = []
        self.closed = False

    @property
    def address(self) -> str:
        return self._address

    @property
    def envelopes(self) -> list[dict[str, str]]:
        """All envelopes received so far, in send order."""
        return [envelope for batch in self.batches for envelope in batch]

    def fail_next(self, count: int = 1) -> None:
        """Make the next count sends raise SendError."""
        self._fail_next += count

    def send(self, batch: Sequence[Mapping[str, str]]) -> int:
        """Record a batch and acknowledge all of it."""
        self._calls += 1
        if self.closed:
            raise SendError(f"connection to {self._address} is closed")
        if self._fail_next:
            self._fail_next -= 1
            raise SendError(f"simulated failure on send {self._calls}")
        if self._calls in self._fail_on:
            raise SendError(f"simulated failure on send {self._calls}")
        self.batches.append([dict(envelope) for envelope in batch])
        return len(batch)

    def close(self) -> None:
        self.closed = True
