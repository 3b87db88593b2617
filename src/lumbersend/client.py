"""Record sender that encodes records into envelope batches."""

from collections.abc import Iterable
from types import TracebackType

from lumbersend.core.encoding.envelope import encode_batch
from lumbersend.core.models import Record
from lumbersend.core.ports import TransportPort


class LogSender:
    """Sends records to a collector through a transport.

    Example:
        ```python
        from lumbersend import InMemoryTransport, LogSender, info

        with LogSender(InMemoryTransport()) as sender:
            sender.send(info("checkout", "order placed", order_id=7))
        ```
    """

    def __init__(self, transport: TransportPort) -> None:
        self._transport = transport

    @property
    def address(self) -> str | None:
        """Collector address, when the transport reports one."""
        return getattr(self._transport, "address", None)

    def send(self, record: Record) -> int:
        """Send one record as a single-envelope batch.

        Returns:
            Number of envelopes acknowledged.

        Raises:
            EncodingError: If the record cannot be rendered to JSON.
            SendError: If the transport fails.
        """
        return self._transport.send(encode_batch([record]))

    def send_batch(self, records: Iterable[Record]) -> int:
        """Send several records in one batch with a shared send timestamp.

        An empty batch returns 0 without touching the transport.
        """
        batch = encode_batch(records)
        if not batch:
            return 0
        return self._transport.send(batch)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "LogSender":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
