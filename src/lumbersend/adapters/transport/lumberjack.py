"""Lumberjack v2 (Beats protocol) transport backed by pylogbeat.

Framing, compression and the acknowledgment window are handled by
``pylogbeat.PyLogBeatClient``; this adapter only maps its lifecycle and
failures onto TransportPort and lumbersend errors.
"""

import logging
from collections.abc import Mapping, Sequence
from types import TracebackType

import pylogbeat

from lumbersend.config import ClientConfig
from lumbersend.core.errors import ConnectionFailedError, SendError

logger = logging.getLogger(__name__)


class LumberjackTransport:
    """TransportPort implementation speaking Lumberjack v2 to a collector.

    Use ``LumberjackTransport.connect(config)`` to get a connected instance.

    Example:
        ```python
        with LumberjackTransport.connect(ClientConfig("localhost:5044")) as t:
            t.send([{"message": "{}", "@timestamp": "2024-01-01T00:00:00Z"}])
        ```
    """

    def __init__(self, client: pylogbeat.PyLogBeatClient, address: str) -> None:
        self._client: pylogbeat.PyLogBeatClient | None = client
        self._address = address

    @classmethod
    def connect(cls, config: ClientConfig | None = None) -> "LumberjackTransport":
        """Open a connection to the collector.

        Args:
            config: Connection settings. Defaults to ClientConfig().

        Raises:
            ConnectionFailedError: If the address is malformed or the
                collector cannot be reached.
        """
        config = config or ClientConfig()
        try:
            host, port = config.host, config.port
        except ValueError as exc:
            raise ConnectionFailedError(config.address, exc) from exc

        client = pylogbeat.PyLogBeatClient(
            host=host,
            port=port,
            ssl_enable=config.ssl_enable,
            ssl_verify=config.ssl_verify,
            ca_certs=config.ca_certs,
            timeout=config.timeout,
        )
        try:
            client.connect()
        except Exception as exc:
            raise ConnectionFailedError(config.address, exc) from exc

        logger.debug("Opened lumberjack connection to %s", config.address)
        return cls(client, config.address)

    @property
    def address(self) -> str:
        """Collector address this transport is connected to."""
        return self._address

    def send(self, batch: Sequence[Mapping[str, str]]) -> int:
        """Send a batch and wait for the collector to acknowledge it.

        pylogbeat returns only after the ACK for the final sequence number
        of the window arrives, so a successful call acknowledges the whole
        batch.

        Raises:
            SendError: If the connection is closed or the send fails.
        """
        if not batch:
            return 0
        if self._client is None:
            raise SendError(f"connection to {self._address} is closed")
        try:
            self._client.send([dict(envelope) for envelope in batch])
        except Exception as exc:
            raise SendError(f"failed to send batch: {exc}") from exc
        return len(batch)

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._client is None:
            return
        client, self._client = self._client, None
        client.close()
        logger.debug("Closed lumberjack connection to %s", self._address)

    def __enter__(self) -> "LumberjackTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
