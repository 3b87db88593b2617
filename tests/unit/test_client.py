"""Tests for LogSender."""

import json

import pytest

from lumbersend.adapters.transport.in_memory import InMemoryTransport
from lumbersend.client import LogSender
from lumbersend.core.encoding.envelope import decode_record
from lumbersend.core.errors import EncodingError, SendError
from lumbersend.core.models import LogMessage
from lumbersend.core.records import info, log_message


class TestLogSender:
    """Tests for LogSender.send() and send_batch()."""

    @pytest.mark.core
    def test_send_wraps_record_in_one_envelope(
        self, sender: LogSender, transport: InMemoryTransport, fixed_clock: str
    ) -> None:
        """send() delivers one envelope holding the record JSON."""
        entry = info("checkout", "order placed", order_id=7)

        acked = sender.send(entry)

        assert acked == 1
        assert len(transport.batches) == 1
        (envelope,) = transport.batches[0]
        assert envelope["@timestamp"] == fixed_clock
        assert decode_record(envelope["message"], LogMessage) == entry

    @pytest.mark.core
    def test_send_batch_uses_one_transport_call(
        self, sender: LogSender, transport: InMemoryTransport
    ) -> None:
        """send_batch() sends every record in one batch."""
        entries = [info("svc", f"m{i}") for i in range(4)]

        assert sender.send_batch(entries) == 4
        assert len(transport.batches) == 1
        assert [json.loads(e["message"])["message"] for e in transport.envelopes] == [
            "m0",
            "m1",
            "m2",
            "m3",
        ]

    @pytest.mark.core
    def test_send_batch_empty_returns_zero(
        self, sender: LogSender, transport: InMemoryTransport
    ) -> None:
        """An empty batch never reaches the transport."""
        assert sender.send_batch([]) == 0
        assert transport.batches == []

    @pytest.mark.core
    def test_send_error_propagates(
        self, sender: LogSender, transport: InMemoryTransport
    ) -> None:
        """Transport failures reach the caller as SendError."""
        transport.fail_next()
        with pytest.raises(SendError):
            sender.send(info("svc", "lost"))

    @pytest.mark.core
    def test_encoding_error_propagates(
        self, sender: LogSender, transport: InMemoryTransport
    ) -> None:
        """Records that cannot be encoded never reach the transport."""
        with pytest.raises(EncodingError):
            sender.send(log_message("INFO", "svc", "bad", {"x": {1, 2}}))
        assert transport.batches == []

    @pytest.mark.core
    def test_address_and_close(self, transport: InMemoryTransport) -> None:
        """The sender reports the transport address and closes it on exit."""
        with LogSender(transport) as sender:
            assert sender.address == "localhost:5044"
        assert transport.closed
