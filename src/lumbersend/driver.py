"""Send loop that drives synthetic traffic to the collector."""

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from lumbersend.client import LogSender
from lumbersend.core.errors import EncodingError, SendError
from lumbersend.core.models import Record

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Outcome counters for one run of the send loop."""

    sent: int = 0
    failed: int = 0
    acked: int = 0

    @property
    def total(self) -> int:
        return self.sent + self.failed


def run(
    sender: LogSender,
    records: Iterable[Record],
    interval: float,
    sleep: Callable[[float], None] | None = None,
) -> RunSummary:
    """Send records one at a time, pausing between sends.

    A failed send is logged and the loop moves on; there is no retry.

    Args:
        sender: Sender bound to a connected transport.
        records: Records to send, in order.
        interval: Seconds to pause between consecutive sends.
        sleep: Blocking sleep function. Defaults to time.sleep.

    Returns:
        RunSummary with sent, failed and acknowledged counts.
    """
    pause = sleep or time.sleep
    summary = RunSummary()
    for number, record in enumerate(records, start=1):
        if number > 1 and interval > 0:
            pause(interval)
        try:
            acked = sender.send(record)
        except (SendError, EncodingError) as exc:
            summary.failed += 1
            logger.warning("Error sending %s %d: %s", record.kind, number, exc)
            continue
        summary.sent += 1
        summary.acked += acked
        logger.info(
            "Sent %s %d: level=%s (acked: %d)",
            record.kind,
            number,
            record.level,
            acked,
        )
    return summary
