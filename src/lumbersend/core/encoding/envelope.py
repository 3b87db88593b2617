"""JSON encoding of records and the batch envelopes sent to the collector."""

import dataclasses
import json
from collections.abc import Iterable
from typing import Any

from lumbersend.core import records
from lumbersend.core.errors import EncodingError
from lumbersend.core.models import Record

# Omitted from the JSON object when unset
OPTIONAL_FIELDS = frozenset({"user_agent", "error_code", "stacktrace"})


def record_to_dict(record: Record) -> dict[str, Any]:
    """Convert a record to a JSON-ready dict keyed by field name.

    Optional fields that are None are left out.
    """
    obj = {}
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if value is None and f.name in OPTIONAL_FIELDS:
            continue
        obj[f.name] = value
    return obj


def encode_record(record: Record) -> str:
    """Encode a record to JSON text.

    Raises:
        EncodingError: If the metadata holds values JSON cannot represent.
    """
    try:
        return json.dumps(record_to_dict(record), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to marshal {record.kind}: {exc}") from exc


def decode_record(text: str, record_type: type) -> Record:
    """Decode JSON text produced by encode_record back into a record.

    Args:
        text: JSON object text.
        record_type: One of the record classes.

    Returns:
        A record equal, field for field, to the one that was encoded.
    """
    return record_type(**json.loads(text))


def make_envelope(record: Record, sent_at: str | None = None) -> dict[str, str]:
    """Wrap an encoded record with its send-time timestamp."""
    return {
        "message": encode_record(record),
        "@timestamp": sent_at or records.current_timestamp(),
    }


def encode_batch(
    entries: Iterable[Record], sent_at: str | None = None
) -> list[dict[str, str]]:
    """Encode records into one batch of envelopes.

    All envelopes in the batch share a single send-time timestamp.
    Empty input gives an empty list.
    """
    timestamp = sent_at or records.current_timestamp()
    return [make_envelope(record, timestamp) for record in entries]
