"""Encoders for records sent to the collector."""

from lumbersend.core.encoding.envelope import (
    decode_record,
    encode_batch,
    encode_record,
    make_envelope,
    record_to_dict,
)

__all__ = [
    "decode_record",
    "encode_batch",
    "encode_record",
    "make_envelope",
    "record_to_dict",
]
