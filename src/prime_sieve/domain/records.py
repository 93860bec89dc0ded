from __future__ import annotations

import struct

from prime_sieve.domain.errors import RecordError

# Candidates travel as signed 32-bit little-endian records.
RECORD = struct.Struct("<i")
RECORD_SIZE = RECORD.size
MIN_VALUE = -(2**31)
MAX_VALUE = 2**31 - 1


def check_value(value: int) -> int:
    # Reject anything that would not survive the fixed-width encoding.
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordError(f"candidate must be an int, got {type(value).__name__}")
    if value < MIN_VALUE or value > MAX_VALUE:
        raise RecordError(f"candidate {value} does not fit a 32-bit record")
    return value


def encode_record(value: int) -> bytes:
    return RECORD.pack(check_value(value))


def decode_record(raw: bytes) -> int:
    # A short or oversized frame means the writer died mid-record.
    if len(raw) != RECORD_SIZE:
        raise RecordError(f"partial record: expected {RECORD_SIZE} bytes, got {len(raw)}")
    return RECORD.unpack(raw)[0]
