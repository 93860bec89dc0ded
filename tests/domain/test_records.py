from __future__ import annotations

import pytest

# Candidates cross pipes as fixed-width 32-bit records.
from prime_sieve.domain.errors import RecordError
from prime_sieve.domain.records import (
    MAX_VALUE,
    MIN_VALUE,
    RECORD_SIZE,
    check_value,
    decode_record,
    encode_record,
)


def test_record_is_four_bytes_little_endian() -> None:
    # Wire format matches a native 32-bit int written in one piece.
    assert RECORD_SIZE == 4
    assert encode_record(35) == b"\x23\x00\x00\x00"
    assert decode_record(b"\x23\x00\x00\x00") == 35


def test_record_extremes_are_accepted() -> None:
    # Both int32 bounds survive encoding.
    assert decode_record(encode_record(MAX_VALUE)) == MAX_VALUE
    assert decode_record(encode_record(MIN_VALUE)) == MIN_VALUE


def test_partial_record_is_rejected() -> None:
    # A short frame means the writer died mid-record; that is fatal, not end-of-stream.
    with pytest.raises(RecordError, match="partial record"):
        decode_record(b"\x01\x02")
    with pytest.raises(RecordError):
        decode_record(b"\x01\x02\x03\x04\x05")


def test_out_of_range_value_is_rejected() -> None:
    # Values wider than 32 bits cannot be written.
    with pytest.raises(RecordError, match="32-bit"):
        encode_record(MAX_VALUE + 1)
    with pytest.raises(RecordError):
        check_value(MIN_VALUE - 1)


def test_non_int_values_are_rejected() -> None:
    # bool is an int subclass but is not a candidate.
    with pytest.raises(RecordError):
        check_value(True)
    with pytest.raises(RecordError):
        check_value(3.0)  # type: ignore[arg-type]
