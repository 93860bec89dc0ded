from __future__ import annotations

import multiprocessing as mp

import pytest

# Process-runtime streams: one-way OS pipes carrying 4-byte records.
from prime_sieve.adapters.pipe_stream import PipeReadEnd, open_pipe_stream
from prime_sieve.domain.errors import BrokenStreamError, RecordError, StreamClosedError


def _ctx() -> mp.context.BaseContext:
    return mp.get_context("spawn")


def test_pipe_stream_delivers_fifo_then_end_of_stream() -> None:
    # Closing the only write end turns a drained pipe into end-of-stream.
    reader, writer = open_pipe_stream(_ctx())
    for value in (2, 3, 5):
        writer.write(value)
    writer.close()
    assert list(reader) == [2, 3, 5]
    assert reader.read() is None
    reader.close()


def test_pipe_partial_record_is_fatal() -> None:
    # A frame shorter than one record surfaces as RecordError.
    raw_reader, raw_writer = _ctx().Pipe(duplex=False)
    reader = PipeReadEnd(raw_reader)
    raw_writer.send_bytes(b"\x01\x02")
    raw_writer.close()
    with pytest.raises(RecordError):
        reader.read()
    reader.close()


def test_pipe_write_without_reader_is_broken_stream() -> None:
    # EPIPE maps to BrokenStreamError.
    reader, writer = open_pipe_stream(_ctx())
    reader.close()
    with pytest.raises(BrokenStreamError):
        writer.write(2)
    writer.close()


def test_pipe_transfer_moves_ownership() -> None:
    # After transfer only the new handle can write; the old one is inert.
    reader, writer = open_pipe_stream(_ctx())
    moved = writer.transfer()
    writer.close()
    with pytest.raises(StreamClosedError):
        writer.write(2)
    with moved:
        moved.write(7)
    with reader:
        assert list(reader) == [7]
