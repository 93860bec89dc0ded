from __future__ import annotations

import pytest

# Feeder writes 2..N in ascending order and then closes its write end.
from prime_sieve.adapters.prime_sink import MemoryPrimeSink
from prime_sieve.adapters.queue_stream import open_queue_stream
from prime_sieve.adapters.thread_runtime import ThreadRuntime
from prime_sieve.kernel.env import StageEnv
from prime_sieve.kernel.feeder import candidate_range, run_feeder
from prime_sieve.observability.logging import LogEmitter, LogMessage


class _SpySink:
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)


def _env(log: LogEmitter | None = None) -> StageEnv:
    return StageEnv(runtime=ThreadRuntime(), primes=MemoryPrimeSink(), log=log or LogEmitter())


def test_candidate_range_starts_at_two() -> None:
    assert list(candidate_range(6)) == [2, 3, 4, 5, 6]
    assert list(candidate_range(2)) == [2]
    assert list(candidate_range(1)) == []
    assert list(candidate_range(-10)) == []


def test_feeder_writes_range_then_end_of_stream() -> None:
    reader, writer = open_queue_stream(capacity=16)
    run_feeder(writer, _env(), 10)
    assert writer.closed
    assert list(reader) == [2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert reader.read() is None


def test_feeder_below_two_only_signals_end_of_stream() -> None:
    reader, writer = open_queue_stream()
    run_feeder(writer, _env(), 1)
    assert writer.closed
    assert reader.read() is None


def test_feeder_write_failure_is_fatal() -> None:
    # A vanished reader ends the feeder with exit code 1 and a unit.failed log line.
    spy = _SpySink()
    reader, writer = open_queue_stream(capacity=1)
    reader.close()
    with pytest.raises(SystemExit) as excinfo:
        run_feeder(writer, _env(LogEmitter(sink=spy, level="debug")), 10)
    assert excinfo.value.code == 1
    assert writer.closed
    failures = [message for message in spy.messages if message.message == "unit.failed"]
    assert len(failures) == 1
    assert failures[0].fields["error_type"] == "BrokenStreamError"
    assert failures[0].fields["unit"] == "run_feeder"
