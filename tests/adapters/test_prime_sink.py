from __future__ import annotations

import pickle
from pathlib import Path

import pytest

# Prime sinks publish "prime <n>" lines.
from prime_sieve.adapters.factory import build_prime_sink
from prime_sieve.adapters.prime_sink import FilePrimeSink, MemoryPrimeSink, StdoutPrimeSink, format_prime
from prime_sieve.config.models import OutputConfig


def test_format_prime_matches_reference_output() -> None:
    assert format_prime(7) == "prime 7"


def test_stdout_sink_prints_one_line_per_prime(capsys: pytest.CaptureFixture[str]) -> None:
    sink = StdoutPrimeSink()
    sink.report(2)
    sink.report(3)
    assert capsys.readouterr().out == "prime 2\nprime 3\n"


def test_file_sink_appends_and_reset_truncates(tmp_path: Path) -> None:
    # Each report appends; reset starts a fresh run.
    path = tmp_path / "out" / "primes.txt"
    sink = FilePrimeSink(path)
    sink.reset()
    sink.report(2)
    sink.report(5)
    assert path.read_text(encoding="utf-8") == "prime 2\nprime 5\n"
    sink.reset()
    assert path.read_text(encoding="utf-8") == ""


def test_file_sink_is_picklable(tmp_path: Path) -> None:
    # Process stages receive a pickled copy that writes to the same path.
    sink = FilePrimeSink(tmp_path / "primes.txt")
    copy = pickle.loads(pickle.dumps(sink))
    copy.report(11)
    assert (tmp_path / "primes.txt").read_text(encoding="utf-8") == "prime 11\n"


def test_memory_sink_keeps_discovery_order() -> None:
    sink = MemoryPrimeSink()
    for prime in (2, 3, 5):
        sink.report(prime)
    assert sink.primes == [2, 3, 5]
    assert sink.lines() == ["prime 2", "prime 3", "prime 5"]


def test_factory_selects_sink_from_output_config(tmp_path: Path) -> None:
    assert isinstance(build_prime_sink(OutputConfig()), StdoutPrimeSink)
    sink = build_prime_sink(OutputConfig(kind="file", path=str(tmp_path / "p.txt")))
    assert isinstance(sink, FilePrimeSink)
    assert sink.path == tmp_path / "p.txt"
