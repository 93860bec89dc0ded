from __future__ import annotations

import json
from pathlib import Path

import pytest

# End-to-end runs on the process runtime: one spawned OS process per stage, OS pipes between them.
from prime_sieve.app.cli import run
from prime_sieve.config.models import LoggingConfig, OutputConfig, RuntimeConfig, SieveConfig
from prime_sieve.kernel.driver import run_pipeline

# Spawn start-up dominates; keep limits small and always bound the wait.
JOIN_TIMEOUT_SECONDS = 120


def _process_config(limit: int, tmp_path: Path, *, logging: bool = False) -> SieveConfig:
    return SieveConfig(
        limit=limit,
        runtime=RuntimeConfig(kind="process", join_timeout_seconds=JOIN_TIMEOUT_SECONDS),
        output=OutputConfig(kind="file", path=str(tmp_path / "primes.txt")),
        logging=LoggingConfig(
            enabled=logging,
            level="debug",
            sink="jsonl",
            path=str(tmp_path / "run.jsonl"),
        ),
    )


def _lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def test_process_pipeline_limit_ten(tmp_path: Path) -> None:
    report = run_pipeline(_process_config(10, tmp_path))
    assert report.ok
    assert report.runtime == "process"
    assert _lines(tmp_path / "primes.txt") == ["prime 2", "prime 3", "prime 5", "prime 7"]


def test_process_pipeline_limit_two_and_below(tmp_path: Path) -> None:
    assert run_pipeline(_process_config(2, tmp_path)).ok
    assert _lines(tmp_path / "primes.txt") == ["prime 2"]
    assert run_pipeline(_process_config(1, tmp_path)).ok
    assert _lines(tmp_path / "primes.txt") == []


def test_process_pipeline_logs_one_stage_per_prime(tmp_path: Path) -> None:
    # Every stage process appends to the same JSONL file through its own handle.
    report = run_pipeline(_process_config(20, tmp_path, logging=True))
    assert report.ok
    records = [json.loads(line) for line in _lines(tmp_path / "run.jsonl")]
    primes = sorted(r["fields"]["prime"] for r in records if r["message"] == "stage.prime")
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19]
    assert sum(1 for r in records if r["message"] == "stage.spawned") == 7
    pids = {r["fields"]["pid"] for r in records if r["message"] == "stage.prime"}
    assert len(pids) == 8


def test_cli_default_runtime_prints_to_stdout(capfd: pytest.CaptureFixture[str]) -> None:
    # Child processes inherit the captured stdout file descriptor.
    assert run(["--limit", "10"]) == 0
    assert capfd.readouterr().out.splitlines() == ["prime 2", "prime 3", "prime 5", "prime 7"]
