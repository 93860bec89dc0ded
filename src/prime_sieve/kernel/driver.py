from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass

from prime_sieve.adapters.factory import build_log_emitter, build_prime_sink, build_runtime
from prime_sieve.adapters.prime_sink import MemoryPrimeSink
from prime_sieve.config.models import RuntimeConfig, SieveConfig
from prime_sieve.domain.errors import PipelineError, PipelineTimeoutError, SpawnError
from prime_sieve.kernel.env import StageEnv
from prime_sieve.kernel.feeder import run_feeder
from prime_sieve.kernel.stage import run_stage, stage_name
from prime_sieve.observability.logging import LogEmitter
from prime_sieve.ports.prime_sink import PrimeSink
from prime_sieve.ports.runtime import UnitHandle


@dataclass(frozen=True, slots=True)
class PipelineReport:
    # Outcome of one driver run. The driver waits for termination, not success.
    limit: int
    runtime: str
    feeder_exitcode: int | None
    stage_exitcode: int | None
    elapsed_s: float

    @property
    def ok(self) -> bool:
        return self.feeder_exitcode == 0 and self.stage_exitcode == 0


def drive(env: StageEnv, limit: int, *, timeout: float | None = None) -> PipelineReport:
    # Feeder and first stage share one fresh stream; each stage joins its own successor.
    started = time.perf_counter()
    env.log.info("pipeline.started", limit=limit, runtime=env.runtime.kind)

    reader, writer = env.runtime.open_stream()
    try:
        feeder = env.runtime.spawn("feeder", run_feeder, writer, env, limit)
    except SpawnError:
        reader.close()
        raise
    try:
        root = env.runtime.spawn(stage_name(1), run_stage, reader, env, 1)
    except SpawnError:
        # The reader is gone, so the feeder hits a broken stream and exits on its own.
        feeder.join(timeout)
        raise

    _wait_all([feeder, root], timeout=timeout, log=env.log)

    report = PipelineReport(
        limit=limit,
        runtime=env.runtime.kind,
        feeder_exitcode=feeder.exitcode,
        stage_exitcode=root.exitcode,
        elapsed_s=time.perf_counter() - started,
    )
    env.log.info(
        "pipeline.finished",
        limit=limit,
        ok=report.ok,
        feeder_exitcode=report.feeder_exitcode,
        stage_exitcode=report.stage_exitcode,
        elapsed_s=round(report.elapsed_s, 6),
    )
    return report


def run_pipeline(
    config: SieveConfig,
    *,
    prime_sink: PrimeSink | None = None,
    log: LogEmitter | None = None,
) -> PipelineReport:
    # Programmatic entry point; explicit sinks win over the config sections.
    if isinstance(prime_sink, MemoryPrimeSink) and config.runtime.kind == "process":
        # Each child process would append to its own unpickled copy.
        raise ValueError("memory prime sink requires the thread runtime")
    runtime = build_runtime(config.runtime)
    if prime_sink is None:
        prime_sink = build_prime_sink(config.output)
        reset = getattr(prime_sink, "reset", None)
        if callable(reset):
            reset()
    owns_log = log is None
    if log is None:
        log = build_log_emitter(config.logging)

    env = StageEnv(runtime=runtime, primes=prime_sink, log=log)
    try:
        return drive(env, config.limit, timeout=config.runtime.join_timeout_seconds)
    finally:
        if owns_log:
            log.close()


def collect_primes(
    limit: int,
    *,
    capacity: int = 1,
    timeout: float | None = None,
) -> list[int]:
    # In-process convenience: thread runtime plus a memory sink, primes in discovery order.
    sink = MemoryPrimeSink()
    config = SieveConfig(
        limit=limit,
        runtime=RuntimeConfig(kind="thread", stream_capacity=capacity, join_timeout_seconds=timeout),
    )
    report = run_pipeline(config, prime_sink=sink)
    if not report.ok:
        raise PipelineError(
            f"pipeline failed (feeder exit {report.feeder_exitcode}, stage exit {report.stage_exitcode})"
        )
    return list(sink.primes)


def _wait_all(handles: Sequence[UnitHandle], *, timeout: float | None, log: LogEmitter) -> None:
    deadline = None if timeout is None else time.monotonic() + timeout
    for handle in handles:
        remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
        handle.join(remaining)

    stuck = [handle for handle in handles if handle.is_alive()]
    if not stuck:
        return
    names = [handle.name for handle in stuck]
    log.error("pipeline.timeout", timeout_s=timeout, stuck=names)
    for handle in stuck:
        handle.terminate()
    raise PipelineTimeoutError(f"pipeline did not terminate within {timeout}s: {', '.join(names)}")
