from __future__ import annotations

from pathlib import Path

from prime_sieve.adapters.prime_sink import FilePrimeSink, StdoutPrimeSink
from prime_sieve.adapters.process_runtime import ProcessRuntime
from prime_sieve.adapters.thread_runtime import ThreadRuntime
from prime_sieve.config.models import LoggingConfig, OutputConfig, RuntimeConfig
from prime_sieve.observability.logging import LogEmitter
from prime_sieve.observability.sinks import JsonlLogSink, StderrLogSink
from prime_sieve.ports.prime_sink import PrimeSink
from prime_sieve.ports.runtime import Runtime


def build_runtime(config: RuntimeConfig) -> Runtime:
    # Factory for the execution backend.
    if config.kind == "thread":
        return ThreadRuntime(capacity=config.stream_capacity)
    return ProcessRuntime(start_method=config.start_method)


def build_prime_sink(config: OutputConfig) -> PrimeSink:
    # Factory for the prime output channel.
    if config.kind == "file":
        assert config.path is not None
        return FilePrimeSink(Path(config.path))
    return StdoutPrimeSink()


def build_log_emitter(config: LoggingConfig) -> LogEmitter:
    # Disabled logging still yields an emitter, just without a sink.
    if not config.enabled:
        return LogEmitter(sink=None, level=config.level)
    if config.sink == "jsonl":
        assert config.path is not None
        return LogEmitter(sink=JsonlLogSink(Path(config.path)), level=config.level)
    return LogEmitter(sink=StderrLogSink(), level=config.level)
