from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from prime_sieve.domain.errors import PipelineError
from prime_sieve.observability.logging import LogEmitter
from prime_sieve.ports.prime_sink import PrimeSink
from prime_sieve.ports.runtime import Runtime


@dataclass(frozen=True)
class StageEnv:
    # Everything a unit needs besides its endpoint. Must stay picklable for the process runtime.
    runtime: Runtime
    primes: PrimeSink
    log: LogEmitter = field(default_factory=LogEmitter)


def unit_entry(func: Callable[..., None]) -> Callable[..., None]:
    # Transport failures end the unit with exit code 1; nothing is re-raised upward.
    # The stderr line is written even when structured logging is disabled.
    @functools.wraps(func)
    def wrapper(endpoint: Any, env: StageEnv, *args: Any) -> None:
        try:
            func(endpoint, env, *args)
        except (PipelineError, OSError) as exc:
            print(f"prime-sieve: {func.__name__}: {exc}", file=sys.stderr, flush=True)
            env.log.error(
                "unit.failed",
                unit=func.__name__,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise SystemExit(1) from exc

    return wrapper
