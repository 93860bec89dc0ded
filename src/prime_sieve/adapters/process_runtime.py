from __future__ import annotations

import multiprocessing as mp
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from prime_sieve.adapters.pipe_stream import PipeReadEnd, PipeWriteEnd, open_pipe_stream
from prime_sieve.domain.errors import SpawnError
from prime_sieve.ports.stream import Endpoint

# fork is excluded: a forked child inherits every write end its ancestors hold,
# so its input would never reach end-of-stream.
SUPPORTED_START_METHODS = ("spawn", "forkserver")


@dataclass(slots=True)
class ProcessUnit:
    # Handle over one spawned stage/feeder process.
    name: str
    process: mp.process.BaseProcess

    def join(self, timeout: float | None = None) -> None:
        self.process.join(timeout)

    def is_alive(self) -> bool:
        return self.process.is_alive()

    @property
    def exitcode(self) -> int | None:
        return self.process.exitcode

    @property
    def pid(self) -> int | None:
        return self.process.pid

    def terminate(self) -> bool:
        if self.process.is_alive():
            self.process.kill()
            self.process.join(timeout=1.0)
        return True


class ProcessRuntime:
    # One OS process per unit, one OS pipe per stream.
    kind = "process"

    def __init__(self, start_method: str = "spawn") -> None:
        if start_method not in SUPPORTED_START_METHODS:
            raise ValueError(
                f"unsupported start method '{start_method}'; expected one of {SUPPORTED_START_METHODS}"
            )
        self.start_method = start_method
        self._ctx = mp.get_context(start_method)

    def __getstate__(self) -> dict[str, object]:
        # Context objects are process-local; children rebuild their own.
        return {"start_method": self.start_method}

    def __setstate__(self, state: dict[str, object]) -> None:
        self.__init__(str(state["start_method"]))

    def __repr__(self) -> str:
        return f"ProcessRuntime(start_method={self.start_method!r})"

    def open_stream(self) -> tuple[PipeReadEnd, PipeWriteEnd]:
        return open_pipe_stream(self._ctx)

    def spawn(
        self,
        name: str,
        target: Callable[..., None],
        endpoint: Endpoint,
        *args: Any,
    ) -> ProcessUnit:
        process = self._ctx.Process(target=target, args=(endpoint, *args), name=name)
        try:
            process.start()
        except Exception as exc:
            raise SpawnError(f"cannot start process '{name}': {type(exc).__name__}: {exc}") from exc
        finally:
            # The child holds its own duplicate; the parent copy must go or EOF never arrives.
            endpoint.close()
        return ProcessUnit(name=name, process=process)
