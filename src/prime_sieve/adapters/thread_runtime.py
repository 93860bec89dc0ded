from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from prime_sieve.adapters.queue_stream import QueueReadEnd, QueueWriteEnd, open_queue_stream
from prime_sieve.domain.errors import SpawnError
from prime_sieve.ports.stream import Endpoint


class ThreadUnit:
    # Thread-backed unit with process-like exit codes.
    def __init__(
        self,
        name: str,
        target: Callable[..., None],
        endpoint: Endpoint,
        args: tuple[Any, ...],
    ) -> None:
        self.name = name
        self._target = target
        self._endpoint = endpoint
        self._args = args
        self._exitcode: int | None = None
        # Daemon so a wedged chain cannot keep the interpreter alive; callers join explicitly.
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        try:
            self._target(self._endpoint, *self._args)
        except SystemExit as exc:
            self._exitcode = exc.code if isinstance(exc.code, int) else 1
            return
        except BaseException:
            self._exitcode = 1
            raise
        self._exitcode = 0

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    @property
    def exitcode(self) -> int | None:
        if self._thread.is_alive():
            return None
        return self._exitcode

    def terminate(self) -> bool:
        # Threads cannot be killed from outside.
        return False


class ThreadRuntime:
    # One OS thread per unit, one bounded queue per stream.
    kind = "thread"

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("stream capacity must be >= 1")
        self.capacity = capacity

    def __repr__(self) -> str:
        return f"ThreadRuntime(capacity={self.capacity})"

    def open_stream(self) -> tuple[QueueReadEnd, QueueWriteEnd]:
        return open_queue_stream(self.capacity)

    def spawn(
        self,
        name: str,
        target: Callable[..., None],
        endpoint: Endpoint,
        *args: Any,
    ) -> ThreadUnit:
        owned = endpoint.transfer()
        unit = ThreadUnit(name, target, owned, args)
        try:
            unit.start()
        except RuntimeError as exc:
            owned.close()
            raise SpawnError(f"cannot start thread '{name}': {exc}") from exc
        return unit
