from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from prime_sieve.ports.stream import Endpoint, ReadEnd, WriteEnd


@runtime_checkable
class UnitHandle(Protocol):
    # Handle to a spawned execution unit (process or thread).
    name: str

    def join(self, timeout: float | None = None) -> None:
        raise NotImplementedError("UnitHandle is a port; use a concrete adapter.")

    def is_alive(self) -> bool:
        raise NotImplementedError("UnitHandle is a port; use a concrete adapter.")

    @property
    def exitcode(self) -> int | None:
        """0 on clean exit, non-zero on abnormal termination, None while running."""
        raise NotImplementedError("UnitHandle is a port; use a concrete adapter.")

    def terminate(self) -> bool:
        """Best-effort forced stop; returns False when the unit kind cannot be killed."""
        raise NotImplementedError("UnitHandle is a port; use a concrete adapter.")


@runtime_checkable
class Runtime(Protocol):
    # Runtime creates streams and schedules units; stage code never touches the backend directly.
    kind: str

    def open_stream(self) -> tuple[ReadEnd, WriteEnd]:
        raise NotImplementedError("Runtime is a port; use a concrete adapter.")

    def spawn(
        self,
        name: str,
        target: Callable[..., None],
        endpoint: Endpoint,
        *args: Any,
    ) -> UnitHandle:
        """Start target(endpoint, *args) as a new unit.

        The endpoint is consumed: ownership moves to the new unit, and on failure
        it is closed before SpawnError propagates.
        """
        raise NotImplementedError("Runtime is a port; use a concrete adapter.")
