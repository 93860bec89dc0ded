"""Filter stage of the self-extending sieve chain.

Each stage claims the first value it reads as its prime, then forwards every
value not divisible by that prime to a successor it spawns lazily. Primality of
each claimed value follows by induction: it survived every earlier stage.
"""

from __future__ import annotations

from enum import Enum

from prime_sieve.kernel.env import StageEnv, unit_entry
from prime_sieve.ports.runtime import UnitHandle
from prime_sieve.ports.stream import ReadEnd, WriteEnd


class StageState(str, Enum):
    AWAIT_FIRST = "AWAIT_FIRST"
    SCAN_FOR_SURVIVOR = "SCAN_FOR_SURVIVOR"
    FORWARDING = "FORWARDING"
    DRAINED = "DRAINED"


def stage_name(depth: int) -> str:
    return f"stage-{depth}"


class FilterStage:
    def __init__(self, source: ReadEnd, env: StageEnv, depth: int = 1) -> None:
        self.source = source
        self.env = env
        self.depth = depth
        self.state = StageState.AWAIT_FIRST
        self.prime: int | None = None
        self.successor: UnitHandle | None = None
        self.forwarded = 0

    @property
    def name(self) -> str:
        return stage_name(self.depth)

    def run(self) -> None:
        # Both endpoints are closed before the successor is joined, on every path.
        try:
            with self.source:
                self._run_owned()
        finally:
            if self.successor is not None:
                self._join_successor(self.successor)
        self.env.log.debug(
            "stage.finished",
            stage=self.name,
            prime=self.prime,
            state=self.state.value,
            forwarded=self.forwarded,
        )

    def _run_owned(self) -> None:
        first = self.source.read()
        if first is None:
            self._drain()
            return
        self.prime = first
        self.env.primes.report(first)
        self.env.log.info("stage.prime", stage=self.name, prime=first)

        self.state = StageState.SCAN_FOR_SURVIVOR
        survivor = self._scan_for_survivor(first)
        if survivor is None:
            self._drain()
            return

        reader, writer = self.env.runtime.open_stream()
        with writer:
            self.successor = self.env.runtime.spawn(
                stage_name(self.depth + 1),
                run_stage,
                reader,
                self.env,
                self.depth + 1,
            )
            self.state = StageState.FORWARDING
            self.env.log.debug("stage.spawned", stage=self.name, successor=self.successor.name)
            writer.write(survivor)
            self.forwarded = 1
            self._forward(first, writer)

    def _scan_for_survivor(self, prime: int) -> int | None:
        for value in self.source:
            if value % prime != 0:
                return value
        return None

    def _forward(self, prime: int, writer: WriteEnd) -> None:
        # Order-preserving filter over the rest of the input.
        for value in self.source:
            if value % prime != 0:
                writer.write(value)
                self.forwarded += 1

    def _drain(self) -> None:
        self.state = StageState.DRAINED
        self.env.log.debug("stage.drained", stage=self.name, prime=self.prime)

    def _join_successor(self, successor: UnitHandle) -> None:
        successor.join()
        if successor.exitcode != 0:
            # Ancestors only see the exit status; the failing unit logged its own cause.
            self.env.log.warning(
                "stage.child_failed",
                stage=self.name,
                successor=successor.name,
                exitcode=successor.exitcode,
            )


@unit_entry
def run_stage(source: ReadEnd, env: StageEnv, depth: int = 1) -> None:
    FilterStage(source, env, depth).run()
