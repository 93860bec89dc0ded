from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from prime_sieve.ports.prime_sink import PrimeSink


def format_prime(prime: int) -> str:
    return f"prime {prime}"


@dataclass(frozen=True)
class StdoutPrimeSink(PrimeSink):
    # Writes "prime <n>" to the process stdout; flushed per line so child processes interleave in order.
    def report(self, prime: int) -> None:
        print(format_prime(prime), flush=True)


@dataclass(frozen=True)
class FilePrimeSink(PrimeSink):
    # Append-per-line file sink. Holds only the path, so every process opens its own handle.
    path: Path
    encoding: str = "utf-8"

    def report(self, prime: int) -> None:
        with self.path.open("a", encoding=self.encoding) as handle:
            handle.write(format_prime(prime) + "\n")

    def reset(self) -> None:
        # Truncate before a run so output reflects a single pipeline.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("", encoding=self.encoding)


@dataclass
class MemoryPrimeSink(PrimeSink):
    # In-process collector; only meaningful when all stages share one address space.
    primes: list[int] = field(default_factory=list)

    def report(self, prime: int) -> None:
        self.primes.append(prime)

    def lines(self) -> list[str]:
        return [format_prime(prime) for prime in self.primes]
