from __future__ import annotations

from typing import Protocol, runtime_checkable


# PrimeSink is where stages report the prime they claimed.
@runtime_checkable
class PrimeSink(Protocol):
    def report(self, prime: int) -> None:
        """Publish one discovered prime."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("PrimeSink is a port; use a concrete adapter.")
