from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, Union, runtime_checkable


# Stream endpoints are move-only handles over one direction of a point-to-point channel.
@runtime_checkable
class ReadEnd(Protocol):
    def read(self) -> int | None:
        """Block for the next value; return None once the writer closed and the buffer is drained."""
        raise NotImplementedError("ReadEnd is a port; use a concrete adapter.")

    def close(self) -> None:
        """Release the read capability. Idempotent."""
        raise NotImplementedError("ReadEnd is a port; use a concrete adapter.")

    def transfer(self) -> ReadEnd:
        """Hand ownership to a new handle; this one becomes inert."""
        raise NotImplementedError("ReadEnd is a port; use a concrete adapter.")

    def __iter__(self) -> Iterator[int]:
        raise NotImplementedError("ReadEnd is a port; use a concrete adapter.")

    def __enter__(self) -> ReadEnd:
        raise NotImplementedError("ReadEnd is a port; use a concrete adapter.")

    def __exit__(self, *exc: object) -> None:
        raise NotImplementedError("ReadEnd is a port; use a concrete adapter.")


@runtime_checkable
class WriteEnd(Protocol):
    def write(self, value: int) -> None:
        """Block until the value is accepted by the stream."""
        raise NotImplementedError("WriteEnd is a port; use a concrete adapter.")

    def close(self) -> None:
        """Signal end-of-stream to the reader. Idempotent."""
        raise NotImplementedError("WriteEnd is a port; use a concrete adapter.")

    def transfer(self) -> WriteEnd:
        """Hand ownership to a new handle; this one becomes inert."""
        raise NotImplementedError("WriteEnd is a port; use a concrete adapter.")

    def __enter__(self) -> WriteEnd:
        raise NotImplementedError("WriteEnd is a port; use a concrete adapter.")

    def __exit__(self, *exc: object) -> None:
        raise NotImplementedError("WriteEnd is a port; use a concrete adapter.")


Endpoint = Union[ReadEnd, WriteEnd]
