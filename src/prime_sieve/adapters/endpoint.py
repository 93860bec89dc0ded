from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from prime_sieve.domain.errors import StreamClosedError


class EndpointBase:
    # Shared scoped-release behaviour; concrete endpoints provide _handle and _release().
    _handle: Any
    _role = "endpoint"

    @property
    def closed(self) -> bool:
        return self._handle is None

    def _require_open(self) -> Any:
        if self._handle is None:
            raise StreamClosedError(f"{self._role} is closed or was transferred")
        return self._handle

    def _take(self) -> Any:
        # Move the underlying resource out; this handle no longer owns anything.
        handle = self._require_open()
        self._handle = None
        return handle

    def close(self) -> None:
        if self._handle is None:
            return
        handle = self._handle
        self._handle = None
        self._release(handle)

    def _release(self, handle: Any) -> None:
        raise NotImplementedError

    def __enter__(self) -> Any:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class ReaderMixin:
    def read(self) -> int | None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[int]:
        # Yields until end-of-stream.
        while True:
            value = self.read()
            if value is None:
                return
            yield value
