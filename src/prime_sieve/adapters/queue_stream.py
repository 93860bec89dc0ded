from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field

from prime_sieve.adapters.endpoint import EndpointBase, ReaderMixin
from prime_sieve.domain.errors import BrokenStreamError
from prime_sieve.domain.records import check_value

# How often a blocked writer re-checks whether its reader is still there.
WRITER_POLL_SECONDS = 0.05

_END_OF_STREAM = object()


@dataclass(slots=True)
class _QueueChannel:
    # Bounded FIFO between exactly one writer thread and one reader thread.
    capacity: int
    items: queue.Queue = field(init=False)
    reader_gone: threading.Event = field(default_factory=threading.Event)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError("stream capacity must be >= 1")
        self.items = queue.Queue(maxsize=self.capacity)

    def put(self, item: object) -> bool:
        # Returns False if the reader closed before the item could be queued.
        while not self.reader_gone.is_set():
            try:
                self.items.put(item, timeout=WRITER_POLL_SECONDS)
                return True
            except queue.Full:
                continue
        return False


class QueueReadEnd(ReaderMixin, EndpointBase):
    _role = "queue read end"

    def __init__(self, channel: _QueueChannel) -> None:
        self._handle: _QueueChannel | None = channel
        self._eof = False

    def read(self) -> int | None:
        channel = self._require_open()
        if self._eof:
            return None
        item = channel.items.get()
        if item is _END_OF_STREAM:
            self._eof = True
            return None
        return item

    def transfer(self) -> QueueReadEnd:
        moved = QueueReadEnd(self._take())
        moved._eof = self._eof
        return moved

    def _release(self, handle: _QueueChannel) -> None:
        handle.reader_gone.set()


class QueueWriteEnd(EndpointBase):
    _role = "queue write end"

    def __init__(self, channel: _QueueChannel) -> None:
        self._handle: _QueueChannel | None = channel

    def write(self, value: int) -> None:
        channel = self._require_open()
        if not channel.put(check_value(value)):
            raise BrokenStreamError("queue reader has gone away")

    def transfer(self) -> QueueWriteEnd:
        return QueueWriteEnd(self._take())

    def _release(self, handle: _QueueChannel) -> None:
        # End-of-stream travels in-band after any buffered values.
        handle.put(_END_OF_STREAM)


def open_queue_stream(capacity: int = 1) -> tuple[QueueReadEnd, QueueWriteEnd]:
    channel = _QueueChannel(capacity=capacity)
    return QueueReadEnd(channel), QueueWriteEnd(channel)
