from __future__ import annotations

from multiprocessing.connection import Connection
from multiprocessing.context import BaseContext

from prime_sieve.adapters.endpoint import EndpointBase, ReaderMixin
from prime_sieve.domain.errors import BrokenStreamError, SpawnError, StreamError
from prime_sieve.domain.records import decode_record, encode_record


class PipeReadEnd(ReaderMixin, EndpointBase):
    # Read side of a one-way multiprocessing pipe. Survives pickling while a process is spawned.
    _role = "pipe read end"

    def __init__(self, conn: Connection) -> None:
        self._handle: Connection | None = conn
        self._eof = False

    def read(self) -> int | None:
        conn = self._require_open()
        if self._eof:
            return None
        try:
            raw = conn.recv_bytes()
        except EOFError:
            # Every copy of the write end is closed and the pipe is drained.
            self._eof = True
            return None
        except OSError as exc:
            raise StreamError(f"pipe read failed: {exc}") from exc
        return decode_record(raw)

    def transfer(self) -> PipeReadEnd:
        moved = PipeReadEnd(self._take())
        moved._eof = self._eof
        return moved

    def _release(self, handle: Connection) -> None:
        handle.close()


class PipeWriteEnd(EndpointBase):
    # Write side of a one-way multiprocessing pipe.
    _role = "pipe write end"

    def __init__(self, conn: Connection) -> None:
        self._handle: Connection | None = conn

    def write(self, value: int) -> None:
        conn = self._require_open()
        frame = encode_record(value)
        try:
            conn.send_bytes(frame)
        except (BrokenPipeError, ConnectionResetError) as exc:
            raise BrokenStreamError("pipe reader has gone away") from exc
        except OSError as exc:
            raise StreamError(f"pipe write failed: {exc}") from exc

    def transfer(self) -> PipeWriteEnd:
        return PipeWriteEnd(self._take())

    def _release(self, handle: Connection) -> None:
        handle.close()


def open_pipe_stream(ctx: BaseContext) -> tuple[PipeReadEnd, PipeWriteEnd]:
    # duplex=False gives (reader, writer) connections over a single OS pipe.
    try:
        reader, writer = ctx.Pipe(duplex=False)
    except OSError as exc:
        raise SpawnError(f"cannot allocate pipe: {exc}") from exc
    return PipeReadEnd(reader), PipeWriteEnd(writer)
