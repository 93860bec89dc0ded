from __future__ import annotations

import json
import sys
import threading
from pathlib import Path
from typing import TextIO

from prime_sieve.observability.logging import LogMessage


class StderrLogSink:
    # One JSON object per line on stderr, so logs never interleave with prime output on stdout.
    def emit(self, message: LogMessage) -> None:
        print(
            json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False),
            file=sys.stderr,
            flush=True,
        )


class JsonlLogSink:
    # File-backed structured log sink shared by every unit of a run.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()
        self._file: TextIO | None = self._open()

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
        with self._lock:
            # Messages after close are dropped.
            if self._file is None:
                return
            self._file.write(payload + "\n")
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is None:
                return
            self._file.close()
            self._file = None

    def _open(self) -> TextIO:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        return self._path.open("a", encoding="utf-8")

    def __getstate__(self) -> dict[str, object]:
        return {"path": str(self._path)}

    def __setstate__(self, state: dict[str, object]) -> None:
        # A copy unpickled in a child process gets its own lock and handle.
        self._path = Path(str(state["path"]))
        self._lock = threading.Lock()
        self._file = self._open()


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
