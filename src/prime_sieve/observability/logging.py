from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

LOG_LEVELS: dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload emitted by pipeline units.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        ...


@dataclass(frozen=True)
class LogEmitter:
    # Level-filtering front for a sink. A missing sink disables logging entirely.
    sink: LogSink | None = None
    level: str = "info"

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{self.level}'")

    def enabled_for(self, level: str) -> bool:
        if self.sink is None:
            return False
        return LOG_LEVELS.get(level, 0) >= LOG_LEVELS[self.level]

    def emit(self, level: str, message: str, **fields: object) -> None:
        if not self.enabled_for(level):
            return
        try:
            self.sink.emit(
                LogMessage(
                    level=level,
                    message=message,
                    fields={"pid": os.getpid(), **fields},
                )
            )
        except Exception:
            # Diagnostics must never take a stage down.
            return

    def debug(self, message: str, **fields: object) -> None:
        self.emit("debug", message, **fields)

    def info(self, message: str, **fields: object) -> None:
        self.emit("info", message, **fields)

    def warning(self, message: str, **fields: object) -> None:
        self.emit("warning", message, **fields)

    def error(self, message: str, **fields: object) -> None:
        self.emit("error", message, **fields)

    def close(self) -> None:
        close = getattr(self.sink, "close", None)
        if callable(close):
            close()
