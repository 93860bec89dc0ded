from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from prime_sieve.domain.records import MAX_VALUE

# Config models map YAML sections to typed structures.


class RuntimeConfig(BaseModel):
    # Execution backend for stages and streams.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["process", "thread"] = "process"
    start_method: Literal["spawn", "forkserver"] = "spawn"
    # Queue depth for the thread runtime; pipes use the OS buffer.
    stream_capacity: int = Field(default=1, ge=1)
    join_timeout_seconds: float | None = Field(default=None, gt=0)


class OutputConfig(BaseModel):
    # Where "prime <n>" lines go.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdout", "file"] = "stdout"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> OutputConfig:
        if self.kind == "file" and not self.path:
            raise ValueError("output.path is required when kind is 'file'")
        return self


class LoggingConfig(BaseModel):
    # Structured lifecycle logging for stages, feeder and driver.
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    level: Literal["debug", "info", "warning", "error"] = "info"
    sink: Literal["stderr", "jsonl"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        if self.enabled and self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class SieveConfig(BaseModel):
    # Root config. limit bounds the candidate range [2, limit].
    model_config = ConfigDict(extra="forbid")
    version: Literal[1] = 1
    limit: int = Field(default=35, le=MAX_VALUE)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
