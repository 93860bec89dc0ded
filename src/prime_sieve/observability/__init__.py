from .logging import LOG_LEVELS, LogEmitter, LogMessage, LogSink
from .sinks import JsonlLogSink, StderrLogSink

__all__ = ["LOG_LEVELS", "JsonlLogSink", "LogEmitter", "LogMessage", "LogSink", "StderrLogSink"]
