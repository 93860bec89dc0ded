from .factory import build_log_emitter, build_prime_sink, build_runtime
from .pipe_stream import PipeReadEnd, PipeWriteEnd, open_pipe_stream
from .prime_sink import FilePrimeSink, MemoryPrimeSink, StdoutPrimeSink, format_prime
from .process_runtime import ProcessRuntime, ProcessUnit
from .queue_stream import QueueReadEnd, QueueWriteEnd, open_queue_stream
from .thread_runtime import ThreadRuntime, ThreadUnit

__all__ = [
    "FilePrimeSink",
    "MemoryPrimeSink",
    "PipeReadEnd",
    "PipeWriteEnd",
    "ProcessRuntime",
    "ProcessUnit",
    "QueueReadEnd",
    "QueueWriteEnd",
    "StdoutPrimeSink",
    "ThreadRuntime",
    "ThreadUnit",
    "build_log_emitter",
    "build_prime_sink",
    "build_runtime",
    "format_prime",
    "open_pipe_stream",
    "open_queue_stream",
]
