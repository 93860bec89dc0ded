from __future__ import annotations


class PipelineError(RuntimeError):
    # Base class for failures raised by pipeline units.
    pass


class StreamError(PipelineError):
    # Transport-level failure on a stream endpoint.
    pass


class StreamClosedError(StreamError):
    # Endpoint was used after close() or after its ownership moved elsewhere.
    pass


class BrokenStreamError(StreamError):
    # Write attempted after the reading side went away.
    pass


class RecordError(StreamError):
    # Record does not fit the fixed-width wire format (partial read or out of range).
    pass


class SpawnError(PipelineError):
    # A stream or an execution unit could not be created.
    pass


class PipelineTimeoutError(PipelineError, TimeoutError):
    # Driver gave up waiting for the chain to terminate.
    pass
