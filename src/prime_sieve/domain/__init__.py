from .errors import (
    BrokenStreamError,
    PipelineError,
    PipelineTimeoutError,
    RecordError,
    SpawnError,
    StreamClosedError,
    StreamError,
)
from .records import MAX_VALUE, RECORD_SIZE, check_value, decode_record, encode_record

__all__ = [
    "BrokenStreamError",
    "PipelineError",
    "PipelineTimeoutError",
    "RecordError",
    "SpawnError",
    "StreamClosedError",
    "StreamError",
    "MAX_VALUE",
    "RECORD_SIZE",
    "check_value",
    "decode_record",
    "encode_record",
]
