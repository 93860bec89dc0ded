from .prime_sink import PrimeSink
from .runtime import Runtime, UnitHandle
from .stream import Endpoint, ReadEnd, WriteEnd

__all__ = ["Endpoint", "PrimeSink", "ReadEnd", "Runtime", "UnitHandle", "WriteEnd"]
