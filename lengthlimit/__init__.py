"""Enforce a maximum byte count on asynchronous byte streams."""

from lengthlimit.adapters.sink import AsyncByteSink, BytesSink
from lengthlimit.adapters.source import AsyncByteSource, BytesSource, ChunkIteratorSource
from lengthlimit.core.errors import (
    LengthExceededError,
    LengthLimitError,
    SinkWriteError,
    SourceReadError,
)
from lengthlimit.reader import LengthLimitedReader, LimitState
from lengthlimit.units import limit_bytes, limit_gb, limit_kb, limit_mb
from lengthlimit.writer import LengthLimitedWriter

__all__ = [
    "AsyncByteSink",
    "AsyncByteSource",
    "BytesSink",
    "BytesSource",
    "ChunkIteratorSource",
    "LengthExceededError",
    "LengthLimitError",
    "LengthLimitedReader",
    "LengthLimitedWriter",
    "LimitState",
    "SinkWriteError",
    "SourceReadError",
    "limit_bytes",
    "limit_gb",
    "limit_kb",
    "limit_mb",
]
