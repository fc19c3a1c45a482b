"""Byte sink capability and bundled implementations."""

from lengthlimit.adapters.sink.base import AsyncByteSink
from lengthlimit.adapters.sink.in_memory import BytesSink

__all__ = ["AsyncByteSink", "BytesSink"]
