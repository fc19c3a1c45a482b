"""Byte source capability and bundled implementations."""

from lengthlimit.adapters.source.base import AsyncByteSource
from lengthlimit.adapters.source.in_memory import BytesSource
from lengthlimit.adapters.source.iterator import ChunkIteratorSource

__all__ = ["AsyncByteSource", "BytesSource", "ChunkIteratorSource"]
