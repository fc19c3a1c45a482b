"""Byte sink interface, the write-side dual of ``AsyncByteSource``."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AsyncByteSink(Protocol):
    """Anything that accepts bytes, possibly suspending."""

    async def write(self, data: bytes) -> int:
        """Write some or all of ``data``.

        Returns:
            Number of bytes actually accepted (may be less than ``len(data)``).
        """
        ...
