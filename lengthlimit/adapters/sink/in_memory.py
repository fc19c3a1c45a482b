"""In-memory byte sink."""

from __future__ import annotations


class BytesSink:
    """Collect written bytes in memory.

    ``max_accept`` bounds how much a single write takes, which lets callers
    exercise short-write handling.
    """

    def __init__(self, *, max_accept: int | None = None) -> None:
        if max_accept is not None and max_accept < 1:
            raise ValueError("max_accept must be >= 1")

        self._buffer = bytearray()
        self._max_accept = max_accept

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    async def write(self, data: bytes) -> int:
        if self._max_accept is not None:
            data = data[: self._max_accept]
        self._buffer += data
        return len(data)
