"""In-memory byte source.

Useful for tests and for wrapping payloads that are already buffered (for
example a cached body) behind the same read contract as a live stream.
"""

from __future__ import annotations


class BytesSource:
    """Serve a fixed byte string through ``async read``.

    Each read returns at most ``size`` bytes and, when ``chunk_size`` is set,
    at most ``chunk_size`` bytes, which mimics a network source delivering
    short reads.
    """

    def __init__(self, data: bytes, *, chunk_size: int | None = None) -> None:
        """Initialize the source.

        Args:
            data: Bytes to serve.
            chunk_size: Optional upper bound for a single read.

        Raises:
            ValueError: If chunk_size is not positive.
        """
        if chunk_size is not None and chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")

        self._data = bytes(data)
        self._chunk_size = chunk_size
        self._offset = 0

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return f"BytesSource(size={len(self._data)}, offset={self._offset})"

    @property
    def position(self) -> int:
        """Number of bytes handed out so far."""
        return self._offset

    async def read(self, size: int = -1) -> bytes:
        end = len(self._data)
        if size >= 0:
            end = min(end, self._offset + size)
        if self._chunk_size is not None:
            end = min(end, self._offset + self._chunk_size)

        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk
