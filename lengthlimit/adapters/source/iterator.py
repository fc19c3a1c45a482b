"""Adapt an async iterator of byte chunks into a byte source.

ASGI frameworks expose request bodies as ``async for chunk in
request.stream()``; this adapter turns that into ``await read(size)`` so the
body can be wrapped by a ``LengthLimitedReader``.
"""

from __future__ import annotations

from typing import AsyncIterable, AsyncIterator


class ChunkIteratorSource:
    """Byte source backed by an async iterable of ``bytes`` chunks.

    A chunk larger than the requested size is split; the unread tail is kept
    and served on the next call. Empty chunks are skipped since ``b""`` is
    reserved for end-of-data.
    """

    def __init__(self, chunks: AsyncIterable[bytes]) -> None:
        self._iterator: AsyncIterator[bytes] = chunks.__aiter__()
        self._pending = b""
        self._finished = False

    async def read(self, size: int = -1) -> bytes:
        if size == 0:
            return b""

        while not self._pending and not self._finished:
            try:
                self._pending = bytes(await self._iterator.__anext__())
            except StopAsyncIteration:
                self._finished = True

        if size < 0:
            chunk, self._pending = self._pending, b""
        else:
            chunk, self._pending = self._pending[:size], self._pending[size:]
        return chunk
