"""Length-limited wrapper around an asynchronous byte source.

``LengthLimitedReader`` forwards reads to the wrapped source but never asks
for more than the bytes still allowed, so the limit is exact and nothing
already read has to be thrown away. Asking for data past the limit raises
``LengthExceededError`` instead of letting an oversized or endless stream
grow memory without bound.

Usage:
    reader = LengthLimitedReader(request_stream, limit=1024 * 1024)
    body = await reader.readall()
"""

from __future__ import annotations

import logging
from enum import Enum
from types import TracebackType
from typing import NoReturn

from lengthlimit.adapters.source.base import AsyncByteSource
from lengthlimit.core.errors import (
    LengthExceededError,
    LengthLimitError,
    SourceReadError,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8192


class LimitState(str, Enum):
    """Lifecycle of a limited stream.

    ``EXHAUSTED`` and ``FAILED`` are terminal.
    """

    ACTIVE = "active"
    AT_LIMIT = "at_limit"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class LengthLimitedReader:
    """Byte source that refuses to produce more than ``limit`` bytes.

    The reader exposes the same ``await read(size)`` contract as the source it
    wraps, so it can be handed to any consumer of that source (including
    another ``LengthLimitedReader``).

    A stream of exactly ``limit`` bytes is accepted: once the limit is reached
    the next read asks the source for a single byte, returns end-of-data if
    there is none and raises ``LengthExceededError`` otherwise. That extra byte
    is never returned. With ``check_at_limit=False`` any read past the limit
    fails without touching the source.

    Instances are single-owner: one task reads at a time and no locking is
    done.
    """

    def __init__(
        self,
        source: AsyncByteSource,
        limit: int,
        *,
        check_at_limit: bool = True,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Wrap ``source`` with a byte limit.

        Args:
            source: Object exposing ``async read(size) -> bytes``.
            limit: Maximum number of bytes that may ever be returned; 0 is
                allowed and rejects the very first read.
            check_at_limit: Accept a stream that ends exactly at the limit.
            chunk_size: Read size used by ``read_to_end`` and iteration.

        Raises:
            ValueError: If limit is negative or chunk_size is not positive.
        """
        if limit < 0:
            raise ValueError("limit must be >= 0")
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")

        self._source = source
        self._limit = limit
        self._consumed = 0
        self._check_at_limit = check_at_limit
        self._chunk_size = chunk_size
        self._state = LimitState.ACTIVE if limit > 0 else LimitState.AT_LIMIT
        self._failure: LengthLimitError | None = None
        self._failure_tb: TracebackType | None = None

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return (
            f"LengthLimitedReader(limit={self._limit}, consumed={self._consumed}, "
            f"state={self._state.value})"
        )

    @property
    def source(self) -> AsyncByteSource:
        """The wrapped source; reading it directly bypasses the limit."""
        return self._source

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def consumed(self) -> int:
        return self._consumed

    @property
    def remaining(self) -> int:
        """Bytes that may still be returned before the limit is reached."""
        return self._limit - self._consumed

    @property
    def state(self) -> LimitState:
        return self._state

    @property
    def failure(self) -> LengthLimitError | None:
        """The error that made this reader terminal, if any."""
        return self._failure

    async def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes from the source.

        Args:
            size: Maximum bytes to return; negative means "up to the bytes
                still allowed".

        Returns:
            The bytes read, or ``b""`` at end-of-data (and for ``size == 0``).

        Raises:
            LengthExceededError: If the read would go past the limit.
            SourceReadError: If the wrapped source fails.
        """
        if self._state is LimitState.EXHAUSTED:
            return b""
        if self._failure is not None:
            raise self._failure.with_traceback(self._failure_tb)
        if size == 0:
            return b""

        remaining = self.remaining
        if remaining == 0:
            return await self._read_at_limit()

        request = remaining if size < 0 else min(size, remaining)
        data = await self._read_source(request)
        if not data:
            self._mark_exhausted()
            return b""

        if len(data) > remaining:
            # The source ignored the requested size.
            self._fail_exceeded()
        if len(data) > request:
            self._fail_source(
                ValueError(f"source returned {len(data)} bytes for a read of {request}")
            )

        self._consumed += len(data)
        if self._consumed == self._limit:
            self._state = LimitState.AT_LIMIT
        return data

    async def readinto(self, buffer: bytearray | memoryview) -> int:
        """Read into a writable buffer.

        Returns:
            Number of bytes written to ``buffer``; 0 at end-of-data.
        """
        view = memoryview(buffer).cast("B")
        data = await self.read(len(view))
        count = len(data)
        view[:count] = data
        return count

    async def read_to_end(self, buffer: bytearray) -> int:
        """Append everything up to end-of-data to ``buffer``.

        Bytes delivered before a failure stay in ``buffer``.

        Returns:
            Number of bytes appended.

        Raises:
            LengthExceededError: If the source holds more than ``limit`` bytes.
            SourceReadError: If the wrapped source fails.
        """
        start = len(buffer)
        while True:
            chunk = await self.read(self._chunk_size)
            if not chunk:
                return len(buffer) - start
            buffer += chunk

    async def readall(self) -> bytes:
        """Read the whole stream, failing if it is longer than ``limit``."""
        buffer = bytearray()
        await self.read_to_end(buffer)
        return bytes(buffer)

    def __aiter__(self) -> "LengthLimitedReader":
        return self

    async def __anext__(self) -> bytes:
        chunk = await self.read(self._chunk_size)
        if not chunk:
            raise StopAsyncIteration
        return chunk

    async def _read_at_limit(self) -> bytes:
        if self._limit == 0 or not self._check_at_limit:
            self._fail_exceeded()

        extra = await self._read_source(1)
        if not extra:
            self._mark_exhausted()
            return b""
        self._fail_exceeded()

    async def _read_source(self, size: int) -> bytes:
        try:
            return await self._source.read(size)
        except Exception as exc:
            self._fail_source(exc)

    def _mark_exhausted(self) -> None:
        self._state = LimitState.EXHAUSTED
        logger.debug(
            "length_limit.exhausted",
            extra={"limit": self._limit, "consumed": self._consumed},
        )

    def _fail_exceeded(self) -> NoReturn:
        logger.warning(
            "length_limit.exceeded",
            extra={"limit": self._limit, "consumed": self._consumed},
        )
        self._fail(LengthExceededError(self._limit, self._consumed))

    def _fail_source(self, exc: Exception) -> NoReturn:
        logger.warning(
            "length_limit.source_failed",
            extra={
                "error_type": type(exc).__name__,
                "limit": self._limit,
                "consumed": self._consumed,
            },
        )
        self._fail(SourceReadError(exc))

    def _fail(self, error: LengthLimitError) -> NoReturn:
        self._failure = error
        self._state = LimitState.FAILED
        try:
            raise error
        finally:
            # Later reads re-raise with this traceback so it does not grow.
            self._failure_tb = error.__traceback__
