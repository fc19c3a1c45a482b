"""Length-limited wrapper around an asynchronous byte sink.

Write-side counterpart of ``lengthlimit.reader``: each write is capped to the
bytes still allowed and anything past the limit is rejected with
``LengthExceededError``.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import NoReturn

from lengthlimit.adapters.sink.base import AsyncByteSink
from lengthlimit.core.errors import LengthExceededError, LengthLimitError, SinkWriteError
from lengthlimit.reader import LimitState

logger = logging.getLogger(__name__)


class LengthLimitedWriter:
    """Byte sink that accepts at most ``limit`` bytes in total."""

    def __init__(self, sink: AsyncByteSink, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must be >= 0")

        self._sink = sink
        self._limit = limit
        self._consumed = 0
        self._failure: LengthLimitError | None = None
        self._failure_tb: TracebackType | None = None

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return (
            f"LengthLimitedWriter(limit={self._limit}, consumed={self._consumed}, "
            f"state={self.state.value})"
        )

    @property
    def sink(self) -> AsyncByteSink:
        return self._sink

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def consumed(self) -> int:
        """Bytes accepted by the sink so far."""
        return self._consumed

    @property
    def remaining(self) -> int:
        return self._limit - self._consumed

    @property
    def state(self) -> LimitState:
        if self._failure is not None:
            return LimitState.FAILED
        if self._consumed == self._limit:
            return LimitState.AT_LIMIT
        return LimitState.ACTIVE

    async def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write as much of ``data`` as the limit allows.

        Returns:
            Number of bytes accepted by the sink. A count shorter than
            ``len(data)`` means the rest was cut off by the limit or by the
            sink; writing that rest again raises once the limit is reached.

        Raises:
            LengthExceededError: If the limit is already reached.
            SinkWriteError: If the wrapped sink fails.
        """
        if self._failure is not None:
            raise self._failure.with_traceback(self._failure_tb)
        if not data:
            return 0

        remaining = self.remaining
        if remaining == 0:
            logger.warning(
                "length_limit.write_rejected",
                extra={
                    "limit": self._limit,
                    "consumed": self._consumed,
                    "rejected_bytes": len(data),
                },
            )
            self._fail(LengthExceededError(self._limit, self._consumed))

        chunk = bytes(data[:remaining])
        try:
            accepted = await self._sink.write(chunk)
        except Exception as exc:
            logger.warning(
                "length_limit.sink_failed",
                extra={"error_type": type(exc).__name__, "consumed": self._consumed},
            )
            self._fail(SinkWriteError(exc))

        if not 0 <= accepted <= len(chunk):
            self._fail(
                SinkWriteError(ValueError(f"sink reported {accepted} bytes for a write of {len(chunk)}"))
            )

        self._consumed += accepted
        return accepted

    async def write_all(self, data: bytes | bytearray | memoryview) -> None:
        """Write all of ``data`` or raise.

        Raises:
            LengthExceededError: If ``data`` does not fit in the remaining limit.
            SinkWriteError: If the sink fails or stops accepting bytes.
        """
        view = memoryview(data).cast("B")
        while view:
            accepted = await self.write(view)
            if accepted == 0:
                self._fail(SinkWriteError(BrokenPipeError("sink accepted no bytes")))
            view = view[accepted:]

    def _fail(self, error: LengthLimitError) -> NoReturn:
        self._failure = error
        try:
            raise error
        finally:
            self._failure_tb = error.__traceback__
