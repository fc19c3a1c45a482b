"""Byte source interface.

Limited readers depend on this structural protocol rather than on a base
class, so ``asyncio.StreamReader``, Starlette's ``UploadFile`` and another
``LengthLimitedReader`` can all be wrapped as they are.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AsyncByteSource(Protocol):
    """Anything that produces bytes on demand, possibly suspending."""

    async def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes.

        Args:
            size: Maximum number of bytes to return; negative means no cap.

        Returns:
            Between 1 and ``size`` bytes, or ``b""`` once the source has no
            more data.

        Raises:
            Exception: Any failure of the underlying transport.
        """
        ...
