"""Shorthand constructors for common limit sizes.

Kilobytes, megabytes and gigabytes are binary units (1 KB = 1024 bytes).
"""

from __future__ import annotations

from typing import Any

from lengthlimit.adapters.source.base import AsyncByteSource
from lengthlimit.reader import LengthLimitedReader

KB = 1024
MB = 1024 * KB
GB = 1024 * MB


def limit_bytes(source: AsyncByteSource, max_bytes: int, **kwargs: Any) -> LengthLimitedReader:
    """Wrap ``source`` so it yields at most ``max_bytes`` bytes."""
    return LengthLimitedReader(source, max_bytes, **kwargs)


def limit_kb(source: AsyncByteSource, max_kb: int, **kwargs: Any) -> LengthLimitedReader:
    return limit_bytes(source, max_kb * KB, **kwargs)


def limit_mb(source: AsyncByteSource, max_mb: int, **kwargs: Any) -> LengthLimitedReader:
    return limit_bytes(source, max_mb * MB, **kwargs)


def limit_gb(source: AsyncByteSource, max_gb: int, **kwargs: Any) -> LengthLimitedReader:
    return limit_bytes(source, max_gb * GB, **kwargs)
