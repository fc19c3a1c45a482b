"""Tests for the bundled byte sources and the limit shorthands."""

from __future__ import annotations

import pytest

from lengthlimit.adapters.source import AsyncByteSource, BytesSource, ChunkIteratorSource
from lengthlimit.core.errors import LengthExceededError
from lengthlimit.units import limit_bytes, limit_gb, limit_kb, limit_mb


async def _chunks(*parts: bytes):
    for part in parts:
        yield part


@pytest.mark.asyncio
async def test_bytes_source_respects_size_and_chunk_size() -> None:
    source = BytesSource(b"abcdefgh", chunk_size=3)

    assert await source.read(2) == b"ab"
    assert await source.read() == b"cde"
    assert await source.read(100) == b"fgh"
    assert await source.read() == b""
    assert source.position == 8


def test_bytes_source_rejects_invalid_chunk_size() -> None:
    with pytest.raises(ValueError):
        BytesSource(b"abc", chunk_size=0)


@pytest.mark.asyncio
async def test_chunk_iterator_source_splits_and_skips_empty_chunks() -> None:
    source = ChunkIteratorSource(_chunks(b"abc", b"", b"defgh"))

    assert await source.read(2) == b"ab"
    assert await source.read(10) == b"c"
    assert await source.read(0) == b""
    assert await source.read(-1) == b"defgh"
    assert await source.read(10) == b""
    assert await source.read(10) == b""


def test_bundled_sources_satisfy_protocol() -> None:
    assert isinstance(BytesSource(b""), AsyncByteSource)
    assert isinstance(ChunkIteratorSource(_chunks()), AsyncByteSource)


@pytest.mark.asyncio
async def test_limit_shorthands_use_binary_units() -> None:
    source = BytesSource(b"")

    assert limit_bytes(source, 7).limit == 7
    assert limit_kb(source, 2).limit == 2048
    assert limit_mb(source, 1).limit == 1024 * 1024
    assert limit_gb(source, 1).limit == 1024 * 1024 * 1024


@pytest.mark.asyncio
async def test_limit_kb_over_stream() -> None:
    payload = b"x" * 1025

    with pytest.raises(LengthExceededError):
        await limit_kb(BytesSource(payload, chunk_size=100), 1).readall()

    assert await limit_kb(BytesSource(payload[:1024]), 1).readall() == payload[:1024]
