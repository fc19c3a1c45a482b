"""Bounded reading of FastAPI uploads and raw request bodies."""
from __future__ import annotations

import logging

from fastapi import Request, UploadFile

from lengthlimit.adapters.source.iterator import ChunkIteratorSource
from lengthlimit.core.config import settings
from lengthlimit.core.errors import LengthExceededError
from lengthlimit.reader import LengthLimitedReader

logger = logging.getLogger(__name__)


def _limited(source, limit: int) -> LengthLimitedReader:
    return LengthLimitedReader(
        source,
        limit,
        check_at_limit=settings.limits.check_at_limit,
        chunk_size=settings.limits.read_chunk_size,
    )


async def read_upload_file_limited(file: UploadFile, max_bytes: int | None = None) -> bytes:
    """Read an uploaded file enforcing a maximum size.

    Rejects up front when the multipart headers already report an oversized
    file, then reads through a ``LengthLimitedReader`` so a missing or lying
    size header cannot push more than ``max_bytes`` into memory.

    Args:
        file: FastAPI upload file instance.
        max_bytes: Size limit; defaults to ``settings.limits.max_upload_size_mb``.

    Returns:
        File content as bytes if within the allowed size limit.

    Raises:
        LengthExceededError: If the file exceeds the size limit.
        SourceReadError: If reading the upload fails.
    """
    limit = settings.limits.max_upload_bytes if max_bytes is None else max_bytes

    file_size = getattr(file, "size", None)
    if file_size is not None and file_size > limit:
        logger.warning(
            "upload.rejected_by_header",
            extra={"file_size": file_size, "max_bytes": limit},
        )
        raise LengthExceededError(limit, 0)

    return await _limited(file, limit).readall()


async def read_request_body_limited(request: Request, max_bytes: int | None = None) -> bytes:
    """Read a raw request body with a hard cap.

    Args:
        request: Incoming request whose body has not been consumed yet.
        max_bytes: Size limit; defaults to ``settings.limits.max_request_body_bytes``.

    Returns:
        The request body.

    Raises:
        LengthExceededError: If Content-Length or the streamed body exceeds the limit.
        SourceReadError: If the client disconnects mid-body.
    """
    limit = settings.limits.max_request_body_bytes if max_bytes is None else max_bytes

    content_length = request.headers.get("content-length")
    if content_length is not None:
        try:
            declared = int(content_length)
        except ValueError:
            # Invalid Content-Length; the streamed body is still bounded below.
            declared = None
        if declared is not None and declared > limit:
            logger.warning(
                "request_body.rejected_by_header",
                extra={"content_length": declared, "max_bytes": limit},
            )
            raise LengthExceededError(limit, 0)

    return await _limited(ChunkIteratorSource(request.stream()), limit).readall()


async def limited_request_body(request: Request) -> bytes:
    """FastAPI dependency returning the request body bounded by the configured limit.

    Example:
        >>> @app.post("/ingest")
        ... async def ingest(body: bytes = Depends(limited_request_body)): ...
    """
    return await read_request_body_limited(request)
