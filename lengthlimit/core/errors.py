"""Exception types raised by length-limited readers and writers.

Every failure carries a stable machine-readable ``code`` plus structured
``details`` so callers (and the FastAPI handlers in ``lengthlimit.web``) can
log and report violations consistently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability and clients."""

    code: str
    message: str
    hint: str
    limit: int
    consumed: int
    http_status: int
    cause_type: str
    context: NotRequired[dict[str, Any]]


@dataclass
class LengthLimitError(Exception):
    """Base error for length-limited stream failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class LengthExceededError(LengthLimitError):
    """Raised when a caller asks for bytes beyond the configured limit.

    The stream is considered unusable afterwards; nothing past ``limit`` is
    ever handed out.
    """

    def __init__(self, limit: int, consumed: int) -> None:
        super().__init__(
            code="length_exceeded",
            message=f"Length limit exceeded: limit is {limit} bytes",
            details={"limit": limit, "consumed": consumed},
        )

    @property
    def limit(self) -> int:
        return self.details["limit"]

    @property
    def consumed(self) -> int:
        return self.details["consumed"]


class SourceReadError(LengthLimitError):
    """Raised when the wrapped byte source fails.

    The original exception is kept on ``cause`` and as ``__cause__``.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(
            code="source_read_failed",
            message=f"Underlying source failed: {cause}",
            details={"cause_type": type(cause).__name__},
        )
        self.cause = cause
        self.__cause__ = cause


class SinkWriteError(LengthLimitError):
    """Raised when the wrapped byte sink fails."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(
            code="sink_write_failed",
            message=f"Underlying sink failed: {cause}",
            details={"cause_type": type(cause).__name__},
        )
        self.cause = cause
        self.__cause__ = cause
