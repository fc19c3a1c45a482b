"""FastAPI exception handlers for length-limit failures.

Design:
- LengthExceededError -> 413 Payload Too Large
- SourceReadError -> 400 Bad Request (the client stream broke)
- Any other LengthLimitError -> 500
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lengthlimit.core.errors import LengthExceededError, LengthLimitError, SourceReadError

logger = logging.getLogger(__name__)


def _status_for(exc: LengthLimitError) -> int:
    if isinstance(exc, LengthExceededError):
        return 413
    if isinstance(exc, SourceReadError):
        return 400
    return 500


async def length_limit_error_handler(request: Request, exc: LengthLimitError) -> JSONResponse:
    """Render a length-limit failure as a consistent JSON error.

    Response body:
    - error.code: Machine-readable error code
    - error.message: Human-readable message
    - error.details: Limit and consumed counts, or the failing cause type

    Args:
        request: FastAPI request object.
        exc: LengthLimitError instance (or subclass).

    Returns:
        JSONResponse with the mapped status code.
    """
    status_code = _status_for(exc)

    logger.warning(
        "length_limit_error_handled",
        extra={
            "error_code": exc.code,
            "status_code": status_code,
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )

    error_content = {
        "code": exc.code,
        "message": exc.message,
    }
    if exc.details:
        error_content["details"] = dict(exc.details)

    return JSONResponse(
        status_code=status_code,
        content={"error": error_content},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the length-limit handlers on a FastAPI app.

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> setup_exception_handlers(app)
    """
    app.exception_handler(LengthLimitError)(length_limit_error_handler)
