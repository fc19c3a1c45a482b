"""FastAPI/Starlette helpers for bounded uploads and request bodies."""

from lengthlimit.web.exception_handlers import setup_exception_handlers
from lengthlimit.web.uploads import (
    limited_request_body,
    read_request_body_limited,
    read_upload_file_limited,
)

__all__ = [
    "limited_request_body",
    "read_request_body_limited",
    "read_upload_file_limited",
    "setup_exception_handlers",
]
