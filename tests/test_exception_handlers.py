"""Tests for the length-limit exception handlers.

Validates status code mapping and the JSON error shape.
"""

import asyncio
import json
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lengthlimit.core.errors import (
    LengthExceededError,
    LengthLimitError,
    SinkWriteError,
    SourceReadError,
)
from lengthlimit.web.exception_handlers import length_limit_error_handler, setup_exception_handlers


@pytest.fixture
def app_with_handlers() -> FastAPI:
    """Create FastAPI app with exception handlers registered."""
    app = FastAPI()
    setup_exception_handlers(app)
    return app


@pytest.fixture
def client(app_with_handlers: FastAPI) -> TestClient:
    return TestClient(app_with_handlers)


class TestLengthLimitErrorHandler:
    """Status mapping for each error kind."""

    def test_length_exceeded_returns_413(self, client: TestClient, app_with_handlers: FastAPI):
        @app_with_handlers.get("/too-long")
        async def too_long():
            raise LengthExceededError(limit=10, consumed=10)

        response = client.get("/too-long")

        assert response.status_code == 413
        data = response.json()
        assert data["error"]["code"] == "length_exceeded"
        assert data["error"]["details"] == {"limit": 10, "consumed": 10}

    def test_source_failure_returns_400(self, client: TestClient, app_with_handlers: FastAPI):
        @app_with_handlers.get("/broken")
        async def broken():
            raise SourceReadError(ConnectionResetError("client went away"))

        response = client.get("/broken")

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "source_read_failed"
        assert data["error"]["details"] == {"cause_type": "ConnectionResetError"}

    def test_other_errors_return_500(self, client: TestClient, app_with_handlers: FastAPI):
        @app_with_handlers.get("/sink")
        async def sink():
            raise SinkWriteError(OSError("disk full"))

        response = client.get("/sink")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "sink_write_failed"

    def test_details_omitted_when_absent(self):
        request = AsyncMock()
        request.url.path = "/test"
        request.method = "POST"

        exc = LengthLimitError(code="custom", message="Custom failure")
        response = asyncio.run(length_limit_error_handler(request, exc))

        data = json.loads(bytes(response.body).decode())
        assert response.status_code == 500
        assert data == {"error": {"code": "custom", "message": "Custom failure"}}


def test_setup_exception_handlers_registers_handler(app_with_handlers: FastAPI):
    assert LengthLimitError in app_with_handlers.exception_handlers


def test_error_str_is_message():
    exc = LengthExceededError(limit=3, consumed=3)

    assert str(exc) == "Length limit exceeded: limit is 3 bytes"
    assert exc.limit == 3
    assert exc.consumed == 3
