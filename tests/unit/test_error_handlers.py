"""Tests for the error envelope handlers."""

import json

import pytest
from fastapi import Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.api.errors import http_error_handler, planner_error_handler
from backend.app.errors import JsonParseError, UpstreamError


def _request() -> Request:
    return Request(
        {"type": "http", "method": "POST", "path": "/api/plan", "headers": [], "query_string": b""}
    )


@pytest.mark.asyncio
async def test_planner_error_hides_detail() -> None:
    """Test only the public message reaches the body."""
    response = await planner_error_handler(_request(), JsonParseError("line 3 column 7"))

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Failed to parse trip data. Please try again."}
    assert b"column" not in response.body


@pytest.mark.asyncio
async def test_planner_error_keeps_upstream_status() -> None:
    """Test the status carried by the error is used."""
    response = await planner_error_handler(_request(), UpstreamError(503, "overloaded"))

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_method_not_allowed_message_and_headers() -> None:
    """Test 405 uses the fixed message and keeps the Allow header."""
    exc = StarletteHTTPException(status_code=405, headers={"Allow": "OPTIONS, POST"})

    response = await http_error_handler(_request(), exc)

    assert response.status_code == 405
    assert json.loads(response.body) == {"error": "Method not allowed"}
    assert response.headers["allow"] == "OPTIONS, POST"
