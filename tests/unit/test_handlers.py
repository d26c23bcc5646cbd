"""Tests for the FastAPI exception handlers."""

import json
from typing import Optional
from unittest.mock import Mock

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from pydantic import ValidationError

from cursor_pager.errors.handlers import (
    pagination_exception_handler,
    pydantic_validation_exception_handler,
    register_exception_handlers
)
from cursor_pager.errors.problem_details import DecodeError, FieldNotFoundError
from cursor_pager.pagination import PaginationParams, PaginatedResponse, build_page

ROWS = [{"id": i} for i in range(1, 8)]


class TestExceptionHandlers:
    """Test exception handlers."""
    
    @pytest.fixture
    def mock_request(self):
        """Create mock request."""
        request = Mock(spec=Request)
        request.url.path = "/test/path"
        request.method = "GET"
        return request
    
    @pytest.mark.asyncio
    async def test_decode_error_handler(self, mock_request):
        exc = DecodeError("Invalid cursor format")
        
        response = await pagination_exception_handler(mock_request, exc)
        
        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["title"] == "Invalid Cursor"
        assert body["instance"] == "/test/path"
    
    @pytest.mark.asyncio
    async def test_field_not_found_handler_logs_error(self, mock_request, caplog):
        exc = FieldNotFoundError("Missing")
        
        response = await pagination_exception_handler(mock_request, exc)
        
        assert response.status_code == 500
        assert json.loads(response.body)["field_name"] == "Missing"
        assert any(r.levelname == "ERROR" for r in caplog.records)
    
    @pytest.mark.asyncio
    async def test_validation_handler(self, mock_request):
        with pytest.raises(ValidationError) as exc_info:
            PaginationParams(limit=0)
        
        response = await pydantic_validation_exception_handler(mock_request, exc_info.value)
        
        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["title"] == "Validation Error"
        assert body["detail"].startswith("Invalid pagination parameters: limit:")
        assert body["validation_errors"][0]["loc"] == ["limit"]


@pytest.fixture
def client() -> TestClient:
    """App with one paginated route and the handlers registered."""
    app = FastAPI()
    register_exception_handlers(app)
    
    @app.get("/rows")
    async def list_rows(limit: int = 3, cursor: Optional[str] = None, field: str = "id"):
        params = PaginationParams(limit=limit, cursor=cursor)
        cursor_data = params.decoded_cursor()
        rows = ROWS
        if cursor_data is not None:
            rows = [r for r in ROWS if r["id"] >= int(cursor_data.value)]
        page = build_page(rows[:params.fetch_limit], params.limit, field, params.boundary_value())
        return PaginatedResponse.from_page(page).model_dump()
    
    return TestClient(app, raise_server_exceptions=False)


class TestRegisteredHandlers:
    """Test handlers wired into an application."""
    
    def test_paginated_route(self, client):
        first = client.get("/rows").json()
        assert [r["id"] for r in first["items"]] == [1, 2, 3]
        assert first["has_more"] is True
        
        second = client.get("/rows", params={"cursor": first["next_cursor"]}).json()
        assert [r["id"] for r in second["items"]] == [4, 5, 6]
        assert second["prev_cursor"] is not None
    
    def test_malformed_cursor(self, client):
        response = client.get("/rows", params={"cursor": "not-a-cursor"})
        
        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        assert response.json()["title"] == "Invalid Cursor"
        assert response.json()["instance"] == "/rows"
    
    def test_limit_out_of_range(self, client):
        response = client.get("/rows", params={"limit": 100000})
        
        assert response.status_code == 400
        assert response.json()["title"] == "Validation Error"
    
    def test_unknown_boundary_field(self, client):
        response = client.get("/rows", params={"field": "missing"})
        
        assert response.status_code == 500
        assert response.json()["field_name"] == "missing"
