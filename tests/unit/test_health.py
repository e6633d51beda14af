"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test health endpoint returns healthy status."""
    response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert data["version"] == "0.1.0"
    assert data["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_api_root_returns_info(client: AsyncClient) -> None:
    """Test API root endpoint returns API info."""
    response = await client.get("/api/")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Heading Outline Analyzer API"
    assert data["version"] == "0.1.0"
    assert data["env"] == "test"


@pytest.mark.asyncio
async def test_unknown_path_uses_error_envelope(client: AsyncClient) -> None:
    """Test unknown routes return the standard error envelope."""
    response = await client.get("/api/nope")

    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


@pytest.mark.asyncio
async def test_request_id_generated(client: AsyncClient) -> None:
    """Test a request ID is generated when the client sends none."""
    response = await client.get("/api/health")

    assert response.headers["x-request-id"]
