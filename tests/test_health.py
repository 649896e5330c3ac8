"""Tests for health check endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from citizen_services.modules import discover_modules


async def test_liveness_endpoint(client: AsyncClient):
    """Test that liveness endpoint returns 200."""
    response = await client.get("/health/live")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "alive"


async def test_readiness_endpoint(client: AsyncClient):
    """Test that readiness endpoint returns 200 with healthy checks."""
    response = await client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert "checks" in data
    assert data["checks"] == {
        "permission_resolver": "ok",
        "session_factory": "ok",
        "permission_store": "ok",
    }


async def test_readiness_reports_degraded_store(app: FastAPI, client: AsyncClient):
    """Test that readiness returns 503 when the store cannot be queried."""
    session = AsyncMock()
    session.__aenter__.return_value = session
    session.execute.side_effect = ConnectionRefusedError("store down")
    app.state.session_factory = MagicMock(return_value=session)

    response = await client.get("/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"]["permission_store"] == "store down"
    assert data["checks"]["permission_resolver"] == "ok"


async def test_info_endpoint(client: AsyncClient):
    """Test that info endpoint returns application metadata."""
    response = await client.get("/info")

    assert response.status_code == 200
    data = response.json()
    assert data["environment"] == "test"
    assert data["admin_id_header"] == "x-admin-id"
    assert "app" in data


async def test_request_id_is_echoed(client: AsyncClient):
    """Test that a caller-supplied request id comes back on the response."""
    response = await client.get("/health/live", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.parametrize("path", ["/api/v1/roles", "/api/v1/permissions", "/api/v1/admins"])
async def test_module_routes_are_mounted(client: AsyncClient, path: str):
    """Test that discovered module routers are mounted behind the gate."""
    response = await client.get(path)

    assert response.status_code == 401


async def test_readiness_without_resolver(app: FastAPI, client: AsyncClient):
    """Test that readiness is degraded when the gate has no resolver to ask."""
    app.state.permission_resolver = None

    response = await client.get("/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"]["permission_resolver"] == "not configured"
    assert data["checks"]["permission_store"] == "ok"


def test_discover_modules():
    """Test that every resource package contributes its router."""
    prefixes = [router.prefix for router in discover_modules()]

    assert prefixes == ["/admins", "/permissions", "/roles"]
