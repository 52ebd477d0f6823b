"""Tests for the public health, database check and root endpoints."""

from datetime import datetime

import pytest
from httpx import AsyncClient

from gestor_fincas.db.init_db import INITIAL_PROBE_MESSAGE


@pytest.mark.asyncio
async def test_root_greeting(async_client: AsyncClient):
    resp = await async_client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Gestor Fincas IA API"


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    resp = await async_client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))


@pytest.mark.asyncio
async def test_database_check_returns_seeded_record(async_client: AsyncClient, seeded_db):
    resp = await async_client.get("/api/test-db")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")

    data = resp.json()
    assert data["status"] == "success"
    assert data["message"] == "Database connection working correctly"
    assert "error" not in data
    assert [r["message"] for r in data["existingRecords"]] == [INITIAL_PROBE_MESSAGE]
    assert data["timestamp"]


@pytest.mark.asyncio
async def test_database_check_inserts_a_record_per_call(async_client: AsyncClient, seeded_db):
    first = (await async_client.get("/api/test-db")).json()
    second = (await async_client.get("/api/test-db")).json()

    assert len(second["existingRecords"]) == len(first["existingRecords"]) + 1
    assert second["existingRecords"][0]["message"].startswith("Test connection at ")


@pytest.mark.asyncio
async def test_database_check_returns_at_most_five(async_client: AsyncClient):
    for _ in range(7):
        resp = await async_client.get("/api/test-db")
    assert len(resp.json()["existingRecords"]) == 5


@pytest.mark.asyncio
async def test_unknown_route_uses_error_shape(async_client: AsyncClient):
    resp = await async_client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Not Found"}
