"""
Sword Tracker Backend: Health Check Tests
=========================================

What:  Tests for GET /health under both storage backends.
"""

from unittest.mock import AsyncMock

import pytest

from sword_tracker import __version__
from sword_tracker.config import settings
from sword_tracker.routes import health


class TestHealth:

    @pytest.mark.asyncio
    async def test_memory_backend_is_healthy_without_database(self, api_client, monkeypatch):
        monkeypatch.setattr(settings, "storage_backend", "memory")

        response = await api_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "memory"
        assert body["database"] == "not_used"
        assert body["version"] == __version__
        assert body["uptimeSeconds"] >= 0

    @pytest.mark.asyncio
    async def test_reachable_database(self, api_client, monkeypatch):
        monkeypatch.setattr(settings, "storage_backend", "database")
        monkeypatch.setattr(health, "check_database", AsyncMock(return_value="connected"))

        response = await api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unreachable_database_returns_503(self, api_client, monkeypatch):
        monkeypatch.setattr(settings, "storage_backend", "database")
        monkeypatch.setattr(health, "check_database", AsyncMock(return_value="disconnected"))

        response = await api_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    @pytest.mark.asyncio
    async def test_check_database_runs_select_1(self):
        # The test engine points at an in-memory SQLite database
        assert await health.check_database() == "connected"
