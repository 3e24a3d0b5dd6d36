"""
Sword Tracker Backend: ELO API Tests
====================================

What:  Tests for /api/elo and /api/elo-stats.

What we test:
    ✅ Unknown periods are rejected before storage is called
    ✅ Each valid period is forwarded verbatim
    ✅ Invalid entries never reach storage
    ✅ Stats computed end-to-end through MemoryStorage
"""

from datetime import datetime, timedelta, timezone

import pytest

from sword_tracker.clock import utcnow
from sword_tracker.schemas.elo import EloStatsResponse


class TestEloStatsRoute:

    @pytest.mark.asyncio
    async def test_unknown_period_returns_400_without_storage_call(self, api_client, mock_storage):
        response = await api_client.get("/api/elo-stats/1/abc")

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid period"
        assert "errors" not in body
        mock_storage.get_elo_stats.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("period", ["week", "month", "year"])
    async def test_valid_period_is_forwarded(self, api_client, mock_storage, period):
        mock_storage.get_elo_stats.return_value = EloStatsResponse(period=period)

        response = await api_client.get(f"/api/elo-stats/3/{period}")

        assert response.status_code == 200
        assert response.json()["period"] == period
        mock_storage.get_elo_stats.assert_awaited_once_with(3, period)

    @pytest.mark.asyncio
    async def test_period_is_case_sensitive(self, api_client, mock_storage):
        response = await api_client.get("/api/elo-stats/1/Week")

        assert response.status_code == 400
        mock_storage.get_elo_stats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_window_shape(self, memory_client):
        response = await memory_client.get("/api/elo-stats/1/month")

        assert response.status_code == 200
        assert response.json() == {
            "period": "month",
            "currentRating": None,
            "startingRating": None,
            "change": 0,
            "highestRating": None,
            "lowestRating": None,
            "entryCount": 0,
            "history": [],
        }


class TestCreateEloEntry:

    @pytest.mark.asyncio
    async def test_missing_rating_is_rejected(self, api_client, mock_storage):
        response = await api_client.post("/api/elo", json={"userId": 1})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid ELO entry data"
        assert body["errors"]
        mock_storage.create_elo_entry.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_integer_rating_is_rejected(self, api_client, mock_storage):
        response = await api_client.post("/api/elo", json={"userId": 1, "rating": "high"})

        assert response.status_code == 400
        mock_storage.create_elo_entry.assert_not_awaited()


class TestEloEndToEnd:

    @pytest.mark.asyncio
    async def test_history_and_week_stats(self, memory_client):
        now = utcnow()
        readings = [
            (now - timedelta(days=20), 1400),  # outside the week window
            (now - timedelta(days=5), 1420),
            (now - timedelta(days=3), 1465),
            (now - timedelta(days=1), 1450),
        ]
        for recorded_at, rating in readings:
            response = await memory_client.post(
                "/api/elo",
                json={"userId": 1, "rating": rating, "gameType": "rapid", "recordedAt": recorded_at.isoformat()},
            )
            assert response.status_code == 200

        history = await memory_client.get("/api/elo/1")
        assert [entry["rating"] for entry in history.json()] == [1400, 1420, 1465, 1450]

        stats = (await memory_client.get("/api/elo-stats/1/week")).json()
        assert stats["startingRating"] == 1420
        assert stats["currentRating"] == 1450
        assert stats["change"] == 30
        assert stats["highestRating"] == 1465
        assert stats["lowestRating"] == 1420
        assert stats["entryCount"] == 3

        month = (await memory_client.get("/api/elo-stats/1/month")).json()
        assert month["entryCount"] == 4
        assert month["change"] == 50

    @pytest.mark.asyncio
    async def test_recorded_at_defaults_to_now(self, memory_client):
        before = datetime.now(timezone.utc)

        response = await memory_client.post("/api/elo", json={"userId": 2, "rating": 1300})

        recorded_at = datetime.fromisoformat(response.json()["recordedAt"].replace("Z", "+00:00"))
        assert recorded_at >= before - timedelta(seconds=1)

    @pytest.mark.asyncio
    async def test_other_users_entries_are_excluded(self, memory_client):
        await memory_client.post("/api/elo", json={"userId": 1, "rating": 1500})
        await memory_client.post("/api/elo", json={"userId": 2, "rating": 900})

        response = await memory_client.get("/api/elo/2")

        assert [entry["rating"] for entry in response.json()] == [900]
