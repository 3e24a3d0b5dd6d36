"""
Sword Tracker Backend: Game Analysis API Tests
==============================================

What:  Tests for /api/game-analyses, including the /single/{id} lookup.
"""

import pytest

SAMPLE_PGN = '[Event "Casual"]\n\n1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 1/2-1/2'


class TestGameAnalyses:

    @pytest.mark.asyncio
    async def test_missing_pgn_is_rejected(self, api_client, mock_storage):
        response = await api_client.post("/api/game-analyses", json={"userId": 1, "opponent": "bot"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid analysis data"
        assert body["errors"]
        mock_storage.create_game_analysis.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_accuracy_above_100_is_rejected(self, api_client, mock_storage):
        response = await api_client.post(
            "/api/game-analyses", json={"userId": 1, "pgn": SAMPLE_PGN, "accuracy": 104.5}
        )

        assert response.status_code == 400
        mock_storage.create_game_analysis.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_single_unknown_returns_404(self, api_client, mock_storage):
        mock_storage.get_game_analysis.return_value = None

        response = await api_client.get("/api/game-analyses/single/31")

        assert response.status_code == 404
        assert response.json()["message"] == "Analysis not found"
        mock_storage.get_game_analysis.assert_awaited_once_with(31)

    @pytest.mark.asyncio
    async def test_single_lookup_failure_returns_500(self, api_client, mock_storage):
        mock_storage.get_game_analysis.side_effect = RuntimeError("boom")

        response = await api_client.get("/api/game-analyses/single/31")

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_single_is_not_treated_as_user_id(self, api_client, mock_storage):
        mock_storage.get_game_analysis.return_value = None

        await api_client.get("/api/game-analyses/single/5")

        mock_storage.get_game_analyses.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_save_list_and_fetch(self, memory_client):
        created = await memory_client.post(
            "/api/game-analyses",
            json={
                "userId": 8,
                "pgn": SAMPLE_PGN,
                "opponent": "club_rival",
                "result": "draw",
                "opening": "Ruy Lopez",
                "timeControl": "15+10",
                "accuracy": 87.5,
                "analysis": {"mistakes": [12, 27], "blunders": []},
            },
        )
        assert created.status_code == 200
        analysis_id = created.json()["id"]

        listed = (await memory_client.get("/api/game-analyses/8")).json()
        single = (await memory_client.get(f"/api/game-analyses/single/{analysis_id}")).json()

        assert [item["id"] for item in listed] == [analysis_id]
        assert single["opening"] == "Ruy Lopez"
        assert single["timeControl"] == "15+10"
        assert single["analysis"] == {"mistakes": [12, 27], "blunders": []}
