"""
Sword Tracker Backend: Position Analysis Tests
==============================================

What:  Tests for POST /api/analyze-position and the mock analyzer.
"""

from unittest.mock import AsyncMock, patch

import pytest

from sword_tracker.schemas.analysis import PositionAnalysis
from sword_tracker.services.position_analysis import MockPositionAnalyzer

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class TestAnalyzePosition:

    @pytest.mark.asyncio
    async def test_empty_body_is_rejected(self, api_client):
        response = await api_client.post("/api/analyze-position", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "FEN position required"

    @pytest.mark.asyncio
    async def test_blank_fen_is_rejected(self, api_client):
        response = await api_client.post("/api/analyze-position", json={"fen": "   "})

        assert response.status_code == 400
        assert response.json()["message"] == "FEN position required"

    @pytest.mark.asyncio
    async def test_requested_depth_is_echoed(self, api_client):
        response = await api_client.post("/api/analyze-position", json={"fen": START_FEN, "depth": 10})

        assert response.status_code == 200
        assert response.json() == {
            "evaluation": 0.4,
            "bestMove": "Nf3",
            "principalVariation": ["Nf3", "d5", "d4", "Nf6"],
            "depth": 10,
        }

    @pytest.mark.asyncio
    async def test_depth_defaults_to_15(self, api_client):
        response = await api_client.post("/api/analyze-position", json={"fen": START_FEN})

        assert response.json()["depth"] == 15

    @pytest.mark.asyncio
    @pytest.mark.parametrize("depth", [0, -3, "deep"])
    async def test_invalid_depth_is_rejected(self, api_client, depth):
        response = await api_client.post("/api/analyze-position", json={"fen": START_FEN, "depth": depth})

        assert response.status_code == 400
        assert response.json()["errors"]

    @pytest.mark.asyncio
    async def test_analyzer_receives_stripped_fen(self, api_client):
        fake = AsyncMock()
        fake.analyze.return_value = PositionAnalysis(
            evaluation=-1.2, best_move="e5", principal_variation=["e5"], depth=4
        )
        with patch("sword_tracker.services.position_analysis.position_analyzer", fake):
            response = await api_client.post(
                "/api/analyze-position", json={"fen": f"  {START_FEN} ", "depth": 4}
            )

        assert response.json()["bestMove"] == "e5"
        fake.analyze.assert_awaited_once_with(START_FEN, 4)

    @pytest.mark.asyncio
    async def test_analyzer_failure_returns_analysis_error(self, api_client):
        fake = AsyncMock()
        fake.analyze.side_effect = RuntimeError("engine crashed")
        with patch("sword_tracker.services.position_analysis.position_analyzer", fake):
            response = await api_client.post("/api/analyze-position", json={"fen": START_FEN})

        assert response.status_code == 500
        assert response.json()["message"] == "Analysis error"
        assert "engine crashed" not in response.text


class TestMockPositionAnalyzer:

    def setup_method(self):
        self.analyzer = MockPositionAnalyzer()

    @pytest.mark.asyncio
    async def test_same_answer_for_every_position(self):
        first = await self.analyzer.analyze(START_FEN, 12)
        second = await self.analyzer.analyze("8/8/8/8/8/8/8/K6k w - - 0 1", 12)

        assert first == second
        assert first.best_move == "Nf3"

    @pytest.mark.asyncio
    async def test_principal_variation_is_not_shared(self):
        result = await self.analyzer.analyze(START_FEN, 1)
        result.principal_variation.append("c4")

        again = await self.analyzer.analyze(START_FEN, 1)

        assert again.principal_variation == ["Nf3", "d5", "d4", "Nf6"]
