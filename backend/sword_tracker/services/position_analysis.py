"""
Sword Tracker Backend: Position Analysis Service
================================================

What:  Interface for chess-position evaluation plus the placeholder
       implementation the API currently ships with.
How:   Routes depend on the abstract PositionAnalyzer; a real engine
       (Stockfish over UCI, a hosted evaluation API) plugs in by subclassing
       it and replacing the `position_analyzer` singleton.

The mock performs no computation: it returns a fixed evaluation, best move
and principal variation for every position, echoing the requested depth.
"""

import logging
from abc import ABC, abstractmethod

from sword_tracker.schemas.analysis import PositionAnalysis

logger = logging.getLogger(__name__)


class PositionAnalyzer(ABC):
    """
    Contract for position evaluation.

    Implementations receive a FEN that is known to be non-empty (the route
    rejects missing positions) and a positive depth.
    """

    @abstractmethod
    async def analyze(self, fen: str, depth: int) -> PositionAnalysis:
        """
        Evaluate a position.

        Args:
            fen:   Board position in Forsyth-Edwards Notation
            depth: Search depth in plies

        Returns:
            PositionAnalysis with evaluation (pawns, White's perspective),
            best move and principal variation in SAN.
        """
        ...


class MockPositionAnalyzer(PositionAnalyzer):
    """Returns the same canned analysis for every position."""

    EVALUATION = 0.4
    BEST_MOVE = "Nf3"
    PRINCIPAL_VARIATION = ("Nf3", "d5", "d4", "Nf6")

    async def analyze(self, fen: str, depth: int) -> PositionAnalysis:
        logger.debug("Mock analysis requested: depth=%d fen=%s", depth, fen[:40])
        return PositionAnalysis(
            evaluation=self.EVALUATION,
            best_move=self.BEST_MOVE,
            principal_variation=list(self.PRINCIPAL_VARIATION),
            depth=depth,
        )


position_analyzer: PositionAnalyzer = MockPositionAnalyzer()
