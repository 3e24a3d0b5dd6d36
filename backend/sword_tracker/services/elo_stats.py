"""
Sword Tracker Backend: ELO Statistics
=====================================

What:  Pure functions turning a user's rating history into period summaries.
Who:   Both Storage implementations call these, so the memory and database
       backends produce identical statistics.

    period_start("week", now)  → now - 7 days
    summarize_elo_history(...) → EloStatsResponse
"""

from datetime import datetime
from typing import Optional, Sequence

from sword_tracker.clock import utcnow
from sword_tracker.schemas.elo import ELO_PERIODS, EloEntryResponse, EloStatsResponse


def is_valid_period(period: str) -> bool:
    return period in ELO_PERIODS


def period_start(period: str, now: Optional[datetime] = None) -> datetime:
    """
    Earliest `recorded_at` included in the period window.

    Raises:
        KeyError: `period` is not one of week, month, year. Routes reject
                  unknown periods before storage is called.
    """
    return (now or utcnow()) - ELO_PERIODS[period]


def summarize_elo_history(
    period: str, entries: Sequence[EloEntryResponse]
) -> EloStatsResponse:
    """
    Summarize entries already restricted to the period window.

    Args:
        period:  Period name echoed back in the response
        entries: Entries within the window, in any order

    Returns:
        EloStatsResponse; an empty window yields null ratings and change 0.
    """
    ordered = sorted(entries, key=lambda entry: (entry.recorded_at, entry.id))
    if not ordered:
        return EloStatsResponse(period=period)

    ratings = [entry.rating for entry in ordered]
    return EloStatsResponse(
        period=period,
        current_rating=ratings[-1],
        starting_rating=ratings[0],
        change=ratings[-1] - ratings[0],
        highest_rating=max(ratings),
        lowest_rating=min(ratings),
        entry_count=len(ordered),
        history=ordered,
    )
