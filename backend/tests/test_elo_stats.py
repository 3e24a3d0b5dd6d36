"""Unit tests for the ELO period helpers and summary computation."""

from datetime import datetime, timedelta, timezone

import pytest

from sword_tracker.schemas.elo import EloEntryResponse
from sword_tracker.services.elo_stats import is_valid_period, period_start, summarize_elo_history

NOW = datetime(2024, 6, 30, 18, 0, tzinfo=timezone.utc)


def entry(entry_id: int, rating: int, days_ago: float) -> EloEntryResponse:
    return EloEntryResponse(
        id=entry_id, user_id=1, rating=rating, recorded_at=NOW - timedelta(days=days_ago)
    )


class TestPeriods:

    @pytest.mark.parametrize("period, days", [("week", 7), ("month", 30), ("year", 365)])
    def test_window_lengths(self, period, days):
        assert period_start(period, NOW) == NOW - timedelta(days=days)

    @pytest.mark.parametrize("period", ["day", "", "WEEK", "weeks"])
    def test_unknown_periods(self, period):
        assert is_valid_period(period) is False

    def test_unknown_period_start_raises(self):
        with pytest.raises(KeyError):
            period_start("decade", NOW)


class TestSummarize:

    def test_unordered_input_is_sorted_chronologically(self):
        entries = [entry(3, 1530, 1), entry(1, 1500, 6), entry(2, 1480, 3)]

        stats = summarize_elo_history("week", entries)

        assert stats.starting_rating == 1500
        assert stats.current_rating == 1530
        assert stats.change == 30
        assert stats.lowest_rating == 1480
        assert stats.highest_rating == 1530
        assert [e.id for e in stats.history] == [1, 2, 3]

    def test_same_timestamp_breaks_ties_by_id(self):
        stamp = NOW - timedelta(hours=2)
        first = EloEntryResponse(id=10, user_id=1, rating=1600, recorded_at=stamp)
        second = EloEntryResponse(id=11, user_id=1, rating=1612, recorded_at=stamp)

        stats = summarize_elo_history("month", [second, first])

        assert stats.current_rating == 1612
        assert stats.change == 12

    def test_single_entry(self):
        stats = summarize_elo_history("year", [entry(1, 1333, 40)])

        assert stats.change == 0
        assert stats.entry_count == 1
        assert stats.highest_rating == stats.lowest_rating == 1333

    def test_empty(self):
        stats = summarize_elo_history("week", [])

        assert stats.period == "week"
        assert stats.entry_count == 0
        assert stats.history == []
        assert stats.starting_rating is None
