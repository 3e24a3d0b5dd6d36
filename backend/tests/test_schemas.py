"""
Sword Tracker Backend: Schema Tests
===================================

What:  Validation rules that live in the pydantic schemas: camelCase
       aliases, PATCH allow-lists, UTC normalization and cross-field checks.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from sword_tracker.schemas.course import CourseCreate, CourseUpdate
from sword_tracker.schemas.daily_goal import DailyGoalUpdate
from sword_tracker.schemas.elo import EloEntryCreate
from sword_tracker.schemas.goal import GoalUpdate
from sword_tracker.schemas.user import UserCreate, UserUpdate


class TestCamelCase:

    def test_both_spellings_accepted(self):
        by_alias = UserCreate.model_validate({"username": "a", "currentElo": 1500})
        by_name = UserCreate(username="a", current_elo=1500)

        assert by_alias == by_name

    def test_dump_by_alias(self):
        dumped = UserCreate(username="a", target_elo=1700).model_dump(by_alias=True)

        assert dumped["targetElo"] == 1700
        assert "target_elo" not in dumped


class TestPartialUpdates:

    def test_changes_only_contain_sent_keys(self):
        update = GoalUpdate.model_validate({"currentValue": 3, "description": None})

        assert update.changes() == {"current_value": 3, "description": None}

    def test_empty_patch_changes_nothing(self):
        assert DailyGoalUpdate.model_validate({}).changes() == {}

    def test_unknown_key_is_rejected(self):
        with pytest.raises(ValidationError):
            CourseUpdate.model_validate({"id": 4})

    def test_owner_cannot_be_reassigned(self):
        with pytest.raises(ValidationError):
            GoalUpdate.model_validate({"userId": 2})

    @pytest.mark.parametrize("field", ["username", "currentElo"])
    def test_null_for_required_column_is_rejected(self, field):
        with pytest.raises(ValidationError):
            UserUpdate.model_validate({field: None})

    def test_wrong_type_is_rejected(self):
        with pytest.raises(ValidationError):
            DailyGoalUpdate.model_validate({"completed": "maybe"})


class TestCourseProgress:

    def test_completed_cannot_exceed_total(self):
        with pytest.raises(ValidationError):
            CourseCreate(user_id=1, title="Book", total_lessons=5, completed_lessons=6)

    def test_unknown_total_accepts_any_progress(self):
        course = CourseCreate(user_id=1, title="Video series", completed_lessons=8)

        assert course.total_lessons == 0


class TestUtcNormalization:

    def test_naive_datetime_is_treated_as_utc(self):
        created = EloEntryCreate(user_id=1, rating=1400, recorded_at=datetime(2024, 1, 1, 9, 30))

        assert created.recorded_at == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)

    def test_offset_datetime_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        created = EloEntryCreate(
            user_id=1, rating=1400, recorded_at=datetime(2024, 1, 1, 11, 30, tzinfo=plus_two)
        )

        assert created.recorded_at.utcoffset() == timedelta(0)
        assert created.recorded_at.hour == 9
