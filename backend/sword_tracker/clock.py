"""Timezone-aware time helpers shared by models, schemas and storage."""

from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime (never naive)."""
    return datetime.now(timezone.utc)


def utctoday() -> date:
    return utcnow().date()


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
