from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple
from zoneinfo import ZoneInfo

MINUTES_PER_DAY = 24 * 60


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def time_to_minutes(value: str) -> int:
    """Convert an ``HH:MM`` string to minutes since midnight."""
    hours, minutes = value.strip().split(":")[:2]
    return int(hours) * 60 + int(minutes)


def minutes_to_time(total_minutes: int) -> str:
    """Format minutes since midnight as zero-padded ``HH:MM``, wrapping past 24h."""
    total_minutes = int(total_minutes)
    hours = (total_minutes // 60) % 24
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"


def now_utc() -> datetime:
    """Current time as an aware UTC datetime.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    # Naive datetimes coming out of the database are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_local(value: datetime, tz: ZoneInfo) -> datetime:
    return ensure_utc(value).astimezone(tz)


def local_minutes(value: datetime, tz: ZoneInfo) -> int:
    """Minutes since local midnight, truncated to the minute."""
    local = to_local(value, tz)
    return local.hour * 60 + local.minute


def day_of_week(value: date) -> int:
    """Sunday-first day index (0=Sunday..6=Saturday)."""
    return (value.weekday() + 1) % 7


def local_date_bounds(day: date, tz: ZoneInfo) -> Tuple[datetime, datetime]:
    """UTC range ``[start, end)`` covering local midnight-to-midnight of ``day``."""
    start_local = datetime.combine(day, time.min, tzinfo=tz)
    end_local = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start_local.astimezone(timezone.utc), end_local.astimezone(timezone.utc)


def local_day_bounds(now: datetime, tz: ZoneInfo) -> Tuple[datetime, datetime]:
    return local_date_bounds(to_local(now, tz).date(), tz)
