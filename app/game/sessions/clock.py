from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo


def local_date(now_utc: datetime, *, tz_name: str) -> date:
    """Converts a UTC datetime to the calendar date of the game timezone."""
    return now_utc.astimezone(ZoneInfo(tz_name)).date()


def next_challenge_at(now_utc: datetime, *, tz_name: str, reset_hour: int) -> datetime:
    """Returns tomorrow's reset moment (local ``reset_hour``:00) as a UTC datetime."""
    zone = ZoneInfo(tz_name)
    tomorrow = local_date(now_utc, tz_name=tz_name) + timedelta(days=1)
    return datetime.combine(tomorrow, time(hour=reset_hour), tzinfo=zone).astimezone(timezone.utc)
