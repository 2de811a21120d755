from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from .numbers import round_half_up


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_hhmm(value: str) -> time:
    """Parse a wall-clock ``H:MM`` / ``HH:MM`` string.

    Raises ValueError on anything else (e.g. '9h', '25:00').
    """
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    return time(hour=int(parts[0]), minute=int(parts[1]))


def coerce_timestamp(value: Any) -> Optional[datetime]:
    """Return a datetime for datetime or ISO-8601 input, None if unusable."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.isoweekday() - 1)


def format_minutes_of_day(total_minutes: float) -> str:
    """Format minutes since midnight as HH:MM; '00:00' for unusable input."""
    if total_minutes != total_minutes or total_minutes < 0:
        return "00:00"
    hours = int(total_minutes // 60)
    minutes = round_half_up(total_minutes % 60)
    if minutes == 60:
        hours, minutes = hours + 1, 0
    return f"{hours:02d}:{minutes:02d}"


def to_wall_clock(value: datetime) -> datetime:
    """Drop tzinfo, keeping the local time the event was recorded at."""
    return value.replace(tzinfo=None) if value.tzinfo is not None else value
