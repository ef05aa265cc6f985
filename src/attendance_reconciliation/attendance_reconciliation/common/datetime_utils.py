from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Best-effort conversion of a punch timestamp.

    Accepts datetime objects and ISO-8601 strings (a trailing ``Z`` is read as
    UTC). Anything else, including malformed strings, yields ``None``.
    """

    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_date_value(value: Any) -> Optional[date]:
    """Calendar day of a date, datetime or ISO string; ``None`` if unreadable."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip().split(" ")[0].split("T")[0]
    try:
        return parse_iso_date(text)
    except ValueError:
        return None


def to_local(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Express an aware timestamp in local time; naive values are already local."""

    if value.tzinfo is None:
        return value
    if tz is None:
        return value.astimezone().replace(tzinfo=None)
    return value.astimezone(tz).replace(tzinfo=None)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero."""
    return int((end - start) / timedelta(minutes=1))


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_dates(year: int, month: int) -> list[date]:
    return [date(year, month, day) for day in range(1, days_in_month(year, month) + 1)]


def format_hours(hours: float) -> str:
    """Render decimal hours as H:MM; zero or negative durations render as '-'."""

    if hours <= 0:
        return "-"
    total_minutes = round(hours * 60)
    return f"{total_minutes // 60}:{total_minutes % 60:02d}"


def format_clock(value: Optional[datetime]) -> str:
    return value.strftime("%H:%M") if value else "-"
