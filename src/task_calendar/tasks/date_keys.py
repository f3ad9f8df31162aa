# tasks/date_keys.py

from __future__ import annotations

import calendar
from datetime import date


def date_key(day: int, month0: int, year: int) -> str:
    """
    Key for one calendar day: "{day}-{month0}-{year}", month is zero-based.

    Not zero-padded and not validated; every caller (grid, editor, client)
    must build keys through this function so they match.
    """
    return f"{day}-{month0}-{year}"


def date_key_for(d: date) -> str:
    return date_key(d.day, d.month - 1, d.year)


def parse_date_key(key: str) -> tuple[int, int, int]:
    """Inverse of date_key: returns (day, month0, year)."""
    parts = (key or "").split("-")
    if len(parts) != 3:
        raise ValueError(f"not a date key: {key!r}")
    try:
        day, month0, year = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"not a date key: {key!r}") from None
    return day, month0, year


def days_in_month(year: int, month0: int) -> int:
    return calendar.monthrange(year, month0 + 1)[1]


def first_weekday(year: int, month0: int) -> int:
    """Weekday of the 1st of the month, Sunday = 0 .. Saturday = 6."""
    return (calendar.weekday(year, month0 + 1, 1) + 1) % 7


def shift_month(year: int, month0: int, delta: int) -> tuple[int, int]:
    """Move (year, month0) by `delta` months, rolling over year boundaries."""
    y, m = divmod(month0 + delta, 12)
    return year + y, m


def month_grid(year: int, month0: int) -> list[list[int | None]]:
    """
    Weeks of the month, Sunday first.

    Each week has 7 cells; days outside the month are None.
    """
    cal = calendar.Calendar(firstweekday=6)  # 6: Sunday
    return [
        [d if d else None for d in week]
        for week in cal.monthdayscalendar(year, month0 + 1)
    ]
