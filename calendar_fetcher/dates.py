"""Date helpers for the calendar layout. Months are 0-based unless named month1."""

import calendar
import datetime
from typing import List

MONTH_NAMES = [calendar.month_name[m] for m in range(1, 13)]
MONTH_ABBR = [calendar.month_abbr[m] for m in range(1, 13)]

WEEKDAYS_SUN = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
WEEKDAYS_MON = WEEKDAYS_SUN[1:] + WEEKDAYS_SUN[:1]


def day_of_week(year: int, month0: int, day: int) -> int:
    """Returns 0 (Sunday) .. 6 (Saturday)."""
    return datetime.date(year, month0 + 1, day).isoweekday() % 7


def days_in_month(year: int, month0: int) -> int:
    return calendar.monthrange(year, month0 + 1)[1]


def format_date(year: int, month1: int, day: int) -> str:
    return f"{year:04d}-{month1:02d}-{day:02d}"


def format_legend_short(iso_date: str, labels: str) -> str:
    """'2026-04-03' + 'Good Friday' -> 'Apr 3 - Good Friday'"""
    _, m_str, d_str = iso_date.split("-")
    return f"{MONTH_ABBR[int(m_str) - 1]} {int(d_str)} - {labels}"


def month_name(month0: int) -> str:
    return MONTH_NAMES[month0]


def weekday_labels(week_starts_on: int) -> List[str]:
    return WEEKDAYS_MON if week_starts_on == 1 else WEEKDAYS_SUN
