"""
Weekly aggregation.

Weeks run Monday to Sunday.  Dates are handled as ISO ``YYYY-MM-DD``
strings; because the format is fixed-width, comparing the strings is
the same as comparing the dates, so range filtering needs no parsing.

"Today" is whatever the caller passes in; the API uses the server's
local calendar date.
"""

from __future__ import annotations

import datetime
from typing import Iterable, NamedTuple, Sequence, TypeVar

from app.logbook.records import field

# Korean day names indexed by ``date.isoweekday() % 7`` (Sunday first)
DAY_NAMES = ["일", "월", "화", "수", "목", "금", "토"]


# a log record with ``date`` and ``total_duration``, as attributes or mapping keys
L = TypeVar("L")


class WeekRange(NamedTuple):
    start: str
    end: str


def _as_date(value: datetime.date | str) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(value)


def get_week_range(date: datetime.date | str) -> WeekRange:
    """Monday and Sunday of the week containing ``date``.

    Day-of-week arithmetic is locale independent: with Sunday as day 0,
    Sunday steps back six days to the previous Monday and every other
    day steps back ``day - 1``.
    """
    d = _as_date(date)
    day = d.isoweekday() % 7
    monday = d + datetime.timedelta(days=(-6 if day == 0 else 1 - day))
    sunday = monday + datetime.timedelta(days=6)
    return WeekRange(monday.isoformat(), sunday.isoformat())


def filter_and_sum(logs: Iterable[L], start: str, end: str) -> tuple[list[L], int]:
    """Logs dated within ``[start, end]`` and the sum of their totals.

    Input order is preserved.  A log without a total counts as zero.
    """
    in_range = [log for log in logs if start <= field(log, "date") <= end]
    total = sum(field(log, "total_duration", 0) or 0 for log in in_range)
    return in_range, total


def week_days(date: datetime.date | str) -> list[tuple[str, str]]:
    """The seven ``(iso_date, day_name)`` pairs of the week containing ``date``."""
    monday = datetime.date.fromisoformat(get_week_range(date).start)
    days = []
    for offset in range(7):
        day = monday + datetime.timedelta(days=offset)
        days.append((day.isoformat(), DAY_NAMES[day.isoweekday() % 7]))
    return days


class WeekSummary(NamedTuple):
    range: WeekRange
    logs: list
    total_duration: int
    days: list[tuple[str, str, object]]


def summarize_week(logs: Sequence[L], today: datetime.date | str) -> WeekSummary:
    """Bucket ``logs`` into the week of ``today``.

    Logs come back oldest first; ``days`` pairs every weekday with the
    log recorded on it, or None.
    """
    week = get_week_range(today)
    in_range, total = filter_and_sum(logs, week.start, week.end)
    in_range.sort(key=lambda log: field(log, "date"))
    by_date = { field(log, "date"): log for log in in_range }
    days = [(iso, name, by_date.get(iso)) for iso, name in week_days(today)]
    return WeekSummary(week, in_range, total, days)
