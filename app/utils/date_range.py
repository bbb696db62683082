"""Time window helpers for the task dashboard"""
import calendar
from datetime import date, timedelta
from enum import Enum
from typing import Dict, List, Optional

from app.models.task import DateRange


class TimeFilter(str, Enum):
    """Symbolic look-back windows offered by the dashboard"""
    ONE_WEEK = "1week"
    TWO_WEEKS = "2weeks"
    ONE_MONTH = "1month"
    TWO_MONTHS = "2months"
    THREE_MONTHS = "3months"


DEFAULT_WINDOW_DAYS = 7

_DAY_OFFSETS: Dict[TimeFilter, int] = {
    TimeFilter.ONE_WEEK: 7,
    TimeFilter.TWO_WEEKS: 14,
}

_MONTH_OFFSETS: Dict[TimeFilter, int] = {
    TimeFilter.ONE_MONTH: 1,
    TimeFilter.TWO_MONTHS: 2,
    TimeFilter.THREE_MONTHS: 3,
}

_LABELS: Dict[TimeFilter, str] = {
    TimeFilter.ONE_WEEK: "Last Week",
    TimeFilter.TWO_WEEKS: "Last 2 Weeks",
    TimeFilter.ONE_MONTH: "Last Month",
    TimeFilter.TWO_MONTHS: "Last 2 Months",
    TimeFilter.THREE_MONTHS: "Last 3 Months",
}


def _parse_time_filter(token: str) -> TimeFilter:
    try:
        return TimeFilter(token)
    except ValueError:
        valid = ", ".join(f.value for f in TimeFilter)
        raise ValueError(f"Invalid time filter: '{token}'. Valid filters are: {valid}") from None


def subtract_months(day: date, months: int) -> date:
    """
    Step back a number of calendar months.

    When the target month is shorter, the day is clamped to its last day
    (e.g. 2025-03-31 minus one month is 2025-02-28).
    """
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def resolve_time_filter(token: str, today: Optional[date] = None) -> DateRange:
    """
    Map a time filter token to a concrete inclusive date range ending today.

    Args:
        token: One of "1week", "2weeks", "1month", "2months", "3months"
        today: Reference date (defaults to the current date)

    Returns:
        DateRange with ISO date strings

    Raises:
        ValueError: If the token is not a known time filter
    """
    time_filter = _parse_time_filter(token)
    end = today or date.today()

    if time_filter in _DAY_OFFSETS:
        start = end - timedelta(days=_DAY_OFFSETS[time_filter])
    else:
        start = subtract_months(end, _MONTH_OFFSETS[time_filter])

    return DateRange(start=start.isoformat(), end=end.isoformat())


def default_date_range(today: Optional[date] = None) -> DateRange:
    """Last 7 days, ending today"""
    end = today or date.today()
    start = end - timedelta(days=DEFAULT_WINDOW_DAYS)
    return DateRange(start=start.isoformat(), end=end.isoformat())


def time_filter_label(token: str) -> str:
    return _LABELS[_parse_time_filter(token)]


def list_time_filters() -> List[Dict[str, str]]:
    return [{"value": f.value, "label": time_filter_label(f.value)} for f in TimeFilter]
