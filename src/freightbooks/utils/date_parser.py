"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def parse_date(value: Union[str, date, datetime]) -> date:
    """Parse a date value into a calendar day.

    Accepts ``date`` and ``datetime`` objects (datetimes are truncated to their
    calendar day, without timezone conversion) and strings, including the
    relative forms "today", "yesterday", "this month", "last month",
    "this year" and "last year".

    Args:
        value: Date, datetime or date string

    Returns:
        Date object

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Could not parse date {value!r}: unsupported type")

    date_str = value.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        # ISO timestamps such as "2024-03-05T14:00:00Z" keep their own calendar day
        return date_parser.isoparse(value.strip()).date()
    except ValueError:
        pass

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Current periods end today; previous periods cover the whole week, month
    or year.

    Args:
        period: One of this-month, this-year, this-week, last-month, last-year, last-week

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()
    week_start = today - timedelta(days=today.weekday())
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)

    if period == "this-week":
        return week_start, today
    if period == "this-month":
        return month_start, today
    if period == "this-year":
        return year_start, today
    if period == "last-week":
        start = week_start - timedelta(days=7)
        return start, start + timedelta(days=6)
    if period == "last-month":
        return month_start - relativedelta(months=1), month_start - timedelta(days=1)
    if period == "last-year":
        return year_start - relativedelta(years=1), year_start - timedelta(days=1)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
