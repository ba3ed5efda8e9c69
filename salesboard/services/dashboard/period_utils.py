"""Calendar period utilities.

Month and year boundaries are returned as ``YYYY-MM-DD`` strings so they can
be handed to any store without timezone conversion. The last day of a month
always comes from the real calendar (first day of the following month minus
one day), which covers leap-year February.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import NamedTuple

from salesboard.core.exceptions import InvalidArgumentError

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class DateRange(NamedTuple):
    """Inclusive date range as ISO date strings."""
    start_date: str
    end_date: str

    @property
    def start(self) -> date:
        return date.fromisoformat(self.start_date)

    @property
    def end(self) -> date:
        return date.fromisoformat(self.end_date)


def validate_year(year) -> int:
    # bool is an int subclass; True/False are never a year
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError("year", year, "must be an integer")
    if not 1 <= year <= 9998:
        raise InvalidArgumentError("year", year, "out of calendar range")
    return year


def validate_month(month) -> int:
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidArgumentError("month", month, "must be an integer")
    if not 1 <= month <= 12:
        raise InvalidArgumentError("month", month, "must be between 1 and 12")
    return month


def _last_day(year: int, month: int) -> date:
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def days_in_month(year: int, month: int) -> int:
    """Number of calendar days in the given month."""
    validate_year(year)
    validate_month(month)
    return _last_day(year, month).day


def month_range(year: int, month: int) -> DateRange:
    """First and last calendar day of a month."""
    validate_year(year)
    validate_month(month)
    return DateRange(
        date(year, month, 1).isoformat(),
        _last_day(year, month).isoformat(),
    )


def year_range(year: int) -> DateRange:
    """January 1 through December 31 of a year."""
    validate_year(year)
    return DateRange(date(year, 1, 1).isoformat(), date(year, 12, 31).isoformat())


def previous_month(year: int, month: int) -> tuple[int, int]:
    """(year, month) of the calendar month before the given one."""
    validate_year(year)
    validate_month(month)
    if month == 1:
        return year - 1, 12
    return year, month - 1


def month_name(month: int) -> str:
    return MONTH_NAMES[validate_month(month) - 1]


def short_month_name(month: int) -> str:
    return month_name(month)[:3]
