"""
Business day calendars and day-scan primitives.

A calendar is anything with an ``is_business_day(d)`` method. Concrete
calendars are opendate calendars; the scan primitives walk one calendar
day at a time until the calendar reports a business day, and give up
after ``max_days`` days.
"""

import logging
from collections.abc import Iterable
from datetime import date
from typing import Protocol, runtime_checkable

from opendate import CustomCalendar, Date

from .dates import DEFAULT_WEEKMASK, DateLike
from .dates import next_day, previous_day, to_date
from .exceptions import BusinessDayNotFoundError

logger = logging.getLogger(__name__)

# Longest run of non-business days a scan will cross
MAX_SCAN_DAYS = 400


@runtime_checkable
class Calendar(Protocol):
    """Business day oracle."""

    def is_business_day(self, d: date) -> bool:
        ...


class OpendateCalendar:
    """Expose an opendate calendar (e.g. a CustomCalendar) as a Calendar."""

    def __init__(self, calendar):
        if isinstance(calendar, OpendateCalendar):
            calendar = calendar.calendar
        self.calendar = calendar

    def __repr__(self) -> str:
        return f'OpendateCalendar({self.calendar!r})'

    def is_business_day(self, d: date) -> bool:
        return to_date(d).calendar(self.calendar).is_business_day()


class WeekendCalendar(OpendateCalendar):
    """
    Opendate CustomCalendar built from a weekday mask and holidays.

    Attributes
        name: Calendar name
        weekmask: Space separated business weekdays, e.g. 'Mon Tue Wed Thu Fri'
        holidays: Dates that are never business days
    """

    def __init__(
        self,
        weekmask: str = DEFAULT_WEEKMASK,
        holidays: Iterable[DateLike] = (),
        name: str = 'CUSTOM',
    ):
        self.name = name
        self.weekmask = weekmask
        self.holidays = {date.fromordinal(to_date(h).toordinal()) for h in holidays}
        super().__init__(CustomCalendar(
            name=name,
            holidays=self.holidays,
            weekmask=weekmask,
        ))

    def __repr__(self) -> str:
        return (
            f"WeekendCalendar('{self.name}', weekmask='{self.weekmask}', "
            f'holidays={len(self.holidays)})'
        )

    def add_holidays(self, *holidays: DateLike) -> 'WeekendCalendar':
        """Return a new calendar with extra holidays."""
        return WeekendCalendar(
            weekmask=self.weekmask,
            holidays=[*self.holidays, *holidays],
            name=self.name,
        )


# Saturdays and Sundays off, no holidays
WEEKENDS_ONLY = WeekendCalendar(name='WEEKENDS_ONLY')


def next_business_day(
    d: DateLike,
    calendar: Calendar = WEEKENDS_ONLY,
    max_days: int = MAX_SCAN_DAYS,
) -> Date:
    """
    Find the first business day on or after a date.

    Args:
        d: Starting date
        calendar: Business day oracle
        max_days: Maximum number of calendar days to scan

    Returns
        d itself if it is a business day, otherwise the next business day

    Raises
        BusinessDayNotFoundError: No business day within max_days
    """
    start = to_date(d)
    current = start
    for _ in range(max_days + 1):
        if calendar.is_business_day(current):
            return current
        current = next_day(current)
    logger.warning('Forward scan from %s exhausted %d days on %r', start, max_days, calendar)
    raise BusinessDayNotFoundError(start, 'forward', max_days)


def previous_business_day(
    d: DateLike,
    calendar: Calendar = WEEKENDS_ONLY,
    max_days: int = MAX_SCAN_DAYS,
) -> Date:
    """
    Find the last business day on or before a date.

    Args:
        d: Starting date
        calendar: Business day oracle
        max_days: Maximum number of calendar days to scan

    Returns
        d itself if it is a business day, otherwise the previous business day

    Raises
        BusinessDayNotFoundError: No business day within max_days
    """
    start = to_date(d)
    current = start
    for _ in range(max_days + 1):
        if calendar.is_business_day(current):
            return current
        current = previous_day(current)
    logger.warning('Backward scan from %s exhausted %d days on %r', start, max_days, calendar)
    raise BusinessDayNotFoundError(start, 'backward', max_days)


def is_business_day(d: DateLike, calendar: Calendar = WEEKENDS_ONLY) -> bool:
    """Check if a date is a business day."""
    return calendar.is_business_day(to_date(d))


def add_business_days(
    d: DateLike,
    days: int,
    calendar: Calendar = WEEKENDS_ONLY,
) -> Date:
    """
    Add business days to a date.

    The start date need not be a business day; each step moves to the
    next (or previous, for negative days) business day strictly after
    (before) the current date.
    """
    current = to_date(d)
    if days == 0:
        return current
    for _ in range(abs(days)):
        if days > 0:
            current = next_business_day(next_day(current), calendar)
        else:
            current = previous_business_day(previous_day(current), calendar)
    return current
