"""
Date utilities for date rolling.

Uses opendate.Date as the primary date type.
"""

from datetime import date, datetime
from typing import Union

from opendate import CustomCalendar, Date, register_calendar

DEFAULT_WEEKMASK = 'Mon Tue Wed Thu Fri'

# Weekends-only opendate calendar attached to every coerced date
OPENDATE_WEEKENDS_ONLY = CustomCalendar(
    name='WEEKENDS_ONLY',
    holidays=set(),
    weekmask=DEFAULT_WEEKMASK,
)
register_calendar('WEEKENDS_ONLY', OPENDATE_WEEKENDS_ONLY)


# Accept various date-like inputs
DateLike = Union[Date, date, datetime, str]


def to_date(d: DateLike) -> Date:
    """Convert any date-like input to opendate.Date."""
    if isinstance(d, Date):
        return d.calendar(OPENDATE_WEEKENDS_ONLY)
    if isinstance(d, datetime):
        return Date.instance(d.date()).calendar(OPENDATE_WEEKENDS_ONLY)
    if isinstance(d, date):
        return Date.instance(d).calendar(OPENDATE_WEEKENDS_ONLY)
    if isinstance(d, str):
        result = Date.parse(d)
        if result is None:
            raise ValueError(f'Cannot parse date: {d}')
        return result.calendar(OPENDATE_WEEKENDS_ONLY)
    raise TypeError(
        f'Cannot roll {type(d).__name__} value {d!r}: expected an opendate '
        f'Date, datetime.date, datetime.datetime or date string'
    )


def next_day(d: Date) -> Date:
    """Return the following calendar day."""
    return d.add(days=1)


def previous_day(d: Date) -> Date:
    """Return the preceding calendar day."""
    return d.subtract(days=1)


def same_month(d1: date, d2: date) -> bool:
    """Check whether two dates fall in the same calendar month."""
    return (d1.year, d1.month) == (d2.year, d2.month)
