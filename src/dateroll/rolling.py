"""
Business day rolling.

Adjusts a payment or accrual date that falls on a non-business day
according to a DateRollingConvention:

- ACTUAL leaves the date alone
- FOLLOWING / PRECEDING move to the next / previous business day
- MODIFIED_* variants check the month boundary and reverse if crossed
- MODIFIED_ROLLING steps forward one day at a time; callers rolling a
  coupon schedule feed each adjusted date back in as the next base date
"""

import logging
from collections.abc import Callable, Iterable

from opendate import Date

from .calendar import WEEKENDS_ONLY, Calendar, is_business_day
from .calendar import next_business_day, previous_business_day
from .dates import DateLike, same_month, to_date
from .enums import DateRollingConvention

logger = logging.getLogger(__name__)


def roll_actual(d: DateLike, calendar: Calendar = WEEKENDS_ONLY) -> Date:
    """Actual: paid on the actual day, even if it is not a business day."""
    return to_date(d)


def roll_following(d: DateLike, calendar: Calendar = WEEKENDS_ONLY) -> Date:
    """Following: roll to the next business day."""
    return next_business_day(d, calendar)


def roll_preceding(d: DateLike, calendar: Calendar = WEEKENDS_ONLY) -> Date:
    """Preceding: roll to the previous business day."""
    return previous_business_day(d, calendar)


def roll_modified_following(d: DateLike, calendar: Calendar = WEEKENDS_ONLY) -> Date:
    """
    Modified following: roll to the next business day unless that lands
    in the next calendar month, in which case roll to the previous one.
    """
    original = to_date(d)
    adjusted = next_business_day(original, calendar)
    if not same_month(adjusted, original):
        logger.debug('%s: following crosses month end, rolling back', original)
        adjusted = previous_business_day(original, calendar)
    return adjusted


def roll_modified_preceding(d: DateLike, calendar: Calendar = WEEKENDS_ONLY) -> Date:
    """
    Modified preceding: roll to the previous business day unless that lands
    in the previous calendar month, in which case roll to the next one.
    """
    original = to_date(d)
    adjusted = previous_business_day(original, calendar)
    if not same_month(adjusted, original):
        logger.debug('%s: preceding crosses month start, rolling forward', original)
        adjusted = next_business_day(original, calendar)
    return adjusted


def roll_modified_rolling(d: DateLike, calendar: Calendar = WEEKENDS_ONLY) -> Date:
    """
    Modified rolling: step forward one calendar day at a time until a
    business day is reached. No month boundary check, so a single
    date rolls exactly as under FOLLOWING.
    """
    return next_business_day(d, calendar)


_ROLLERS: dict[DateRollingConvention, Callable[[DateLike, Calendar], Date]] = {
    DateRollingConvention.ACTUAL: roll_actual,
    DateRollingConvention.FOLLOWING: roll_following,
    DateRollingConvention.MODIFIED_FOLLOWING: roll_modified_following,
    DateRollingConvention.PRECEDING: roll_preceding,
    DateRollingConvention.MODIFIED_PRECEDING: roll_modified_preceding,
    DateRollingConvention.MODIFIED_ROLLING: roll_modified_rolling,
}

_missing = set(DateRollingConvention) - set(_ROLLERS)
if _missing:
    raise RuntimeError(f'No roller registered for: {sorted(c.name for c in _missing)}')


def roll_date(
    d: DateLike,
    convention: DateRollingConvention = DateRollingConvention.ACTUAL,
    calendar: Calendar = WEEKENDS_ONLY,
) -> Date:
    """
    Roll a date according to a date rolling convention.

    Args:
        d: Date to adjust
        convention: Date rolling convention to apply
        calendar: Business day oracle

    Returns
        Adjusted Date
    """
    try:
        roller = _ROLLERS[convention]
    except KeyError:
        raise ValueError(f'Unknown date rolling convention: {convention}') from None

    original = to_date(d)
    adjusted = roller(original, calendar)
    if adjusted != original:
        logger.debug('Rolled %s -> %s (%s)', original, adjusted, convention)
    return adjusted


def roll_dates(
    dates: Iterable[DateLike],
    convention: DateRollingConvention = DateRollingConvention.ACTUAL,
    calendar: Calendar = WEEKENDS_ONLY,
) -> list[Date]:
    """
    Roll each date independently, preserving order.

    No state is carried between elements, including under MODIFIED_ROLLING.
    """
    return [roll_date(d, convention, calendar) for d in dates]


class DateRoller:
    """
    Rolls dates against a fixed calendar.

    Example:
        >>> from datetime import date
        >>> roller = DateRoller(WEEKENDS_ONLY)
        >>> roller.roll('2023-12-31', DateRollingConvention.MODIFIED_FOLLOWING) == date(2023, 12, 29)
        True
    """

    def __init__(self, calendar: Calendar = WEEKENDS_ONLY):
        self.calendar = calendar

    def __repr__(self) -> str:
        return f'DateRoller({self.calendar!r})'

    def is_business_day(self, d: DateLike) -> bool:
        return is_business_day(d, self.calendar)

    def roll(
        self,
        d: DateLike,
        convention: DateRollingConvention = DateRollingConvention.ACTUAL,
    ) -> Date:
        """Roll a single date."""
        return roll_date(d, convention, self.calendar)

    def roll_all(
        self,
        dates: Iterable[DateLike],
        convention: DateRollingConvention = DateRollingConvention.ACTUAL,
    ) -> list[Date]:
        """Roll a sequence of dates, preserving order."""
        return roll_dates(dates, convention, self.calendar)
