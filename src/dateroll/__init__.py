"""
dateroll - Business Day Date Rolling

Adjusts payment and accrual dates that fall on non-business days
according to the standard date rolling conventions.

Basic Usage:
    >>> from dateroll import DateRoller, DateRollingConvention, WEEKENDS_ONLY
    >>>
    >>> roller = DateRoller(WEEKENDS_ONLY.add_holidays('2024-12-25'))
    >>> roller.roll('2024-06-01', DateRollingConvention.FOLLOWING)
    >>> roller.roll_all(['2024-06-01', '2024-06-02'], DateRollingConvention.PRECEDING)
"""

__version__ = '1.0.0'

# Calendars and scan primitives
from .calendar import MAX_SCAN_DAYS, WEEKENDS_ONLY, Calendar, OpendateCalendar
from .calendar import WeekendCalendar, add_business_days, is_business_day
from .calendar import next_business_day, previous_business_day
# Date utilities
from .dates import OPENDATE_WEEKENDS_ONLY, DateLike, to_date
# Enumerations
from .enums import DateRollingConvention
# Exceptions
from .exceptions import BusinessDayNotFoundError, CalendarError, DateRollError
# Rolling
from .rolling import DateRoller, roll_actual, roll_date, roll_dates
from .rolling import roll_following, roll_modified_following
from .rolling import roll_modified_preceding, roll_modified_rolling
from .rolling import roll_preceding

__all__ = [
    # Version
    '__version__',
    # Main API
    'DateRoller',
    'roll_date',
    'roll_dates',
    # Per-convention rollers
    'roll_actual',
    'roll_following',
    'roll_modified_following',
    'roll_preceding',
    'roll_modified_preceding',
    'roll_modified_rolling',
    # Enums
    'DateRollingConvention',
    # Calendar
    'Calendar',
    'WeekendCalendar',
    'OpendateCalendar',
    'WEEKENDS_ONLY',
    'MAX_SCAN_DAYS',
    'is_business_day',
    'next_business_day',
    'previous_business_day',
    'add_business_days',
    # Dates
    'DateLike',
    'to_date',
    'OPENDATE_WEEKENDS_ONLY',
    # Exceptions
    'DateRollError',
    'CalendarError',
    'BusinessDayNotFoundError',
]
