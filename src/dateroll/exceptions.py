"""
Custom exceptions for date rolling.
"""


class DateRollError(Exception):
    """Base exception for all date rolling errors."""


class CalendarError(DateRollError):
    """Error related to calendar construction or business-day queries."""


class BusinessDayNotFoundError(CalendarError):
    """No business day found within the scan limit."""

    def __init__(self, start, direction: str, max_days: int):
        self.start = start
        self.direction = direction
        self.max_days = max_days
        super().__init__(
            f'No business day found scanning {direction} from {start} '
            f'within {max_days} days'
        )
