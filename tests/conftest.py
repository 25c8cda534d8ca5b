"""
Shared test fixtures for date rolling tests.
"""

import os
import sys
from datetime import date, timedelta

import pytest
import pathlib

# Add src to path for imports
sys.path.insert(0, os.path.join(pathlib.Path(__file__).parent, '..', 'src'))

from dateroll.calendar import WEEKENDS_ONLY, WeekendCalendar  # noqa: E402


@pytest.fixture
def weekends_only():
    """Calendar with Saturdays and Sundays off and no holidays."""
    return WEEKENDS_ONLY


@pytest.fixture
def holiday_calendar():
    """Weekends plus a few 2024 market holidays."""
    return WeekendCalendar(
        holidays=[
            date(2024, 1, 1),    # New Year's Day (Monday)
            date(2024, 3, 29),   # Good Friday
            date(2024, 4, 1),    # Easter Monday
            date(2024, 12, 25),  # Christmas (Wednesday)
            date(2024, 12, 26),  # Boxing Day
        ],
        name='TEST',
    )


@pytest.fixture
def dates_2024():
    """Every calendar day of 2024."""
    start = date(2024, 1, 1)
    return [start + timedelta(days=i) for i in range(366)]


class NeverOpen:
    """Calendar without any business day."""

    def is_business_day(self, d):
        return False


@pytest.fixture
def never_open():
    return NeverOpen()
