"""
Enumeration types for date rolling.

These enums define the standard business day conventions used in
bond, swap and loan scheduling.
"""

from enum import Enum


class DateRollingConvention(Enum):
    """Business day rolling conventions.

    The value of each member is its display label.
    """

    ACTUAL = 'Actual'                          # No adjustment
    FOLLOWING = 'Following'                    # Move to next business day
    MODIFIED_FOLLOWING = 'Modified Following'  # Following, unless it crosses month boundary
    PRECEDING = 'Preceding'                    # Move to previous business day
    MODIFIED_PRECEDING = 'Modified Preceding'  # Preceding, unless it crosses month boundary
    MODIFIED_ROLLING = 'Modified Rolling'      # Cumulative forward roll across a schedule

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> 'DateRollingConvention':
        """Return the convention used when none is specified."""
        return cls.ACTUAL

    @classmethod
    def from_string(cls, s: str) -> 'DateRollingConvention':
        """Parse a date rolling convention from string."""
        mapping = {
            'ACTUAL': cls.ACTUAL,
            'A': cls.ACTUAL,
            'NONE': cls.ACTUAL,
            'N': cls.ACTUAL,
            'FOLLOWING': cls.FOLLOWING,
            'F': cls.FOLLOWING,
            'MODIFIED_FOLLOWING': cls.MODIFIED_FOLLOWING,
            'MODFOLLOWING': cls.MODIFIED_FOLLOWING,
            'MF': cls.MODIFIED_FOLLOWING,
            'PRECEDING': cls.PRECEDING,
            'P': cls.PRECEDING,
            'MODIFIED_PRECEDING': cls.MODIFIED_PRECEDING,
            'MODPRECEDING': cls.MODIFIED_PRECEDING,
            'MP': cls.MODIFIED_PRECEDING,
            'MODIFIED_ROLLING': cls.MODIFIED_ROLLING,
            'MODROLLING': cls.MODIFIED_ROLLING,
            'MR': cls.MODIFIED_ROLLING,
        }
        key = s.upper().replace(' ', '').replace('_', '')
        for k, v in mapping.items():
            if key == k.replace('_', ''):
                return v
        raise ValueError(f'Unknown date rolling convention: {s}')
