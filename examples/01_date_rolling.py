#!/usr/bin/env python3
"""
Date Rolling Conventions
========================

This example demonstrates:
1. Business day checks on a weekends-only calendar
2. Rolling a weekend date under every convention
3. Month-end behaviour of the modified conventions
4. Rolling a list of dates against a holiday calendar

The library uses opendate.Date for all date operations.
"""

from dateroll import DateRoller, DateRollingConvention, WEEKENDS_ONLY
from dateroll import is_business_day, roll_date, to_date


def fmt(d) -> str:
    """Format date as YYYY-MM-DD with weekday."""
    day_name = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun'][d.weekday()]
    return f'{d.year}-{d.month:02d}-{d.day:02d} {day_name}'


print('=' * 70)
print('Date Rolling Conventions')
print('=' * 70)
print()

# =============================================================================
# Business Days
# =============================================================================

print('-' * 70)
print('Business Day Functions')
print('-' * 70)
print()

print(f"{'Date':<18} {'Business Day?':>15}")
print('-' * 34)

for date_str in ('2024-05-30', '2024-05-31', '2024-06-01', '2024-06-02', '2024-06-03'):
    d = to_date(date_str)
    status = 'Yes' if is_business_day(d) else 'No'
    print(f'{fmt(d):<18} {status:>15}')

print()
print('Note: Default calendar excludes weekends only (no holidays)')
print()

# =============================================================================
# Conventions
# =============================================================================

print('-' * 70)
print('Rolling Conventions')
print('-' * 70)
print()

saturday = to_date('2024-06-01')
print(f'Original date: {fmt(saturday)}')
print()
print(f"{'Convention':<22} {'Adjusted Date':>18}")
print('-' * 42)

for convention in DateRollingConvention:
    adjusted = roll_date(saturday, convention, WEEKENDS_ONLY)
    print(f'{str(convention):<22} {fmt(adjusted):>18}')

print()

# Month-end example
print('Month-End Example (Modified Following):')
print()

year_end = to_date('2023-12-31')
following = roll_date(year_end, DateRollingConvention.FOLLOWING)
modified = roll_date(year_end, DateRollingConvention.MODIFIED_FOLLOWING)

print(f'  Original: {fmt(year_end)} (month end)')
print(f'  Following: {fmt(following)} (different month)')
print(f'  Modified Following: {fmt(modified)} (same month)')
print()

# =============================================================================
# Holiday Calendar
# =============================================================================

print('-' * 70)
print('Rolling a List of Dates')
print('-' * 70)
print()

roller = DateRoller(WEEKENDS_ONLY.add_holidays('2024-03-29', '2024-04-01', '2024-12-25'))
payment_dates = ['2024-03-29', '2024-06-29', '2024-09-29', '2024-12-25']

for convention in (DateRollingConvention.FOLLOWING, DateRollingConvention.MODIFIED_FOLLOWING):
    rolled = roller.roll_all(payment_dates, convention)
    print(f'{convention}:')
    for original, adjusted in zip(payment_dates, rolled):
        print(f'  {fmt(to_date(original))} -> {fmt(adjusted)}')
    print()
