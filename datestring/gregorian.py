"""Gregorian calendar helpers used by the date tokens.

Months are zero-based throughout this module (0 = January, 11 = December).
"""

from datetime import date

#: Zero-based indices of the months with 30 days.
thirty_day_months = frozenset({3, 5, 8, 10})

JANUARY = 0
FEBRUARY = 1
DECEMBER = 11


def is_leap_year(year: int | None = None) -> bool:
    """Determine whether the given year is a leap year.

    Uses the current year when none is given.
    """
    if year is None:
        year = date.today().year
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def days_in_month(month: int | None = None, year: int | None = None) -> int:
    """Number of days of a zero-based month in the given year.

    Uses the current month/year for whichever argument is omitted.
    """
    if month is None or year is None:
        today = date.today()
        month = today.month - 1 if month is None else month
        year = today.year if year is None else year
    if month == FEBRUARY:
        return 29 if is_leap_year(year) else 28
    if month in thirty_day_months:
        return 30
    return 31


def day_of_year(year: int, month: int, day: int) -> int:
    """Zero-based day of the year for a zero-based month."""
    return sum(days_in_month(m, year) for m in range(month)) + day - 1


def first_weekday(year: int) -> int:
    """Weekday of January 1st, 0 = Monday .. 6 = Sunday."""
    return date(year, 1, 1).isoweekday() - 1
