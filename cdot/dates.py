"""
Gregorian calendar arithmetic for the day slots of the daily format.
"""

_DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month of the Gregorian calendar."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check whether (year, month, day) names a real Gregorian date.

    The daily format always carries 31 day slots, so impossible dates such as
    February 30 show up on every short month. They are rejected here rather
    than raised on.

    Examples
    --------
    >>> is_valid_date(2020, 2, 29)
    True
    >>> is_valid_date(1900, 2, 29)
    False
    """
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(year, month)
