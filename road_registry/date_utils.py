# road_registry/date_utils.py
"""
Date parsing and calendar arithmetic for registry records.

Dates cross every external boundary as DD-MM-YYYY text. Internally the
registry works with datetime.date; the helpers here convert between the two
and provide the age and rolling-window arithmetic used by the rule engine.
"""
from __future__ import annotations

import re
from datetime import date as _date, datetime
from typing import Any, Optional

DATE_FORMAT = "%d-%m-%Y"
DATE_PATTERN = "DD-MM-YYYY"

_DATE_RE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


def parse_date(text: str) -> _date:
    """
    Parse a DD-MM-YYYY string into a datetime.date.

    Day and month must be two digits and the year four digits; the value
    must be a real calendar date (31-02-2024 is rejected, not rolled over).

    Args:
        text: Date string

    Returns:
        Parsed date

    Raises:
        ValueError: If the text is not a DD-MM-YYYY calendar date
    """
    if not isinstance(text, str) or not _DATE_RE.fullmatch(text):
        raise ValueError(f"Date must be in {DATE_PATTERN} format: {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def try_parse_date(text: Any) -> Optional[_date]:
    """Parse a DD-MM-YYYY string, returning None instead of raising."""
    try:
        return parse_date(text)
    except ValueError:
        return None


def format_date(value: _date) -> str:
    """Format a date as DD-MM-YYYY."""
    return value.strftime(DATE_FORMAT)


def add_years(value: _date, years: int) -> _date:
    """
    Add calendar years to a date, preserving month and day.

    Feb 29 clamps to Feb 28 when the target year is not a leap year.

    Args:
        value: Start date
        years: Number of years to add (can be negative)

    Returns:
        New date with years added
    """
    try:
        return _date(value.year + years, value.month, value.day)
    except ValueError:
        # Feb 29 etc.: clamp to Feb 28
        return _date(value.year + years, value.month, min(value.day, 28))


def sub_years(value: _date, years: int) -> _date:
    """
    Subtract calendar years from a date.

    Convenience wrapper around add_years with negated years parameter.
    """
    return add_years(value, -years)


def calculate_age(birth_date: _date, as_of: _date) -> int:
    """
    Calculate age in whole years between two dates.

    Unlike a plain year difference, this accounts for whether the as_of
    month/day has reached the birth month/day.

    Args:
        birth_date: Date of birth
        as_of: Reference date

    Returns:
        Completed years of age (negative if as_of precedes birth_date)
    """
    years = as_of.year - birth_date.year
    if (as_of.month, as_of.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def window_start(reference_date: _date, years: int = 2) -> _date:
    """First date (inclusive) of the rolling window ending at reference_date."""
    return sub_years(reference_date, years)


def in_window(value: _date, start: _date) -> bool:
    """True if value falls on or after the window start."""
    return value >= start
