"""
validators.py - Field validation rules for road registry records.

Pure predicates: none of them touch a store or raise. "Not in the future" is
kept separate from date syntax so that it can be combined wherever birth or
offense dates are accepted.

Module: road_registry.validators
"""

__all__ = [
    'is_valid_person_id',
    'is_valid_name',
    'is_valid_address',
    'is_valid_date',
    'is_not_future',
    'is_valid_birthdate',
    'is_valid_offense_date',
    'is_valid_points',
]

from datetime import date as _date
from typing import Any

from .address import Address
from .date_utils import try_parse_date

PERSON_ID_LENGTH = 10
ID_LEADING_DIGITS = "23456789"
MIN_SPECIAL_CHARS = 2
MIN_POINTS = 1
MAX_POINTS = 6


def is_valid_person_id(person_id: Any) -> bool:
    """
    Check the structure of a person identifier.

    Exactly 10 characters: the first two are digits 2-9, at least two of
    characters 3-8 are neither letters nor digits, and the last two are
    uppercase letters.
    """
    if not isinstance(person_id, str) or len(person_id) != PERSON_ID_LENGTH:
        return False
    if not all(c in ID_LEADING_DIGITS for c in person_id[:2]):
        return False
    special_count = sum(1 for c in person_id[2:8] if not c.isalnum())
    if special_count < MIN_SPECIAL_CHARS:
        return False
    return all(c.isalpha() and c.isupper() for c in person_id[8:])


def is_valid_name(name: Any) -> bool:
    """A name must be a non-blank string."""
    return isinstance(name, str) and bool(name.strip())


def is_valid_address(address: Any) -> bool:
    """Address text must parse as five fields with a positive street number and state Victoria."""
    return Address.parse(address) is not None


def is_valid_date(text: Any) -> bool:
    """Date text must be a real DD-MM-YYYY calendar date."""
    return try_parse_date(text) is not None


def is_not_future(value: _date, today: _date) -> bool:
    return value <= today


def is_valid_birthdate(text: Any, today: _date) -> bool:
    parsed = try_parse_date(text)
    return parsed is not None and is_not_future(parsed, today)


# Offense dates follow the same rules as birth dates
is_valid_offense_date = is_valid_birthdate


def is_valid_points(points: Any, min_points: int = MIN_POINTS, max_points: int = MAX_POINTS) -> bool:
    """Demerit points must be a whole number within [min_points, max_points]."""
    if isinstance(points, bool) or not isinstance(points, int):
        return False
    return min_points <= points <= max_points
