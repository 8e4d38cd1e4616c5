"""
lifecycle.py - Creation and update rules for person records.

Each check raises the matching RegistryError subclass on the first failure,
in the order the rules are listed. Nothing here writes to a store.

Module: road_registry.lifecycle
"""
from __future__ import annotations

__all__ = ['check_person_fields', 'check_create', 'check_update', 'check_offense', 'require_person',
           'stored_birth_date']

import logging
from datetime import date as _date
from typing import Any

from .date_utils import calculate_age, parse_date
from .errors import BusinessRuleViolation, NotFound, Reason, StoreFailure, ValidationError
from .person import Person
from .stores import PersonStore
from .validators import (
    is_valid_address,
    is_valid_birthdate,
    is_valid_name,
    is_valid_offense_date,
    is_valid_person_id,
    is_valid_points,
)

logger = logging.getLogger(__name__)

MINOR_AGE = 18


def check_person_fields(candidate: Person, today: _date) -> None:
    """
    Validate the syntax of every personal detail of a candidate record.

    Raises:
        ValidationError: On the first invalid field (identifier, names, address, birth date).
    """
    if not is_valid_person_id(candidate.person_id):
        raise ValidationError(Reason.INVALID_PERSON_ID, f"Invalid person ID format: {candidate.person_id!r}")
    if not is_valid_name(candidate.first_name) or not is_valid_name(candidate.last_name):
        raise ValidationError(Reason.INVALID_NAME, "First and last name cannot be empty")
    if not is_valid_address(candidate.address):
        raise ValidationError(Reason.INVALID_ADDRESS, f"Invalid address: {candidate.address!r}")
    if not is_valid_birthdate(candidate.birthdate, today):
        raise ValidationError(Reason.INVALID_BIRTHDATE, f"Invalid or future birth date: {candidate.birthdate!r}")


def check_create(candidate: Person, store: PersonStore, today: _date) -> None:
    """
    Check that a candidate may be added as a new person.

    Args:
        candidate: Record to add.
        store: Person store used for the uniqueness check.
        today: Current date for the "not in the future" rule.

    Raises:
        ValidationError: If a field is malformed.
        BusinessRuleViolation: If the identifier is already taken.
    """
    check_person_fields(candidate, today)
    if store.exists(candidate.person_id):
        raise BusinessRuleViolation(Reason.DUPLICATE_PERSON_ID, f"Person {candidate.person_id} already exists")


def _first_digit_is_even(person_id: str) -> bool:
    first = person_id[:1]
    return first.isdigit() and int(first) % 2 == 0


def check_update(existing: Person, candidate: Person, store: PersonStore, today: _date,
                 minor_age: int = MINOR_AGE) -> None:
    """
    Check that an existing record may be replaced by a candidate.

    Rules, after field validation:
        - a person younger than minor_age today cannot change address
        - a birth date change cannot be combined with any other change
        - the identifier cannot change if its first digit is even
        - a new identifier must not belong to another record

    Args:
        existing: The stored record.
        candidate: Proposed replacement.
        store: Person store used for the uniqueness check.
        today: Current date.
        minor_age: Age below which the address is locked.

    Raises:
        ValidationError: If a candidate field is malformed.
        BusinessRuleViolation: If a business rule rejects the change.
    """
    check_person_fields(candidate, today)

    if calculate_age(stored_birth_date(existing), today) < minor_age and candidate.address != existing.address:
        raise BusinessRuleViolation(
            Reason.MINOR_ADDRESS_LOCKED,
            f"Cannot change address of {existing.person_id}: person is under {minor_age}",
        )

    if candidate.birthdate != existing.birthdate:
        if (candidate.person_id != existing.person_id
                or candidate.first_name != existing.first_name
                or candidate.last_name != existing.last_name
                or candidate.address != existing.address):
            raise BusinessRuleViolation(
                Reason.BIRTHDATE_CHANGE_NOT_ISOLATED,
                "When changing birth date, no other personal details can be changed",
            )

    if candidate.person_id != existing.person_id:
        if _first_digit_is_even(existing.person_id):
            raise BusinessRuleViolation(
                Reason.PERSON_ID_LOCKED,
                f"Cannot change person ID {existing.person_id}: first digit is even",
            )
        if store.exists(candidate.person_id):
            raise BusinessRuleViolation(Reason.DUPLICATE_PERSON_ID, f"Person {candidate.person_id} already exists")


def check_offense(offense_date: Any, points: Any, today: _date,
                  min_points: int = 1, max_points: int = 6) -> _date:
    """
    Validate a demerit point submission.

    Returns:
        date: The parsed offense date.

    Raises:
        ValidationError: If the date is malformed or in the future, or points are out of range.
    """
    if not is_valid_offense_date(offense_date, today):
        raise ValidationError(Reason.INVALID_OFFENSE_DATE, f"Invalid or future offense date: {offense_date!r}")
    if not is_valid_points(points, min_points, max_points):
        raise ValidationError(Reason.INVALID_POINTS, f"Demerit points must be between {min_points} and {max_points}: {points!r}")
    return parse_date(offense_date)


def require_person(store: PersonStore, person_id: str) -> Person:
    """
    Fetch a person or fail.

    Raises:
        NotFound: If no record is keyed by person_id.
    """
    person = store.get(person_id)
    if person is None:
        raise NotFound(Reason.PERSON_NOT_FOUND, f"Person {person_id} not found")
    return person


def stored_birth_date(person: Person) -> _date:
    """
    Parsed birth date of a record read back from a store.

    Raises:
        StoreFailure: If the stored birth date is not a DD-MM-YYYY date.
    """
    try:
        return parse_date(person.birthdate)
    except ValueError as e:
        logger.error(f"Stored record {person.person_id} has an unreadable birth date: {person.birthdate!r}")
        raise StoreFailure(message=f"Stored record {person.person_id} is corrupt: {e}") from e
