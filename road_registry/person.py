"""
person.py - Person records for the road registry.

This module provides the Person record and the PersonPatch value object:
    - Person is immutable; every change produces a new record
    - PersonPatch carries only the fields a caller wants to change
    - Helpers expose parsed birth date, address and display name

Module: road_registry.person
"""

__all__ = ['Person', 'PersonPatch']

import logging
from dataclasses import dataclass, fields, replace
from datetime import date as _date
from typing import Optional

from .address import Address
from .date_utils import calculate_age, parse_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Person:
    """
    Represents a person held in the registry.

    Attributes:
        person_id (str): 10-character structured identifier, unique key.
        first_name (str): First name.
        last_name (str): Last name.
        address (str): Address text, 'number|street|city|state|country'.
        birthdate (str): Birth date text in DD-MM-YYYY format.
        suspended (bool): Licence suspension status, derived from demerit points.
    """
    person_id: str
    first_name: str
    last_name: str
    address: str
    birthdate: str
    suspended: bool = False

    def __str__(self) -> str:
        return f"Person(id={self.person_id}, name={self.name})"

    @property
    def name(self) -> str:
        """Full display name."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def birth_date(self) -> _date:
        """
        Parsed birth date.

        Raises:
            ValueError: If birthdate is not a DD-MM-YYYY date.
        """
        return parse_date(self.birthdate)

    @property
    def parsed_address(self) -> Optional[Address]:
        return Address.parse(self.address)

    def age_on(self, as_of: _date) -> int:
        """Age in completed years on the given date."""
        return calculate_age(self.birth_date, as_of)

    def with_suspension(self, suspended: bool) -> 'Person':
        """Copy of this record with a new suspension status and all other fields unchanged."""
        return replace(self, suspended=suspended)

    def same_details(self, other: 'Person') -> bool:
        """True if all personal details (everything except suspension) match."""
        return (
            self.person_id == other.person_id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.address == other.address
            and self.birthdate == other.birthdate
        )


@dataclass(frozen=True)
class PersonPatch:
    """
    The personal details to change on an existing record.

    Fields left as None are kept from the record the patch is applied to.
    Suspension status is not patchable.
    """
    person_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    birthdate: Optional[str] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def apply(self, person: Person) -> Person:
        """
        Produce a new Person with the patched fields replaced.

        Args:
            person (Person): The record to patch; it is not modified.
        Returns:
            Person: A new record.
        """
        changes = {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
        if changes:
            logger.debug(f"Patching {person.person_id}: {sorted(changes)}")
        return replace(person, **changes)
