"""
stores.py - Storage interfaces and in-memory stores for the road registry.

The rule engine only talks to these two protocols. FilePersonStore and
FileOffenseStore (file_store.py) implement them on delimited text files;
the in-memory versions here back the tests and short-lived sessions.

Module: road_registry.stores
"""

__all__ = ['PersonStore', 'OffenseStore', 'InMemoryPersonStore', 'InMemoryOffenseStore']

import logging
from typing import Dict, List, Optional, Protocol

from .offense import OffenseEntry
from .person import Person

logger = logging.getLogger(__name__)


class PersonStore(Protocol):
    """
    Key-value storage of Person records keyed by person_id.

    Implementations raise StoreFailure when the underlying I/O fails.
    """
    def get(self, person_id: str) -> Optional[Person]:
        """
        Look up a person.

        Args:
            person_id (str): Identifier to look up.

        Returns:
            Optional[Person]: The stored record, or None if absent.
        """
        ...

    def put(self, person: Person) -> None:
        """Insert or replace the record keyed by person.person_id."""
        ...

    def replace(self, old_id: str, person: Person) -> None:
        """
        Replace the record keyed by old_id with person, stored under its own key.

        Args:
            old_id (str): Key of the record being replaced.
            person (Person): New record; its person_id may differ from old_id.
        """
        ...

    def exists(self, person_id: str) -> bool:
        ...


class OffenseStore(Protocol):
    """Append-only log of offense entries keyed by person_id."""
    def append_entry(self, entry: OffenseEntry) -> None:
        ...

    def list_entries(self, person_id: str) -> List[OffenseEntry]:
        """
        All entries recorded for a person, in no particular order.

        Args:
            person_id (str): Identifier to list.
        """
        ...


class InMemoryPersonStore:
    """PersonStore backed by a dictionary."""

    def __init__(self) -> None:
        self.people: Dict[str, Person] = {}

    def __len__(self) -> int:
        return len(self.people)

    def get(self, person_id: str) -> Optional[Person]:
        return self.people.get(person_id)

    def put(self, person: Person) -> None:
        self.people[person.person_id] = person

    def replace(self, old_id: str, person: Person) -> None:
        self.people.pop(old_id, None)
        self.people[person.person_id] = person

    def exists(self, person_id: str) -> bool:
        return person_id in self.people


class InMemoryOffenseStore:
    """OffenseStore backed by a list."""

    def __init__(self) -> None:
        self.entries: List[OffenseEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def append_entry(self, entry: OffenseEntry) -> None:
        self.entries.append(entry)

    def list_entries(self, person_id: str) -> List[OffenseEntry]:
        return [e for e in self.entries if e.person_id == person_id]
