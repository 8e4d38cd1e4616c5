"""
offense.py - Demerit point offense entries.

Module: road_registry.offense
"""

__all__ = ['OffenseEntry']

from dataclasses import dataclass
from datetime import date as _date

from .date_utils import format_date, parse_date


@dataclass(frozen=True)
class OffenseEntry:
    """
    A single traffic offense recorded against a person.

    Entries are append-only: once stored they are never edited or removed.

    Attributes:
        person_id (str): Identifier of the offending person.
        offense_date (date): Date of the offense.
        points (int): Demerit points, 1 to 6.
    """
    person_id: str
    offense_date: _date
    points: int

    def __str__(self) -> str:
        return f"OffenseEntry(id={self.person_id}, date={format_date(self.offense_date)}, points={self.points})"

    @classmethod
    def from_dict(cls, d: dict) -> 'OffenseEntry':
        """
        Create an OffenseEntry from a dictionary of text fields, converting types as needed.

        Args:
            d (dict): Dictionary with 'person_id', 'offense_date' (DD-MM-YYYY) and 'points'.
        Returns:
            OffenseEntry: The constructed entry.
        Raises:
            ValueError: If the date or points cannot be converted.
        """
        offense_date = d.get('offense_date')
        if not isinstance(offense_date, _date):
            offense_date = parse_date(str(offense_date).strip())
        return cls(
            person_id=str(d.get('person_id', '')),
            offense_date=offense_date,
            points=int(d.get('points')),
        )

    def as_dict(self) -> dict:
        """
        Convert the entry to a dictionary of text fields suitable for delimited storage.

        Returns:
            dict: Dictionary representation of the entry.
        """
        return {
            'person_id': self.person_id,
            'offense_date': format_date(self.offense_date),
            'points': str(self.points),
        }
