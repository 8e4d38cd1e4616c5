"""
address.py - Residential address model for road registry records.

Addresses are stored and compared as a single text value of five
'|'-separated fields:

    street number | street | city | state | country

Module: road_registry.address
"""

__all__ = ['Address', 'ADDRESS_SEPARATOR', 'REQUIRED_STATE']

import logging
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

ADDRESS_SEPARATOR = "|"
REQUIRED_STATE = "Victoria"
ADDRESS_FIELD_COUNT = 5

_STREET_NUMBER_RE = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class Address:
    """
    A parsed residential address.

    Attributes:
        street_number (int): Street number, always positive.
        street (str): Street name.
        city (str): City or suburb.
        state (str): State; only Victoria is accepted by the registry.
        country (str): Country.
    """
    street_number: int
    street: str
    city: str
    state: str
    country: str

    def __str__(self) -> str:
        return ADDRESS_SEPARATOR.join(
            [str(self.street_number), self.street, self.city, self.state, self.country]
        )

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional['Address']:
        """
        Parse the text form of an address.

        Each field is trimmed. Returns None when the text does not have exactly
        five non-blank fields, the street number is not a positive integer, or
        the state is not Victoria.

        Args:
            text (Optional[str]): Address text.
        Returns:
            Optional[Address]: The parsed address, or None if invalid.
        """
        if not isinstance(text, str) or not text.strip():
            return None
        parts = [part.strip() for part in text.split(ADDRESS_SEPARATOR)]
        if len(parts) != ADDRESS_FIELD_COUNT or not all(parts):
            return None
        if not _STREET_NUMBER_RE.match(parts[0]):
            logger.debug(f"Street number is not an integer: {parts[0]!r}")
            return None
        street_number = int(parts[0])
        if street_number <= 0:
            return None
        if parts[3] != REQUIRED_STATE:
            return None
        return cls(street_number, parts[1], parts[2], parts[3], parts[4])
