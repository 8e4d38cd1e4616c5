"""
Pytest fixtures for road registry tests.
"""
from __future__ import annotations

import pytest
from datetime import date as _date

from road_registry.config import RegistryConfig
from road_registry.person import Person
from road_registry.registry import Registry

TODAY = _date(2025, 6, 1)

VALID_ADDRESS = "32|Highland Street|Melbourne|Victoria|Australia"


@pytest.fixture
def today():
    """Fixed 'current date' used by every registry fixture."""
    return TODAY


@pytest.fixture
def make_person():
    """Create a Person with valid defaults for any field not given."""
    def _create_person(person_id: str = "78!@#%_zAB",
                       first_name: str = "John",
                       last_name: str = "Doe",
                       address: str = VALID_ADDRESS,
                       birthdate: str = "15-11-1990",
                       suspended: bool = False) -> Person:
        return Person(
            person_id=person_id,
            first_name=first_name,
            last_name=last_name,
            address=address,
            birthdate=birthdate,
            suspended=suspended,
        )

    return _create_person


@pytest.fixture
def registry(today):
    """In-memory registry with a pinned clock."""
    return Registry.in_memory(today=lambda: today)


@pytest.fixture
def file_config(tmp_path):
    """Configuration pointing the data files at a temporary directory."""
    return RegistryConfig.from_dict({'data_dir': str(tmp_path / "data")})


@pytest.fixture
def file_registry(file_config, today):
    """File-backed registry with a pinned clock."""
    return Registry.from_config(config=file_config, today=lambda: today)


@pytest.fixture
def add_person(registry, make_person):
    """Add a person to the in-memory registry and return the stored record."""
    def _add(**kwargs) -> Person:
        result = registry.add_person(make_person(**kwargs))
        assert result.success, result.message
        return result.person

    return _add
