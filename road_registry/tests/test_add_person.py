"""
Tests for Registry.add_person.
"""
from __future__ import annotations

import pytest

from road_registry.errors import Reason


def test_valid_person_added(registry, make_person):
    """All data valid: person is stored, not suspended."""
    result = registry.add_person(make_person())
    assert result.success
    assert result.status == "Success"
    stored = registry.get_person("78!@#%_zAB")
    assert stored == make_person()
    assert stored.suspended is False


def test_invalid_person_id_rejected(registry, make_person):
    result = registry.add_person(make_person(person_id="12abcXYZaa", first_name="Jane", last_name="Smith"))
    assert not result
    assert result.status == "Failed"
    assert result.error_type == "ValidationError"
    assert result.reason is Reason.INVALID_PERSON_ID
    assert registry.get_person("12abcXYZaa") is None


@pytest.mark.parametrize("overrides,reason", [
    ({'first_name': ""}, Reason.INVALID_NAME),
    ({'last_name': "   "}, Reason.INVALID_NAME),
    ({'address': "32|Highland Street|Sydney|New South Wales|Australia"}, Reason.INVALID_ADDRESS),
    ({'address': "99 King Rd, Victoria"}, Reason.INVALID_ADDRESS),
    ({'birthdate': "1990-11-15"}, Reason.INVALID_BIRTHDATE),
    ({'birthdate': "02-06-2025"}, Reason.INVALID_BIRTHDATE),
])
def test_invalid_fields_rejected(registry, make_person, overrides, reason):
    result = registry.add_person(make_person(**overrides))
    assert not result.success
    assert result.reason is reason
    assert result.error_type == "ValidationError"
    assert len(registry.person_store) == 0


def test_checks_short_circuit_in_order(registry, make_person):
    """An invalid identifier is reported before an invalid address."""
    result = registry.add_person(make_person(person_id="bad", address="nowhere"))
    assert result.reason is Reason.INVALID_PERSON_ID


def test_birthdate_today_accepted(registry, make_person):
    assert registry.add_person(make_person(birthdate="01-06-2025")).success


def test_duplicate_person_id_rejected(registry, make_person):
    first = make_person(person_id="33@@abcdEF", first_name="Test", last_name="User")
    second = make_person(person_id="33@@abcdEF", first_name="Another", last_name="User")
    assert registry.add_person(first).success
    result = registry.add_person(second)
    assert not result.success
    assert result.error_type == "BusinessRuleViolation"
    assert result.reason is Reason.DUPLICATE_PERSON_ID
    assert registry.get_person("33@@abcdEF").first_name == "Test"


def test_candidate_suspension_ignored(registry, make_person):
    """New people always start unsuspended."""
    result = registry.add_person(make_person(suspended=True))
    assert result.success
    assert result.person.suspended is False
    assert registry.is_suspended("78!@#%_zAB") is False
