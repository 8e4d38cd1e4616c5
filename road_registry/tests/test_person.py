import pytest
from dataclasses import FrozenInstanceError
from datetime import date as _date

from road_registry import Address, Person, PersonPatch


def test_person_str(make_person):
    assert str(make_person()) == "Person(id=78!@#%_zAB, name=John Doe)"


def test_person_is_immutable(make_person):
    p = make_person()
    with pytest.raises(FrozenInstanceError):
        p.first_name = "Jane"


def test_person_birth_date_and_age(make_person):
    p = make_person(birthdate="15-11-1990")
    assert p.birth_date == _date(1990, 11, 15)
    assert p.age_on(_date(2025, 6, 1)) == 34


def test_person_parsed_address(make_person):
    address = make_person().parsed_address
    assert address == Address(32, "Highland Street", "Melbourne", "Victoria", "Australia")
    assert str(address) == "32|Highland Street|Melbourne|Victoria|Australia"


def test_with_suspension_keeps_other_fields(make_person):
    p = make_person()
    s = p.with_suspension(True)
    assert s.suspended
    assert not p.suspended
    assert s.same_details(p)


def test_patch_apply_changes_only_given_fields(make_person):
    p = make_person(suspended=True)
    patched = PersonPatch(first_name="Jane", address="1|A St|Ballarat|Victoria|Australia").apply(p)
    assert patched.first_name == "Jane"
    assert patched.address == "1|A St|Ballarat|Victoria|Australia"
    assert patched.last_name == p.last_name
    assert patched.person_id == p.person_id
    assert patched.suspended is True
    assert p.first_name == "John"


def test_empty_patch(make_person):
    patch = PersonPatch()
    assert patch.is_empty()
    assert patch.apply(make_person()) == make_person()


@pytest.mark.parametrize("text", [None, "", "32|Highland Street|Melbourne|Victoria", "0|A|B|Victoria|C"])
def test_address_parse_invalid(text):
    assert Address.parse(text) is None
