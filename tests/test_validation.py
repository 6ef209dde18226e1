from __future__ import annotations

import pytest

from petcatalog.domain.contract import Gender
from petcatalog.domain.errors import ValidationFailed
from petcatalog.domain.validation import validate_pet


def _pet(**overrides):
    values = {"name": "Toto", "breed": "Terrier", "gender": Gender.MALE, "weight": 7}
    values.update(overrides)
    return values


def test_insert_accepts_complete_payload():
    assert validate_pet(_pet()) == {"name": "Toto", "breed": "Terrier", "gender": 1, "weight": 7}


def test_insert_defaults_weight_to_zero():
    values = _pet()
    del values["weight"]
    assert validate_pet(values)["weight"] == 0


def test_insert_accepts_zero_weight():
    assert validate_pet(_pet(weight=0))["weight"] == 0


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"name": ""}, "name"),
        ({"name": "   "}, "name"),
        ({"name": None}, "name"),
        ({"breed": ""}, "breed"),
        ({"breed": None}, "breed"),
        ({"gender": 3}, "gender"),
        ({"gender": -1}, "gender"),
        ({"gender": "male"}, "gender"),
        ({"gender": True}, "gender"),
        ({"weight": -1}, "weight"),
        ({"weight": "heavy"}, "weight"),
        ({"id": 5}, "id"),
        ({"color": "brown"}, "color"),
    ],
)
def test_insert_rejections_name_the_field(overrides, field):
    with pytest.raises(ValidationFailed) as exc_info:
        validate_pet(_pet(**overrides))
    assert exc_info.value.field == field


@pytest.mark.parametrize("missing", ["name", "breed", "gender"])
def test_insert_requires_fields(missing):
    values = _pet()
    del values[missing]
    with pytest.raises(ValidationFailed) as exc_info:
        validate_pet(values)
    assert exc_info.value.field == missing


def test_empty_name_rejected_even_with_other_fields_invalid_or_valid():
    with pytest.raises(ValidationFailed):
        validate_pet({"name": "", "breed": "Terrier", "gender": 0})


def test_breed_and_gender_are_checked_independently():
    # a valid breed does not excuse an invalid gender, and the other way round
    with pytest.raises(ValidationFailed) as exc_info:
        validate_pet(_pet(gender=9))
    assert exc_info.value.field == "gender"
    with pytest.raises(ValidationFailed) as exc_info:
        validate_pet(_pet(breed=""))
    assert exc_info.value.field == "breed"


def test_integer_strings_are_coerced():
    accepted = validate_pet(_pet(gender="2", weight=" 12 "))
    assert accepted["gender"] == 2
    assert accepted["weight"] == 12


def test_update_accepts_any_subset():
    assert validate_pet({"weight": 9}, partial=True) == {"weight": 9}
    assert validate_pet({}, partial=True) == {}
    assert validate_pet(None, partial=True) == {}


def test_update_does_not_default_weight():
    assert "weight" not in validate_pet({"name": "Rex"}, partial=True)


@pytest.mark.parametrize(
    "values, field",
    [
        ({"name": ""}, "name"),
        ({"gender": None}, "gender"),
        ({"gender": 5}, "gender"),
        ({"weight": -3}, "weight"),
        ({"breed": None}, "breed"),
    ],
)
def test_update_rejections(values, field):
    with pytest.raises(ValidationFailed) as exc_info:
        validate_pet(values, partial=True)
    assert exc_info.value.field == field
