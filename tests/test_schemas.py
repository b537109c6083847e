"""Schema gate: validate_animal returns ok or a list of field errors, never raises."""

import pytest

from animals_api.schemas import validate_animal


def test_valid_payload(lion):
    result = validate_animal(lion)
    assert result.ok
    assert result.errors == []
    assert result.value.model_dump() == lion


@pytest.mark.parametrize("missing", ["name", "species", "age"])
def test_missing_field_is_reported(lion, missing):
    del lion[missing]
    result = validate_animal(lion)
    assert not result.ok
    assert result.value is None
    assert [e.field for e in result.errors] == [missing]


def test_all_missing_fields_are_reported():
    result = validate_animal({})
    assert sorted(e.field for e in result.errors) == ["age", "name", "species"]


@pytest.mark.parametrize("age", ["abc", 5.5, None, [5]])
def test_non_integer_age_is_rejected(lion, age):
    lion["age"] = age
    result = validate_animal(lion)
    assert not result.ok
    assert result.errors[0].field == "age"


@pytest.mark.parametrize("age", ["5", 5.0])
def test_integer_compatible_age_is_coerced(lion, age):
    lion["age"] = age
    result = validate_animal(lion)
    assert result.ok
    assert result.value.age == 5


def test_empty_name_is_rejected(lion):
    lion["name"] = ""
    result = validate_animal(lion)
    assert not result.ok
    assert result.errors[0].field == "name"


def test_unknown_fields_and_client_id_are_dropped(lion):
    result = validate_animal({**lion, "id": "65f1c2a9e4b0a1b2c3d4e5f6", "colour": "gold"})
    assert result.ok
    assert result.value.model_dump() == lion


@pytest.mark.parametrize("payload", [[], "Lion", 5, None])
def test_non_object_payload_is_rejected(payload):
    result = validate_animal(payload)
    assert not result.ok
    assert result.errors[0].field == "body"


def test_message_lists_every_field():
    result = validate_animal({"name": "Lion"})
    assert result.message.startswith("Animal validation failed: ")
    assert "species: " in result.message
    assert "age: " in result.message


@pytest.mark.parametrize("age", [10**20, 2**31, -1])
def test_out_of_range_age_is_rejected(lion, age):
    lion["age"] = age
    result = validate_animal(lion)
    assert not result.ok
    assert result.errors[0].field == "age"


def test_largest_storable_age_is_accepted(lion):
    lion["age"] = 2**31 - 1
    assert validate_animal(lion).ok


@pytest.mark.parametrize("age", [True, False])
def test_boolean_age_is_rejected(lion, age):
    lion["age"] = age
    result = validate_animal(lion)
    assert not result.ok
    assert result.errors[0].field == "age"
