import json

import pytest

from namecombo import DeserializationError, Gender, PersonName
from namecombo.serialization.PersonNameSerializer import PersonNameSerializer


def test_serialize_returns_bytes(anna: PersonName):
    data = PersonNameSerializer.serialize(anna)
    assert isinstance(data, bytes)
    assert "Müller" in data.decode("utf-8")


def test_to_dict(anna: PersonName):
    assert PersonNameSerializer.to_dict(anna) == {
        "title": "Dr.",
        "given_names": ["Anna"],
        "family_name": "Müller",
        "suffix": None,
        "nickname": None,
        "gender": "female",
    }


def test_to_dict_wrong_type():
    with pytest.raises(TypeError):
        PersonNameSerializer.to_dict({"given_names": ["Anna"], "family_name": "Müller"})


def test_round_trip(anna: PersonName, klaus: PersonName):
    for name in (anna, klaus, PersonName(given_names=["Lena"], family_name="")):
        assert PersonNameSerializer.deserialize(PersonNameSerializer.serialize(name)) == name
        assert PersonName.deserialize(name.serialize()) == name


def test_deserialize_str():
    name = PersonNameSerializer.deserialize('{"given_names": ["Anna"], "family_name": "Müller"}')
    assert name == PersonName(given_names=["Anna"], family_name="Müller")
    assert name.gender is Gender.UNDEFINED


def test_from_dict(klaus: PersonName):
    assert PersonNameSerializer.from_dict(PersonNameSerializer.to_dict(klaus)) == klaus


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"{not json",
        b"\xff\xfe",
        b"[]",
        b'"Anna Mueller"',
        json.dumps({"given_names": [], "family_name": "Müller"}).encode("utf-8"),
        json.dumps({"given_names": ["Anna"]}).encode("utf-8"),
        json.dumps({"given_names": "Anna", "family_name": 7}).encode("utf-8"),
        json.dumps({"given_names": ["Anna"], "family_name": "Müller", "age": 42}).encode("utf-8"),
        json.dumps({"given_names": ["Anna"], "family_name": "Müller", "gender": "robot"}).encode("utf-8"),
    ],
)
def test_deserialize_malformed(raw):
    with pytest.raises(DeserializationError) as excinfo:
        PersonNameSerializer.deserialize(raw)
    assert excinfo.value.type == "value_error.deserialization"


def test_deserialize_chains_cause():
    with pytest.raises(DeserializationError) as excinfo:
        PersonNameSerializer.deserialize(b'{"given_names": [], "family_name": "M\xc3\xbcller"}')
    assert excinfo.value.__cause__ is not None


def test_deserialize_wrong_input_type():
    with pytest.raises(DeserializationError):
        PersonNameSerializer.deserialize(42)


def test_from_dict_not_a_mapping():
    with pytest.raises(DeserializationError):
        PersonNameSerializer.from_dict(["Anna", "Müller"])


def test_serialize_exact_bytes(anna: PersonName):
    assert PersonNameSerializer.serialize(anna) == (
        '{"title":"Dr.","given_names":["Anna"],"family_name":"Müller",'
        '"suffix":null,"nickname":null,"gender":"female"}'
    ).encode("utf-8")
