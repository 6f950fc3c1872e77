from __future__ import annotations

from typing import Any
from typing import Dict

from pydantic import ValidationError

# Use orjson if available (installed with the "serde" extra)
# Better performance than integrated json module
try:
    import orjson as json
    _DUMPS_OPTIONS = {}
except ImportError as e:
    import json
    # Match the compact UTF-8 output of orjson
    _DUMPS_OPTIONS = {"ensure_ascii": False, "separators": (",", ":")}

from namecombo.exceptions.DeserializationError import DeserializationError
from namecombo.exceptions.InvalidNameError import InvalidNameError
from namecombo.models.person.PersonName import PersonName, describe_errors


class PersonNameSerializer:
    """
    Converts person names to and from their structured representation, a field-for-field mapping of the
    PersonName attributes encoded as UTF-8 JSON
    """

    @staticmethod
    def to_dict(name: PersonName) -> Dict[str, Any]:
        if not isinstance(name, PersonName):
            raise TypeError(f"name must be of type PersonName but was {type(name)}")
        return name.model_dump(mode="json")

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> PersonName:
        if not isinstance(data, dict):
            raise DeserializationError(
                message=f"Expected a mapping of name fields but got {type(data).__name__}"
            )
        try:
            return PersonName.model_validate(data)
        except ValidationError as e:
            raise DeserializationError(message=f"Malformed person name: {describe_errors(e)}") from e
        # Raised when validation runs through PersonName.__init__
        except InvalidNameError as e:
            raise DeserializationError(message=f"Malformed person name: {e.message}") from e

    @staticmethod
    def serialize(name: PersonName) -> bytes:
        data = json.dumps(PersonNameSerializer.to_dict(name), **_DUMPS_OPTIONS)
        # orjson returns bytes, the built-in json module returns str
        if isinstance(data, str):
            data = data.encode("utf-8")
        return data

    @staticmethod
    def deserialize(raw: bytes | str) -> PersonName:
        if not isinstance(raw, (bytes, bytearray, str)):
            raise DeserializationError(
                message=f"Expected bytes or str but got {type(raw).__name__}"
            )
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise DeserializationError(message=f"Malformed JSON: {e}") from e
        return PersonNameSerializer.from_dict(data)
