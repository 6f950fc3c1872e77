from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError
from pydantic import field_validator

from typing import Any
from typing import Dict
from typing import List
from typing import Tuple

from namecombo.constants.GrammaticalCase import GrammaticalCase
from namecombo.constants.NameCombination import NameCombination
from namecombo.constants.OrderConvention import OrderConvention
from namecombo.exceptions.InvalidNameError import InvalidNameError
from namecombo.exceptions.NotExpressibleError import NotExpressibleError
from namecombo.models.person.Gender import Gender
from namecombo.utils.locales import DEFAULT_LOCALE, language_of
from namecombo.utils.strings import family_initial_word, genitive, initial


class PersonName(BaseModel):
    """
    The structured name of a person. Instances are immutable and hashable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    title: str | None = None
    given_names: Tuple[str, ...]
    family_name: str
    suffix: str | None = None
    nickname: str | None = None
    gender: Gender = Gender.UNDEFINED

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidNameError(message=f"Invalid person name: {describe_errors(e)}") from e

    @field_validator('given_names', mode='before')
    @classmethod
    def wrap_single_given_name(cls, value):
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator('given_names')
    @classmethod
    def validate_given_names(cls, value):
        if len(value) == 0:
            raise ValueError("At least one given name is required")
        if any(not name for name in value):
            raise ValueError("Given names must not be empty")
        return value

    @field_validator('title', 'suffix', 'nickname')
    @classmethod
    def empty_to_none(cls, value):
        return value or None

    def model_copy(self, *, update: Dict[str, Any] | None = None, deep: bool = False) -> PersonName:
        """
        Copies the name. Updated fields are validated like a newly constructed name.
        """
        if not update:
            return super().model_copy(deep=deep)
        return PersonName(**{**self.model_dump(), **update})

    def __str__(self) -> str:
        return self.format()

    def format(self, order_convention: OrderConvention = OrderConvention.GERMAN) -> str:
        """
        Renders the name as a display string
        :param order_convention: The order in which the name components are concatenated
        :return: e.g. 'Dr. Anna Müller' (German, Western) or 'Müller Anna' (family first)
        """
        order_convention = OrderConvention(order_convention)

        if order_convention is OrderConvention.FAMILY_FIRST:
            parts = [self.family_name, *self.given_names]
        else:
            parts = [self.title, *self.given_names, self.family_name, self.suffix]

        return " ".join(part for part in parts if part)

    def combine(
        self,
        combination: NameCombination,
        case: GrammaticalCase = GrammaticalCase.NOMINATIVE,
        locale: str = DEFAULT_LOCALE,
    ) -> str:
        """
        Renders a combination of name components in the given grammatical case
        :param combination: Which components to render, e.g. NameCombination.POLITE
        :param case: The grammatical case. Only the last word before any suffix is inflected.
        :param locale: The locale to use. Only German and English are supported.
        :return: e.g. 'Frau Dr. Müller' or, in the genitive, 'Annas'
        """
        language = language_of(locale)
        combination = NameCombination(combination)
        case = GrammaticalCase(case)

        words = self._words(combination, language)

        # Initials are never inflected
        if case is GrammaticalCase.GENITIVE and combination is not NameCombination.INITIALS:
            index = len(words) - 1
            # The suffix follows the inflected name, e.g. "Klaus Schmitz' Jr."
            if combination is NameCombination.FULLNAME and self.suffix:
                index -= len(self.suffix.split(" "))
            words[index] = genitive(words[index], language)

        return " ".join(words)

    def _words(self, combination: NameCombination, language: str) -> List[str]:
        firstname = self.given_names[0]

        if combination is NameCombination.FIRSTNAME:
            return [firstname]
        elif combination is NameCombination.SURNAME:
            return [self.family_name or firstname]
        elif combination is NameCombination.NAME:
            return [part for part in (firstname, self.family_name) if part]
        elif combination is NameCombination.FULLNAME:
            return self.format(OrderConvention.GERMAN).split(" ")
        elif combination is NameCombination.INITIALS:
            words = [initial(name) for name in self.given_names]
            if self.family_name:
                words.append(initial(family_initial_word(self.family_name)))
            return words
        elif combination is NameCombination.NICKNAME:
            return [self.nickname or firstname]
        elif combination is NameCombination.POLITE:
            if not self.family_name:
                raise NotExpressibleError(
                    message="A polite form of address requires a family name."
                )
            address = self.gender.polite(language)
            return [part for part in (address, self.title, self.family_name) if part]

        raise ValueError(f"Unsupported name combination: {combination}")

    def serialize(self) -> bytes:
        from namecombo.serialization.PersonNameSerializer import PersonNameSerializer

        return PersonNameSerializer.serialize(self)

    @staticmethod
    def deserialize(raw: bytes | str) -> PersonName:
        from namecombo.serialization.PersonNameSerializer import PersonNameSerializer

        return PersonNameSerializer.deserialize(raw)


def describe_errors(error: ValidationError) -> str:
    """
    Condenses the errors of a pydantic ValidationError into a single line, e.g. 'given_names: Value error, ...'
    """
    messages = []
    for e in error.errors():
        location = ".".join(str(loc) for loc in e["loc"]) or "name"
        messages.append(f"{location}: {e['msg']}")
    return "; ".join(messages)
