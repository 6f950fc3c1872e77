from enum import Enum

from typing import List

from namecombo.exceptions.LanguageNotSupportedError import LanguageNotSupportedError
from namecombo.exceptions.NotExpressibleError import NotExpressibleError
from namecombo.utils.locales import language_of


class Gender(str, Enum):
    UNDEFINED = "undefined"
    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def all() -> List["Gender"]:
        return list(Gender)

    def polite(self, locale: str) -> str:
        """
        Returns the polite form of address for a person of this gender, e.g. 'Herr' or 'Frau'.
        :param locale: The locale to use. Only German and English are supported.
        :return: The form of address
        """
        language = language_of(locale)
        address = _POLITE_ADDRESSES[language].get(self)
        if address is None:
            raise NotExpressibleError(message=f"Gender has no polite address: {self}")
        return address

    def to_symbol(self) -> str:
        return _SYMBOLS[self]

    def to_string_locale(self, locale: str) -> str:
        """
        Returns the localized label of this gender. Languages without a translation fall back to English.
        """
        try:
            language = language_of(locale)
        except LanguageNotSupportedError:
            language = "en"
        return _LABELS[language][self]


_POLITE_ADDRESSES = {
    "de": {Gender.MALE: "Herr", Gender.FEMALE: "Frau"},
    "en": {Gender.MALE: "Mister", Gender.FEMALE: "Miss"},
}

_SYMBOLS = {
    Gender.UNDEFINED: "⚪",
    Gender.MALE: "♂",
    Gender.FEMALE: "♀",
    Gender.NEUTRAL: "⚪",
    Gender.OTHER: "⚧",
}

_LABELS = {
    "de": {
        Gender.UNDEFINED: "unbestimmt",
        Gender.MALE: "männlich",
        Gender.FEMALE: "weiblich",
        Gender.NEUTRAL: "neutral",
        Gender.OTHER: "divers",
    },
    "en": {
        Gender.UNDEFINED: "undefined",
        Gender.MALE: "male",
        Gender.FEMALE: "female",
        Gender.NEUTRAL: "neutral",
        Gender.OTHER: "other",
    },
}
