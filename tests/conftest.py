import pytest

from dotenv import load_dotenv

from namecombo import Gender, NameFormatter, PersonName

load_dotenv()


def pytest_configure():
    # Locales
    pytest.german_locale = "de-DE"
    pytest.english_locale = "en-US"
    # A locale without translations
    pytest.unsupported_locale = "fr-FR"


@pytest.fixture()
def anna():
    return PersonName(
        title="Dr.",
        given_names=["Anna"],
        family_name="Müller",
        gender=Gender.FEMALE,
    )


@pytest.fixture()
def klaus():
    return PersonName(
        given_names=["Klaus", "Peter"],
        family_name="Schmitz",
        suffix="Jr.",
        nickname="Klausi",
        gender=Gender.MALE,
    )


@pytest.fixture()
def clean_env(monkeypatch):
    monkeypatch.delenv("NAMECOMBO_ORDER_CONVENTION", raising=False)
    monkeypatch.delenv("NAMECOMBO_LOCALE", raising=False)
    return monkeypatch


@pytest.fixture()
def formatter(clean_env):
    return NameFormatter()
