# Import namecombo
from namecombo import Gender, GrammaticalCase, NameCombination, NameFormatter

# Create a new formatter
# Settings missing from the config are read from NAMECOMBO_ORDER_CONVENTION and NAMECOMBO_LOCALE
formatter = NameFormatter(config={"locale": "de-DE"}, log=True)


if __name__ == '__main__':
    from rich import print

    name = formatter.create(title="Dr.", given_names=["Anna", "Maria"], family_name="Müller", gender=Gender.FEMALE)
    formatter.pretty_print(name)

    print(formatter.format(name, "family_first"))
    print(formatter.combine(name, NameCombination.POLITE))
    print(formatter.combine(name, NameCombination.FIRSTNAME, GrammaticalCase.GENITIVE))

    raw = formatter.serialize(name)
    print(raw)
    print(formatter.deserialize(raw) == name)
