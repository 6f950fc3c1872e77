import re

# Endings after which German marks the genitive with an apostrophe only
_GERMAN_SIBILANT_ENDING = re.compile(r'(s|ß|x|z|tz|ce)$', re.IGNORECASE)


def genitive(word: str, language: str) -> str:
    """
    Put a proper name into the genitive case.

    Args:
    word (str): The name to inflect.
    language (str): The two-letter language code ('de' or 'en').

    Returns:
    str: The inflected name, e.g. 'Annas', 'Klaus'', 'Anna's' or 'James''.
    """
    if not word:
        return word

    if language == "de":
        if _GERMAN_SIBILANT_ENDING.search(word):
            return f"{word}'"
        return f"{word}s"

    if word.lower().endswith("s"):
        return f"{word}'"
    return f"{word}'s"


def initial(word: str) -> str:
    # "ß".upper() is "SS"
    return f"{word[0].upper()[0]}."


def family_initial_word(family_name: str) -> str:
    """
    Find the word of a family name that its initial is taken from, skipping lower-case particles.

    Args:
    family_name (str): The family name, e.g. 'von Bülow' or 'van der Berg'.

    Returns:
    str: The first word starting with an upper-case letter, e.g. 'Bülow', or the first word if there is none.
    """
    words = family_name.split()
    for word in words:
        if word[0].isupper():
            return word
    return words[0]
