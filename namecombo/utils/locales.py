import langcodes

from namecombo.exceptions.LanguageNotSupportedError import LanguageNotSupportedError

SUPPORTED_LANGUAGES = ("de", "en")

DEFAULT_LOCALE = "de"


def language_of(locale: str) -> str:
    """
    Reduce a locale tag such as 'de-DE' or 'en_US' to its supported language code.

    Args:
    locale (str): The locale tag.

    Returns:
    str: The two-letter language code.

    Raises:
    LanguageNotSupportedError: If the tag is malformed or its language is not supported.
    """
    if not isinstance(locale, str) or not locale.strip():
        raise LanguageNotSupportedError(message=f"Invalid locale: {locale!r}")

    try:
        language = langcodes.Language.get(locale.strip().replace("_", "-")).language
    except ValueError as e:
        raise LanguageNotSupportedError(message=f"Invalid locale: {locale!r}") from e

    if language not in SUPPORTED_LANGUAGES:
        raise LanguageNotSupportedError(
            message=f"Language is not supported: {locale}. Supported languages are {', '.join(SUPPORTED_LANGUAGES)}."
        )
    return language
