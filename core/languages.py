"""Language constants and utilities.

Centralizes language codes used for stopword lists and sentence splitting.
NLTK names its corpora by full language name ("english", "spanish"),
so every language carries both.

IMPORTANT: Unsupported languages raise UnsupportedLanguageError - never silently ignored!
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Language:
    """Language definition with all naming variants."""
    code: str           # Internal code used in project
    name: str           # Human-readable name
    nltk_name: str      # NLTK corpus / punkt model name


# === Language Constants ===

ENGLISH = Language(code="en", name="English", nltk_name="english")
SPANISH = Language(code="es", name="Spanish", nltk_name="spanish")
RUSSIAN = Language(code="ru", name="Russian", nltk_name="russian")
GERMAN = Language(code="de", name="German", nltk_name="german")
FRENCH = Language(code="fr", name="French", nltk_name="french")
PORTUGUESE = Language(code="pt", name="Portuguese", nltk_name="portuguese")
ITALIAN = Language(code="it", name="Italian", nltk_name="italian")
DUTCH = Language(code="nl", name="Dutch", nltk_name="dutch")


# === Registry ===

ALL_LANGUAGES = [
    ENGLISH,
    SPANISH,
    RUSSIAN,
    GERMAN,
    FRENCH,
    PORTUGUESE,
    ITALIAN,
    DUTCH,
]

_LANGUAGE_MAP = {lang.code: lang for lang in ALL_LANGUAGES}

# Regional variants share one stopword list / punkt model
_ALIASES = {
    "en-us": ENGLISH,
    "en-gb": ENGLISH,
    "es-es": SPANISH,
    "es-latam": SPANISH,
    "es-ar": SPANISH,
    "pt-br": PORTUGUESE,
    "ru-ru": RUSSIAN,
}


def get_language(code: str) -> Optional[Language]:
    """Get Language by code, alias or NLTK name.

    Examples:
        get_language("en") -> ENGLISH
        get_language("es-latam") -> SPANISH (alias)
        get_language("german") -> GERMAN
    """
    code_lower = code.lower()

    if code_lower in _LANGUAGE_MAP:
        return _LANGUAGE_MAP[code_lower]

    if code_lower in _ALIASES:
        return _ALIASES[code_lower]

    for lang in ALL_LANGUAGES:
        if lang.nltk_name == code_lower:
            return lang

    return None


class UnsupportedLanguageError(ValueError):
    """Raised when an unsupported language code is used.

    Use this to fail fast - never silently ignore wrong language codes!
    """

    def __init__(self, code: str, context: str = ""):
        self.code = code
        self.context = context
        supported = ", ".join(lang.code for lang in ALL_LANGUAGES)
        message = f"Unsupported language code: '{code}'"
        if context:
            message += f" in {context}"
        message += f". Supported: {supported}"
        super().__init__(message)


def require_language(code: str, context: str = "") -> Language:
    """Get Language by code, raising error if not found.

    Args:
        code: Language code to look up
        context: Context for error message (e.g. "TextSplitter", "stopwords")

    Returns:
        Language object

    Raises:
        UnsupportedLanguageError: If language code is not supported
    """
    lang = get_language(code)
    if lang is None:
        raise UnsupportedLanguageError(code, context)
    return lang
