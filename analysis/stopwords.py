"""Stopword lists and the stopword filter."""

from typing import Iterable, Iterator

import nltk
from loguru import logger

from core.languages import ENGLISH, require_language
from core.tokenizer import Token, normalize_term

# Built-in English list (no download needed). Contractions are listed in the
# tokenizer's normalized form.
DEFAULT_STOPWORDS = frozenset({
    "the", "a", "an", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "having", "do", "does", "did", "doing", "will", "would", "could", "should", "may", "might",
    "must", "shall", "can", "to", "of", "in", "for", "on", "with", "at", "by", "from", "as",
    "into", "through", "during", "before", "after", "above", "below", "between", "under",
    "over", "up", "down", "out", "off", "about", "against", "again", "further", "then", "once",
    "here", "there", "when", "where", "why", "how", "all", "any", "both", "each", "few", "more",
    "most", "other", "some", "such", "no", "nor", "not", "only", "own", "same", "so", "than",
    "too", "very", "just", "and", "but", "if", "or", "because", "until", "while", "it", "its",
    "itself", "this", "that", "these", "those", "i", "me", "my", "myself", "we", "our", "ours",
    "ourselves", "you", "your", "yours", "yourself", "yourselves", "he", "him", "his", "himself",
    "she", "her", "hers", "herself", "they", "them", "their", "theirs", "themselves", "what",
    "which", "who", "whom", "am", "s", "t", "now", "don't", "doesn't", "didn't", "isn't",
    "aren't", "wasn't", "weren't", "hasn't", "haven't", "hadn't", "won't", "wouldn't",
    "can't", "cannot", "couldn't", "shouldn't", "mustn't", "i'm", "i've", "i'd", "i'll",
    "you're", "you've", "you'd", "you'll", "he's", "he'd", "he'll", "she's", "she'd",
    "she'll", "it's", "we're", "we've", "we'd", "we'll", "they're", "they've", "they'd",
    "they'll", "that's", "there's", "here's", "what's", "who's", "let's",
})

# Loaded NLTK lists, keyed by NLTK language name
_NLTK_STOPWORDS: dict[str, frozenset] = {}


def _ensure_stopwords_corpus() -> None:
    """Download NLTK stopwords corpus if not present."""
    try:
        nltk.data.find("corpora/stopwords")
    except LookupError:
        logger.info("Downloading NLTK stopwords corpus...")
        nltk.download("stopwords", quiet=True)


def nltk_stopwords(language: str) -> frozenset:
    """
    Get NLTK's stopword list for a language (lazy-loaded, cached).

    Args:
        language: Language code (en, es, ru, de, ...)

    Raises:
        UnsupportedLanguageError: If language is not supported
    """
    nltk_name = require_language(language, "stopwords").nltk_name

    if nltk_name not in _NLTK_STOPWORDS:
        _ensure_stopwords_corpus()
        from nltk.corpus import stopwords

        words = (normalize_term(w) for w in stopwords.words(nltk_name))
        _NLTK_STOPWORDS[nltk_name] = frozenset(w for w in words if w)
        logger.debug(f"Loaded {len(_NLTK_STOPWORDS[nltk_name])} NLTK stopwords for {nltk_name}")

    return _NLTK_STOPWORDS[nltk_name]


class StopwordFilter:
    """Drops tokens whose term is in an exclusion set."""

    def __init__(self, excluded: Iterable[str] = ()):
        terms = (normalize_term(w) for w in excluded)
        self.excluded = frozenset(t for t in terms if t)

    def __contains__(self, term: str) -> bool:
        return term in self.excluded

    def __len__(self) -> int:
        return len(self.excluded)

    def extend(self, terms: Iterable[str]) -> "StopwordFilter":
        """Return a new filter that also excludes `terms` (e.g. character names)."""
        return StopwordFilter(self.excluded | frozenset(terms))

    def filter(self, tokens: Iterable[Token]) -> Iterator[Token]:
        """Lazily drop stopword tokens, preserving order."""
        for token in tokens:
            if token.term not in self.excluded:
                yield token


def build_stopword_filter(
    language: str = ENGLISH.code,
    extra: Iterable[str] = (),
    use_default: bool = True,
) -> StopwordFilter:
    """
    Assemble a filter from the usual sources.

    English uses the built-in list; other languages use NLTK's list.

    Args:
        language: Language of the stopword list, or "none" for no list
        extra: Custom exclusions (character names, ...)
        use_default: Include the language's stopword list

    Raises:
        UnsupportedLanguageError: If language is not supported
    """
    excluded: set[str] = set()
    if use_default and language.lower() != "none":
        lang = require_language(language, "stopwords")
        if lang == ENGLISH:
            excluded |= DEFAULT_STOPWORDS
        else:
            excluded |= nltk_stopwords(lang.code)
    excluded |= set(extra)
    return StopwordFilter(excluded)
