"""Text splitting module for sentence tokenization.

Sentences feed the sentence-level sentiment scorer, so splits must not
happen inside abbreviations ("Mr. Darcy"), initials, decimals or ellipses.
"""

import re

import nltk
from loguru import logger
from nltk.tokenize import sent_tokenize

from core.languages import ENGLISH, RUSSIAN, SPANISH, require_language

# Abbreviations that should NOT end sentences (per language)
ABBREVIATIONS = {
    ENGLISH.code: [
        "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "Jr.", "Sr.", "vs.", "etc.",
        "i.e.", "e.g.", "Inc.", "Ltd.", "Co.", "Corp.", "Ave.", "St.", "Rd.",
        "Mt.", "ft.", "oz.", "lb.", "Jan.", "Feb.", "Mar.", "Apr.", "Jun.",
        "Jul.", "Aug.", "Sep.", "Oct.", "Nov.", "Dec.", "Rev.", "Gen.", "Col.",
        "Lt.", "Sgt.", "Capt.", "Ph.D.", "M.D.", "B.A.", "M.A.",
    ],
    RUSSIAN.code: [
        "г.", "гг.", "т.д.", "т.п.", "т.е.", "др.", "пр.", "ул.", "д.", "кв.",
        "им.", "проф.", "см.", "ср.", "напр.", "стр.", "рис.", "табл.",
        "млн.", "млрд.", "тыс.", "руб.", "коп.",
    ],
    SPANISH.code: [
        "Sr.", "Sra.", "Srta.", "Dr.", "Dra.", "Prof.", "Ud.", "Uds.", "etc.",
        "Lic.", "Ing.", "pág.", "págs.", "vol.", "núm.", "aprox.",
    ],
}

# Single uppercase letter + period: initials like "J. R. R. Tolkien" or "А. С. Пушкин"
SINGLE_LETTER_PATTERN = re.compile(r'(?<![A-ZА-ЯЁa-zа-яё])([A-ZА-ЯЁ])\.(?=\s|$|[^A-ZА-ЯЁa-zа-яё]|[A-ZА-ЯЁ]\.)')

# Acronyms: 2+ single letters with dots (S.H.I.E.L.D.)
ACRONYM_PATTERN = re.compile(r'\b([A-ZА-ЯЁ]\.){2,}')

# Ellipsis: 2+ dots or the … character
ELLIPSIS_PATTERN = re.compile(r'\.{2,}|…')

# Decimals, versions, times: 3.14, 2.0, 10.30
DECIMAL_PATTERN = re.compile(r'(\d+)\.(\d+)')


class TextSplitter:
    """Splits text into sentences."""

    def __init__(self, language: str = ENGLISH.code):
        """
        Initialize splitter.

        Args:
            language: Language code (en, es, ru, de, ...)

        Raises:
            UnsupportedLanguageError: If language is not supported
        """
        lang = require_language(language, "TextSplitter")

        self.language = lang.code
        self.nltk_name = lang.nltk_name
        self.abbreviations = ABBREVIATIONS.get(lang.code, [])

        self._abbr_patterns = [
            (abbr, f"_ABBR_{abbr.replace('.', '_DOT_')}_") for abbr in self.abbreviations
        ]

    def _ensure_nltk_data(self) -> None:
        """Download required NLTK data if not present."""
        try:
            nltk.data.find("tokenizers/punkt_tab")
        except LookupError:
            logger.info("Downloading NLTK punkt tokenizer...")
            nltk.download("punkt_tab", quiet=True)

    def split(self, text: str) -> list[str]:
        """
        Split text into sentences.

        Args:
            text: Input text to split

        Returns:
            List of sentences (stripped, non-empty)
        """
        if not text or not text.strip():
            return []

        self._ensure_nltk_data()

        all_sentences = []
        for para in self._split_paragraphs(text):
            para = self._clean_text(para)
            if para:
                all_sentences.extend(self._split_nltk(para))

        return [s.strip() for s in all_sentences if s.strip()]

    def _protect_abbreviations(self, text: str) -> str:
        """Replace abbreviations with placeholders to prevent sentence splitting."""
        protected = ELLIPSIS_PATTERN.sub('_ELLIPSIS_', text)
        protected = DECIMAL_PATTERN.sub(r'\1_DECIMAL_\2', protected)

        def protect_acronym(match):
            return match.group(0).replace('.', '_ACRO_')
        protected = ACRONYM_PATTERN.sub(protect_acronym, protected)

        protected = SINGLE_LETTER_PATTERN.sub(r'\1_INIT_', protected)

        for abbr, placeholder in self._abbr_patterns:
            protected = protected.replace(abbr, placeholder)

        return protected

    def _restore_abbreviations(self, text: str) -> str:
        """Restore abbreviations from placeholders."""
        # Reverse order of protection: known abbreviations contain _DOT_
        restored = text
        for abbr, placeholder in self._abbr_patterns:
            restored = restored.replace(placeholder, abbr)

        restored = restored.replace('_INIT_', '.')
        restored = restored.replace('_ACRO_', '.')
        restored = restored.replace('_DECIMAL_', '.')
        restored = restored.replace('_ELLIPSIS_', '...')
        return restored

    def _split_paragraphs(self, text: str) -> list[str]:
        """Split text on blank lines and dialogue markers (newline + dash)."""
        parts = re.split(r'\n\s*(?=[—–-]\s)', text)

        result = []
        for part in parts:
            result.extend(re.split(r'\n\s*\n', part))

        return [p.strip() for p in result if p.strip()]

    def _clean_text(self, text: str) -> str:
        """Normalize whitespace."""
        return re.sub(r"\s+", " ", text).strip()

    def _split_nltk(self, text: str) -> list[str]:
        """Split using NLTK sent_tokenize."""
        protected = self._protect_abbreviations(text)

        try:
            sentences = sent_tokenize(protected, language=self.nltk_name)
        except LookupError:
            # punkt data unavailable (offline) - regex split instead
            logger.debug(f"punkt model for {self.nltk_name} unavailable, using regex split")
            return self._split_regex(text)

        return [self._restore_abbreviations(s) for s in sentences]

    def _split_regex(self, text: str) -> list[str]:
        """
        Fallback regex-based sentence splitting.

        Splits after . ! ? followed by whitespace and a capital letter.
        """
        protected = self._protect_abbreviations(text)
        parts = re.split(r'(?<=[.!?])\s+(?=[A-ZА-ЯЁ"“«])', protected)
        return [self._restore_abbreviations(p) for p in parts if p.strip()]
