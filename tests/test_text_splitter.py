"""Tests for TextSplitter module."""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.languages import UnsupportedLanguageError
from core.text_splitter import TextSplitter


class TestEnglishAbbreviations:
    """Test handling of English abbreviations."""

    def test_title_abbreviations(self):
        """Dr., Mr., Mrs. should not split sentences."""
        splitter = TextSplitter("en")

        assert len(splitter.split("Dr. Watson arrived.")) == 1
        assert len(splitter.split("Mr. Darcy is here.")) == 1
        assert len(splitter.split("Mrs. Bennet left early.")) == 1

    def test_initials(self):
        """Single-letter initials should not split sentences."""
        splitter = TextSplitter("en")

        result = splitter.split("J. R. R. Tolkien wrote novels.")
        assert len(result) == 1
        assert "J. R. R. Tolkien" in result[0]

    def test_multi_sentence_with_abbreviations(self):
        """Multiple sentences with abbreviations should split correctly."""
        splitter = TextSplitter("en")

        result = splitter.split("Dr. Watson arrived. He met Mr. Holmes.")
        assert len(result) == 2
        assert "Dr. Watson" in result[0]
        assert "Mr. Holmes" in result[1]


class TestProtection:
    """Test placeholder protection round trip."""

    def test_restore_is_inverse(self):
        """Protected text restores to the original."""
        splitter = TextSplitter("en")
        text = "Mr. Smith paid 3.50 to S.H.I.E.L.D. Wait..."
        protected = splitter._protect_abbreviations(text)
        assert "Mr." not in protected
        assert "3.50" not in protected
        assert splitter._restore_abbreviations(protected) == text

    def test_regex_fallback(self):
        """Regex split used when punkt data is unavailable."""
        splitter = TextSplitter("en")
        result = splitter._split_regex("Dr. Watson arrived. He met Mr. Holmes. It was 3.15 p.m. Fine!")
        assert result[0] == "Dr. Watson arrived."
        assert result[1] == "He met Mr. Holmes."


class TestParagraphs:
    """Test paragraph and dialogue handling."""

    def test_blank_lines_split(self):
        """Blank lines always end a sentence."""
        splitter = TextSplitter("en")
        result = splitter.split("Chapter one\n\nIt was a dark night")
        assert result == ["Chapter one", "It was a dark night"]

    def test_dialogue_dash(self):
        """Newline + dash starts a new sentence."""
        splitter = TextSplitter("ru")
        result = splitter.split("Он вошёл в комнату.\n— Привет! — сказал он.")
        assert len(result) >= 2


class TestEdgeCases:
    """Test edge cases."""

    def test_empty_string(self):
        """Empty string should return empty list."""
        splitter = TextSplitter("en")
        assert splitter.split("") == []
        assert splitter.split("   \n ") == []

    def test_single_sentence_no_punctuation(self):
        """Single sentence without final punctuation."""
        splitter = TextSplitter("en")
        result = splitter.split("Hello world")
        assert len(result) == 1

    def test_exclamation_question(self):
        """Exclamation and question marks should split sentences."""
        splitter = TextSplitter("en")

        result = splitter.split("Hello! How are you?")
        assert len(result) == 2

    def test_preserve_spacing(self):
        """Spacing should be preserved in output."""
        splitter = TextSplitter("en")

        result = splitter.split("Dr. Smith arrived.")
        assert result[0] == "Dr. Smith arrived."

    def test_unsupported_language(self):
        """Unknown languages fail fast."""
        with pytest.raises(UnsupportedLanguageError):
            TextSplitter("xx")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
