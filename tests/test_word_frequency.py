"""Tests for term counting and top-N ranking."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from analysis.word_frequency import (
    TermCount,
    TieBreak,
    corpus_term_counts,
    count_terms,
    document_totals,
    resolve_tie_break,
    top_terms,
)
from core.documents import Document
from core.tokenizer import Token, tokenize
from errors import InvalidConfigurationError


def tokens(doc_id: str, text: str) -> list[Token]:
    return list(tokenize(Document(doc_id, text)))


class TestCountTerms:
    """Test TermCount aggregation."""

    def test_counts_per_document(self):
        """Counts are per (document, term), in first-seen order."""
        rows = count_terms(tokens("A", "cat sat dog sat"))
        assert rows == [
            TermCount("A", "cat", 1),
            TermCount("A", "sat", 2),
            TermCount("A", "dog", 1),
        ]

    def test_same_term_in_two_documents(self):
        """The same term in two documents gives two rows."""
        rows = count_terms(tokens("A", "cat") + tokens("B", "cat cat"))
        assert rows == [TermCount("A", "cat", 1), TermCount("B", "cat", 2)]

    def test_sum_equals_token_count(self):
        """Sum of counts equals the number of tokens per document."""
        toks = tokens("A", "a b a c a b") + tokens("B", "x y")
        totals = document_totals(count_terms(toks))
        assert totals == {"A": 6, "B": 2}

    def test_empty(self):
        """No tokens, no rows."""
        assert count_terms([]) == []
        assert document_totals([]) == {}


class TestTopTerms:
    """Test ranking and tie-breaks."""

    def setup_method(self):
        self.rows = count_terms(tokens("A", "b a b a c") + tokens("B", "z y y"))

    def test_first_seen_tie_break(self):
        """Equal counts keep first-seen order."""
        ranked = top_terms(self.rows)
        assert [(r.document_id, r.term) for r in ranked] == [
            ("A", "b"), ("A", "a"), ("A", "c"), ("B", "y"), ("B", "z"),
        ]

    def test_lexicographic_tie_break(self):
        """Equal counts are ordered alphabetically on request."""
        ranked = top_terms(self.rows, tie_break="lexicographic")
        assert [r.term for r in ranked if r.document_id == "A"] == ["a", "b", "c"]

    def test_limit_per_document(self):
        """n limits rows per document, not overall."""
        ranked = top_terms(self.rows, n=1)
        assert [(r.document_id, r.term) for r in ranked] == [("A", "b"), ("B", "y")]

    def test_unknown_tie_break(self):
        """Unsupported tie-break modes are rejected."""
        with pytest.raises(InvalidConfigurationError):
            top_terms(self.rows, tie_break="random")

    def test_resolve_tie_break(self):
        """Strings and enum members both resolve."""
        assert resolve_tie_break("LEXICOGRAPHIC") is TieBreak.LEXICOGRAPHIC
        assert resolve_tie_break(TieBreak.FIRST_SEEN) is TieBreak.FIRST_SEEN


class TestCorpusTermCounts:
    """Test corpus-wide counts."""

    def test_summed_over_documents(self):
        """Counts are summed across documents and ranked."""
        rows = count_terms(tokens("A", "cat dog") + tokens("B", "cat cat bird"))
        assert corpus_term_counts(rows) == [("cat", 3), ("dog", 1), ("bird", 1)]
        assert corpus_term_counts(rows, n=2, tie_break="lexicographic") == [("cat", 3), ("bird", 1)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
