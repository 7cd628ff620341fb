"""Tests for the end-to-end pipeline."""

import math
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from analysis.pipeline import PipelineResult, TextStatsPipeline, run_pipeline
from analysis.stopwords import StopwordFilter
from analysis.word_frequency import TermCount
from config import Config
from core.documents import Document
from core.languages import UnsupportedLanguageError
from errors import InvalidConfigurationError

CORPUS = [
    Document("pride", "It is a truth universally acknowledged, that a single man in possession "
                      "of a good fortune, must be in want of a wife. Elizabeth laughed."),
    Document("emma", "Emma Woodhouse, handsome, clever, and rich, with a comfortable home "
                     "and happy disposition. Emma laughed."),
    Document("persuasion", "Sir Walter Elliot, of Kellynch Hall, in Somersetshire, was a man "
                           "who, for his own amusement, never took up any book but the Baronetage."),
]


class TestScenarios:
    """Worked examples."""

    def test_stopword_scenario(self):
        """'the' removed, remaining words counted."""
        pipeline = TextStatsPipeline(stopword_filter=StopwordFilter({"the"}))
        result = pipeline.run([Document("A", "the cat sat. the dog sat.")])
        assert result.term_counts == [
            TermCount("A", "cat", 1),
            TermCount("A", "sat", 2),
            TermCount("A", "dog", 1),
        ]

    def test_tfidf_scenario(self):
        """cat in both documents scores 0, dog in A scores 0.5 * ln 2."""
        pipeline = TextStatsPipeline(stopword_filter=StopwordFilter())
        result = pipeline.run([Document("A", "cat dog"), Document("B", "cat cat")])
        scores = {(s.document_id, s.term): s for s in result.tfidf}
        assert scores[("A", "cat")].idf == 0.0
        assert scores[("A", "dog")].idf == pytest.approx(math.log(2))
        assert scores[("A", "dog")].tf_idf == pytest.approx(0.5 * math.log(2))

    def test_empty_corpus(self):
        """No documents: three empty tables, no error."""
        result = run_pipeline([])
        assert result.term_counts == []
        assert result.normalized == []
        assert result.tfidf == []
        assert result.is_empty
        assert result.top_terms(5) == []
        assert result.top_tfidf(5) == []


class TestPipelineBehaviour:
    """General properties."""

    def test_empty_document_contributes_nothing(self):
        """A document of stopwords yields no rows but still counts for idf."""
        result = run_pipeline([Document("A", "cat"), Document("B", "the and of")])
        assert result.term_counts == [TermCount("A", "cat", 1)]
        assert result.document_ids == ["A", "B"]
        assert result.tfidf[0].idf == pytest.approx(math.log(2))

    def test_counts_sum_to_surviving_tokens(self):
        """Per-document count sum equals tokens left after filtering."""
        result = run_pipeline([Document("A", "The cat and the hat. A cat!")])
        assert sum(r.count for r in result.term_counts) == 3

    def test_default_config_removes_english_stopwords(self):
        """Default config uses the English list."""
        result = run_pipeline([Document("A", "the cat and the hat")])
        assert [r.term for r in result.term_counts] == ["cat", "hat"]

    def test_extra_stopwords_from_config(self):
        """Character names can be excluded through config."""
        result = run_pipeline(CORPUS, Config(extra_stopwords=["Emma", "Elizabeth"]))
        terms = {r.term for r in result.term_counts}
        assert "emma" not in terms
        assert "elizabeth" not in terms
        assert "woodhouse" in terms

    def test_idempotent(self):
        """Same input, identical output."""
        first = run_pipeline(CORPUS)
        second = run_pipeline(CORPUS)
        assert first == second

    def test_parallel_matches_sequential(self):
        """Thread pool execution gives the same tables as sequential."""
        corpus = CORPUS + [Document(f"copy-{d.id}", d.text.upper()) for d in CORPUS]
        sequential = run_pipeline(corpus, Config(workers=1))
        parallel = run_pipeline(corpus, Config(workers=4))
        assert parallel == sequential
        assert [r.document_id for r in parallel.term_counts][0] == "pride"

    def test_top_terms_use_config_tie_break(self):
        """Result ranking uses the configured tie-break."""
        result = run_pipeline([Document("A", "zebra apple")], Config(tie_break="lexicographic"))
        assert [r.term for r in result.top_terms()] == ["apple", "zebra"]
        assert [r.term for r in result.top_tfidf()] == ["apple", "zebra"]
        assert result.corpus_term_counts() == [("apple", 1), ("zebra", 1)]

    def test_result_default_is_empty(self):
        """A bare PipelineResult reports no data."""
        assert PipelineResult().is_empty


class TestConfigurationErrors:
    """Invalid configuration is rejected before any work."""

    def test_duplicate_document_ids(self):
        """Two documents with the same id are rejected."""
        with pytest.raises(InvalidConfigurationError):
            run_pipeline([Document("A", "cat"), Document("A", "dog")])

    @pytest.mark.parametrize("config", [
        Config(normalization_base=0),
        Config(normalization_base=-5),
        Config(normalization_base=float("nan")),
        Config(tie_break="random"),
        Config(workers=0),
        Config(top_n=0),
    ])
    def test_invalid_config(self, config):
        """Bad settings fail at construction time."""
        with pytest.raises(InvalidConfigurationError):
            TextStatsPipeline(config)

    def test_unsupported_language(self):
        """Unknown stopword language fails at construction time."""
        with pytest.raises(UnsupportedLanguageError):
            TextStatsPipeline(Config(language="xx"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
