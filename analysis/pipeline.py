"""End-to-end text statistics pipeline.

raw text -> tokenize -> stopword filter -> count -> {normalize, tf-idf}

Every run recomputes everything from scratch. Per-document work
(tokenize, filter, count) runs in a thread pool; the merge into corpus
tables is a single pass in input order, so output does not depend on
which thread finishes first.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Iterable, Optional

from loguru import logger

from analysis.normalizer import NormalizedFrequency, normalize
from analysis.stopwords import StopwordFilter, build_stopword_filter
from analysis.tfidf import TfIdfScore, compute_tfidf, top_tfidf
from analysis.word_frequency import TermCount, corpus_term_counts, count_terms, top_terms
from config import Config
from core.documents import Document
from core.tokenizer import tokenize
from errors import InvalidConfigurationError


@dataclass
class PipelineResult:
    """The three output tables of one pipeline run."""
    term_counts: list[TermCount] = field(default_factory=list)
    normalized: list[NormalizedFrequency] = field(default_factory=list)
    tfidf: list[TfIdfScore] = field(default_factory=list)
    document_ids: list[str] = field(default_factory=list)
    tie_break: str = "first_seen"

    @property
    def is_empty(self) -> bool:
        """True when there is no data (empty corpus or everything filtered out)."""
        return not self.term_counts

    def top_terms(self, n: Optional[int] = None) -> list[TermCount]:
        return top_terms(self.term_counts, n, self.tie_break)

    def top_tfidf(self, n: Optional[int] = None) -> list[TfIdfScore]:
        return top_tfidf(self.tfidf, n, self.tie_break)

    def corpus_term_counts(self, n: Optional[int] = None) -> list[tuple[str, int]]:
        return corpus_term_counts(self.term_counts, n, self.tie_break)


class TextStatsPipeline:
    """Runs the full statistics pipeline over a list of documents."""

    def __init__(self, config: Optional[Config] = None, stopword_filter: Optional[StopwordFilter] = None):
        """
        Initialize pipeline.

        Args:
            config: Pipeline configuration (validated here, before any work)
            stopword_filter: Explicit filter; built from config when omitted

        Raises:
            InvalidConfigurationError: If config is invalid
            UnsupportedLanguageError: If the stopword language is unknown
        """
        self.config = (config or Config()).validate()

        if stopword_filter is None:
            stopword_filter = build_stopword_filter(
                self.config.language,
                extra=self.config.extra_stopwords,
                use_default=self.config.use_default_stopwords,
            )
        self.stopword_filter = stopword_filter

    def _count_document(self, document: Document) -> list[TermCount]:
        """Tokenize, filter and count a single document."""
        return count_terms(self.stopword_filter.filter(tokenize(document)))

    def _count_all(self, documents: list[Document]) -> list[list[TermCount]]:
        """Per-document counts, in input order."""
        if self.config.workers <= 1 or len(documents) <= 1:
            return [self._count_document(doc) for doc in documents]

        results: list[Optional[list[TermCount]]] = [None] * len(documents)
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            futures = {
                executor.submit(self._count_document, doc): idx
                for idx, doc in enumerate(documents)
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return results

    def run(self, documents: Iterable[Document]) -> PipelineResult:
        """
        Run the pipeline.

        Returns:
            PipelineResult; all tables empty for an empty corpus

        Raises:
            InvalidConfigurationError: If two documents share an id
        """
        documents = list(documents)
        document_ids = [doc.id for doc in documents]

        seen = set()
        for doc_id in document_ids:
            if doc_id in seen:
                raise InvalidConfigurationError("document id", doc_id, "duplicate")
            seen.add(doc_id)

        if not documents:
            logger.debug("Empty corpus - no data")
            return PipelineResult(tie_break=self.config.tie_break)

        # Single-threaded merge, input order
        term_counts: list[TermCount] = []
        for doc, rows in zip(documents, self._count_all(documents)):
            if not rows:
                logger.debug(f"Document {doc.id!r} has no terms after filtering")
            term_counts.extend(rows)

        normalized = normalize(term_counts, self.config.normalization_base)
        tfidf = compute_tfidf(term_counts, document_ids)

        logger.debug(
            f"Pipeline: {len(documents)} documents, {len(term_counts)} term counts, "
            f"{len(tfidf)} tf-idf scores"
        )

        return PipelineResult(
            term_counts=term_counts,
            normalized=normalized,
            tfidf=tfidf,
            document_ids=document_ids,
            tie_break=self.config.tie_break,
        )


def run_pipeline(documents: Iterable[Document], config: Optional[Config] = None) -> PipelineResult:
    """Convenience function to run the pipeline with default settings."""
    return TextStatsPipeline(config).run(documents)
