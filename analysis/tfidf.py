"""TF-IDF over per-document term counts.

tf     = count / total terms in document
idf    = ln(N / documents containing term)
tf_idf = tf * idf

A term present in every document gets idf = 0, which pushes corpus-wide
common words to the bottom without needing a stopword list.
"""

import math
from dataclasses import asdict, dataclass
from typing import Iterable, Optional, Union

from analysis.word_frequency import (
    TermCount,
    TieBreak,
    document_totals,
    group_by_document,
    rank_rows,
    resolve_tie_break,
)


@dataclass(frozen=True)
class TfIdfScore:
    document_id: str
    term: str
    tf: float
    idf: float
    tf_idf: float

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CorpusStats:
    """Read-only aggregates over a corpus' TermCount rows."""
    total_documents: int
    document_totals: dict[str, int]
    document_frequency: dict[str, int]

    def idf(self, term: str) -> float:
        """Inverse document frequency; 0.0 for unknown terms or empty corpus."""
        df = self.document_frequency.get(term, 0)
        if df == 0 or self.total_documents == 0:
            return 0.0
        return math.log(self.total_documents / df)


def corpus_stats(
    counts: Iterable[TermCount],
    document_ids: Optional[Iterable[str]] = None,
) -> CorpusStats:
    """
    Aggregate term counts into corpus statistics.

    Args:
        counts: TermCount rows for the whole corpus
        document_ids: All corpus document ids, including documents that
                      ended up with no terms. Defaults to ids seen in counts.
    """
    rows = list(counts)
    totals = document_totals(rows)

    # One row per (document, term), so counting rows per term gives df
    document_frequency: dict[str, int] = {}
    for row in rows:
        document_frequency[row.term] = document_frequency.get(row.term, 0) + 1

    if document_ids is None:
        total_documents = len(totals)
    else:
        total_documents = len(set(document_ids) | set(totals))

    return CorpusStats(
        total_documents=total_documents,
        document_totals=totals,
        document_frequency=document_frequency,
    )


def compute_tfidf(
    counts: Iterable[TermCount],
    document_ids: Optional[Iterable[str]] = None,
) -> list[TfIdfScore]:
    """
    Score every TermCount row. Output follows input row order.

    An empty corpus yields an empty list.
    """
    rows = list(counts)
    stats = corpus_stats(rows, document_ids)
    if stats.total_documents == 0:
        return []

    scores = []
    for row in rows:
        tf = row.count / stats.document_totals[row.document_id]
        idf = stats.idf(row.term)
        scores.append(TfIdfScore(
            document_id=row.document_id,
            term=row.term,
            tf=tf,
            idf=idf,
            tf_idf=tf * idf,
        ))
    return scores


def top_tfidf(
    scores: Iterable[TfIdfScore],
    n: Optional[int] = None,
    tie_break: Union[TieBreak, str] = TieBreak.FIRST_SEEN,
) -> list[TfIdfScore]:
    """Most characteristic terms per document, highest tf_idf first."""
    mode = resolve_tie_break(tie_break)
    result = []
    for rows in group_by_document(scores).values():
        ranked = rank_rows(rows, "tf_idf", mode)
        result.extend(ranked if n is None else ranked[:n])
    return result
