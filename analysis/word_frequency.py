"""Word frequency counting and top-N ranking."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from core.tokenizer import Token
from errors import InvalidConfigurationError


@dataclass(frozen=True)
class TermCount:
    """Occurrences of one term in one document."""
    document_id: str
    term: str
    count: int

    def as_dict(self) -> dict:
        return asdict(self)


class TieBreak(str, Enum):
    """How equally ranked terms are ordered in top-N results.

    FIRST_SEEN keeps the order in which terms first appeared (stable sort).
    LEXICOGRAPHIC orders equal terms alphabetically.
    """
    FIRST_SEEN = "first_seen"
    LEXICOGRAPHIC = "lexicographic"


def resolve_tie_break(value: Union[TieBreak, str]) -> TieBreak:
    """Get TieBreak from enum or string, raising on unknown modes."""
    if isinstance(value, TieBreak):
        return value
    try:
        return TieBreak(str(value).lower())
    except ValueError:
        choices = ", ".join(t.value for t in TieBreak)
        raise InvalidConfigurationError("tie-break mode", value, f"choose from {choices}") from None


def rank_rows(rows: list, key: str, tie_break: TieBreak) -> list:
    """Sort rows by `key` descending with the given tie-break.

    Rows must already be in first-seen order; Python's sort is stable,
    so FIRST_SEEN needs nothing more than a single descending sort.
    """
    if tie_break == TieBreak.LEXICOGRAPHIC:
        return sorted(rows, key=lambda r: (-getattr(r, key), r.term))
    return sorted(rows, key=lambda r: getattr(r, key), reverse=True)


def group_by_document(rows: Iterable) -> dict[str, list]:
    """Group rows by document_id, keeping first-seen order of documents and rows."""
    groups: dict[str, list] = {}
    for row in rows:
        groups.setdefault(row.document_id, []).append(row)
    return groups


def count_terms(tokens: Iterable[Token]) -> list[TermCount]:
    """
    Count tokens per (document, term).

    Returns:
        TermCount rows; documents in first-seen order, terms within each
        document in first-seen order
    """
    counts: dict[str, dict[str, int]] = {}
    for token in tokens:
        doc_counts = counts.setdefault(token.document_id, {})
        doc_counts[token.term] = doc_counts.get(token.term, 0) + 1

    return [
        TermCount(document_id=doc_id, term=term, count=count)
        for doc_id, doc_counts in counts.items()
        for term, count in doc_counts.items()
    ]


def document_totals(counts: Iterable[TermCount]) -> dict[str, int]:
    """Total number of counted terms per document."""
    totals: dict[str, int] = {}
    for row in counts:
        totals[row.document_id] = totals.get(row.document_id, 0) + row.count
    return totals


def top_terms(
    counts: Iterable[TermCount],
    n: Optional[int] = None,
    tie_break: Union[TieBreak, str] = TieBreak.FIRST_SEEN,
) -> list[TermCount]:
    """
    Most frequent terms of each document.

    Args:
        counts: TermCount rows (in first-seen order)
        n: Max rows per document (None = all)
        tie_break: Ordering of equal counts

    Returns:
        Rows grouped by document (first-seen order), each group ranked
    """
    mode = resolve_tie_break(tie_break)
    result = []
    for rows in group_by_document(counts).values():
        ranked = rank_rows(rows, "count", mode)
        result.extend(ranked if n is None else ranked[:n])
    return result


def corpus_term_counts(
    counts: Iterable[TermCount],
    n: Optional[int] = None,
    tie_break: Union[TieBreak, str] = TieBreak.FIRST_SEEN,
) -> list[tuple[str, int]]:
    """
    Term counts summed over the whole corpus, most frequent first.

    Returns:
        List of (term, count) tuples
    """
    mode = resolve_tie_break(tie_break)
    totals: dict[str, int] = {}
    for row in counts:
        totals[row.term] = totals.get(row.term, 0) + row.count

    items = list(totals.items())
    if mode == TieBreak.LEXICOGRAPHIC:
        items.sort(key=lambda x: (-x[1], x[0]))
    else:
        items.sort(key=lambda x: x[1], reverse=True)
    return items if n is None else items[:n]
