"""Frequency-per-million normalization for cross-document comparison."""

import math
from dataclasses import asdict, dataclass
from typing import Iterable

from analysis.word_frequency import TermCount, document_totals
from errors import InvalidConfigurationError

DEFAULT_BASE = 1_000_000


@dataclass(frozen=True)
class NormalizedFrequency:
    """Raw count rescaled to occurrences per `base` words of its document."""
    document_id: str
    term: str
    count: int
    frequency: float

    def as_dict(self) -> dict:
        return asdict(self)


def validate_base(base) -> float:
    """Reject non-positive, non-finite or non-numeric normalization bases."""
    if (isinstance(base, bool) or not isinstance(base, (int, float))
            or (isinstance(base, float) and not math.isfinite(base)) or base <= 0):
        raise InvalidConfigurationError("normalization base", base, "must be a positive number")
    return base


def normalize(counts: Iterable[TermCount], base: float = DEFAULT_BASE) -> list[NormalizedFrequency]:
    """
    Rescale counts as count * base / total_terms_in_document.

    Documents with no counted terms produce no rows.

    Raises:
        InvalidConfigurationError: If base <= 0
    """
    base = validate_base(base)
    rows = list(counts)
    totals = document_totals(rows)

    return [
        NormalizedFrequency(
            document_id=row.document_id,
            term=row.term,
            count=row.count,
            frequency=row.count * base / totals[row.document_id],
        )
        for row in rows
        if totals[row.document_id] > 0
    ]
