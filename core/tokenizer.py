"""Word tokenizer.

Splits raw text into normalized word tokens:
- lowercase, accents stripped (café -> cafe)
- only the longest [a-z']+ run of each unit is kept, so "_italic_" -> "italic"
  and "1st" -> "st"
- apostrophes survive only inside a word ("don't", but not "'tis'")
"""

import re
import unicodedata
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Iterator

from core.documents import Document

# Units are delimited by whitespace and any punctuation except apostrophes.
# \w keeps digits and underscores inside a unit - they are trimmed below.
UNIT_PATTERN = re.compile(r"[\w']+")

# Alphabetic core of a unit
CORE_PATTERN = re.compile(r"[a-z']+")

# Typographic apostrophes are folded into ASCII before matching
APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})


@dataclass(frozen=True)
class Token:
    """A normalized word plus the document it came from."""
    term: str
    document_id: str


def fold_text(text: str) -> str:
    """Lowercase text, fold apostrophes and drop accents."""
    text = text.translate(APOSTROPHES)
    text = unicodedata.normalize("NFD", text)
    text = "".join(c for c in text if not unicodedata.combining(c))
    return text.lower()


def normalize_unit(unit: str) -> str:
    """
    Reduce one already-folded unit to its alphabetic core.

    Returns an empty string when the unit has no alphabetic content.
    """
    runs = [run.strip("'") for run in CORE_PATTERN.findall(unit)]
    runs = [run for run in runs if run]
    if not runs:
        return ""
    # max() keeps the first of equally long runs
    return max(runs, key=len)


def normalize_term(word: str) -> str:
    """Normalize a free-standing word the same way the tokenizer does."""
    return normalize_unit(fold_text(word))


def iter_terms(text: str) -> Iterator[str]:
    """Yield normalized terms of raw text, in original order."""
    if not text:
        return
    for match in UNIT_PATTERN.finditer(fold_text(text)):
        term = normalize_unit(match.group(0))
        if term:
            yield term


def tokenize(document: Document) -> Iterator[Token]:
    """Lazily tokenize one document."""
    for term in iter_terms(document.text):
        yield Token(term=term, document_id=document.id)


def tokenize_corpus(documents: Iterable[Document]) -> Iterator[Token]:
    """Lazily tokenize documents one after another."""
    return chain.from_iterable(tokenize(doc) for doc in documents)
