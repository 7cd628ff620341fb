"""Sentiment scoring.

Two flavours:
- Lexicon (dictionary) sentiment: term counts joined to a word -> value
  lexicon, summed per document. Ignores context ("not good" counts as good).
- Sentence sentiment: each document is split into sentences and handed to
  an injected scorer. The scorer is a black box - anything mapping a list
  of sentences to a list of floats. `vader_scorer()` wraps NLTK's VADER,
  which handles negation and amplifiers.
"""

import csv
from dataclasses import asdict, dataclass
from typing import Callable, Iterable, Mapping, Sequence

import nltk
from loguru import logger

from analysis.word_frequency import TermCount
from core.documents import Document
from core.languages import ENGLISH
from core.text_splitter import TextSplitter
from core.tokenizer import normalize_term
from errors import InvalidConfigurationError, ScorerError

SentenceScorer = Callable[[Sequence[str]], Sequence[float]]

# Label -> value for categorical (Bing-style) lexicons
LABEL_VALUES = {"positive": 1.0, "negative": -1.0}


class Lexicon:
    """Word -> sentiment value lookup."""

    def __init__(self, values: Mapping[str, float]):
        self.values: dict[str, float] = {}
        for word, value in values.items():
            term = normalize_term(word)
            if term:
                self.values[term] = float(value)

    @classmethod
    def from_labels(cls, labels: Mapping[str, str]) -> "Lexicon":
        """Build from word -> "positive"/"negative" labels. Other labels are skipped."""
        return cls({
            word: LABEL_VALUES[label.lower()]
            for word, label in labels.items()
            if label.lower() in LABEL_VALUES
        })

    def get(self, term: str, default: float = 0.0) -> float:
        return self.values.get(term, default)

    def __contains__(self, term: str) -> bool:
        return term in self.values

    def __len__(self) -> int:
        return len(self.values)


def load_lexicon(path, encoding: str = "utf-8") -> Lexicon:
    """
    Load a lexicon from a TSV file with a header row.

    Columns: `word` plus either `value` (numeric, AFINN-style) or
    `sentiment` (positive/negative label, Bing-style).

    Raises:
        InvalidConfigurationError: If the columns are missing or a value is not numeric
    """
    with open(path, "r", encoding=encoding, newline="") as f:
        reader = csv.DictReader(f, delimiter="\t")
        columns = reader.fieldnames or []
        if "word" not in columns:
            raise InvalidConfigurationError("lexicon column", "word", f"found: {', '.join(columns)}")

        if "value" in columns:
            values = {}
            for row in reader:
                try:
                    values[row["word"]] = float(row["value"])
                except (TypeError, ValueError):
                    raise InvalidConfigurationError(
                        "lexicon value", row["value"], f"for word {row['word']!r}"
                    ) from None
            lexicon = Lexicon(values)
        elif "sentiment" in columns:
            lexicon = Lexicon.from_labels({row["word"]: row["sentiment"] or "" for row in reader})
        else:
            raise InvalidConfigurationError(
                "lexicon column", "value/sentiment", f"found: {', '.join(columns)}"
            )

    logger.debug(f"Loaded lexicon with {len(lexicon)} words from {path}")
    return lexicon


@dataclass(frozen=True)
class LexiconSentiment:
    """Per-document dictionary sentiment; sentiment = positive - negative."""
    document_id: str
    positive: float
    negative: float
    sentiment: float

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SentenceSentiment:
    document_id: str
    sentence_index: int
    sentence: str
    score: float

    def as_dict(self) -> dict:
        return asdict(self)


def lexicon_sentiment(counts: Iterable[TermCount], lexicon: Lexicon) -> list[LexiconSentiment]:
    """
    Join term counts with a lexicon and sum per document.

    Documents without any lexicon word produce no row.
    """
    totals: dict[str, list[float]] = {}
    for row in counts:
        if row.term not in lexicon:
            continue
        value = lexicon.get(row.term)
        pos_neg = totals.setdefault(row.document_id, [0.0, 0.0])
        if value > 0:
            pos_neg[0] += row.count * value
        elif value < 0:
            pos_neg[1] += row.count * -value

    return [
        LexiconSentiment(document_id=doc_id, positive=pos, negative=neg, sentiment=pos - neg)
        for doc_id, (pos, neg) in totals.items()
    ]


def score_sentences(
    documents: Iterable[Document],
    scorer: SentenceScorer,
    language: str = ENGLISH.code,
) -> list[SentenceSentiment]:
    """
    Split each document into sentences and score them with `scorer`.

    The scorer is called once per non-empty document.

    Raises:
        ScorerError: If the scorer returns the wrong number of scores
    """
    splitter = TextSplitter(language)
    result = []

    for doc in documents:
        sentences = splitter.split(doc.text)
        if not sentences:
            logger.debug(f"Document {doc.id!r} has no sentences")
            continue

        scores = list(scorer(sentences))
        if len(scores) != len(sentences):
            raise ScorerError(
                f"Scorer returned {len(scores)} scores for {len(sentences)} sentences "
                f"in document {doc.id!r}"
            )

        for index, (sentence, score) in enumerate(zip(sentences, scores)):
            result.append(SentenceSentiment(
                document_id=doc.id,
                sentence_index=index,
                sentence=sentence,
                score=float(score),
            ))

    return result


def _ensure_vader_lexicon() -> None:
    """Download VADER lexicon if not present."""
    try:
        nltk.data.find("sentiment/vader_lexicon.zip")
    except LookupError:
        logger.info("Downloading NLTK VADER lexicon...")
        nltk.download("vader_lexicon", quiet=True)


def vader_scorer() -> SentenceScorer:
    """Sentence scorer backed by NLTK's VADER (compound score in [-1, 1])."""
    _ensure_vader_lexicon()
    from nltk.sentiment.vader import SentimentIntensityAnalyzer

    analyzer = SentimentIntensityAnalyzer()

    def score(sentences: Sequence[str]) -> list[float]:
        return [analyzer.polarity_scores(s)["compound"] for s in sentences]

    return score
