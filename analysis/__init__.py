"""Analysis modules: stopwords, word frequency, normalization, tf-idf, sentiment."""

from .normalizer import NormalizedFrequency, normalize
from .sentiment import Lexicon, lexicon_sentiment, score_sentences
from .stopwords import StopwordFilter, build_stopword_filter
from .tfidf import CorpusStats, TfIdfScore, compute_tfidf, top_tfidf
from .word_frequency import TermCount, TieBreak, count_terms, top_terms

__all__ = [
    "NormalizedFrequency",
    "normalize",
    "Lexicon",
    "lexicon_sentiment",
    "score_sentences",
    "StopwordFilter",
    "build_stopword_filter",
    "CorpusStats",
    "TfIdfScore",
    "compute_tfidf",
    "top_tfidf",
    "TermCount",
    "TieBreak",
    "count_terms",
    "top_terms",
]
