#!/usr/bin/env python3
"""Text statistics CLI.

Usage:
    python main.py count books/*.txt --top 10
    python main.py tfidf books/*.txt --top 5 --extra-stopwords elizabeth,darcy
    python main.py normalize --tsv lines.tsv --id-column book --text-column text -o freq.tsv
    python main.py sentiment books/*.txt --lexicon bing.tsv
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from analysis.pipeline import TextStatsPipeline
from analysis.sentiment import lexicon_sentiment, load_lexicon
from config import Config
from core.documents import load_text_files, load_tsv
from core.languages import UnsupportedLanguageError
from errors import TextStatsError
from utils.export import write_delimited, write_delimited_to, write_json
from utils.log_setup import setup_logging


def _load_documents(args):
    """Load documents from positional files and/or --tsv."""
    missing = [p for p in args.files if not Path(p).exists()]
    if missing:
        print(f"Error: File not found: {missing[0]}")
        sys.exit(1)

    documents = load_text_files(args.files)
    if args.tsv:
        if not Path(args.tsv).exists():
            print(f"Error: File not found: {args.tsv}")
            sys.exit(1)
        documents.extend(load_tsv(args.tsv, args.id_column, args.text_column))

    if not documents:
        print("Error: No input documents (give files or --tsv)")
        sys.exit(1)
    return documents


def _build_config(args) -> Config:
    extra = [w.strip() for w in (args.extra_stopwords or "").split(",") if w.strip()]
    return Config(
        language=args.stopwords_lang,
        extra_stopwords=extra,
        use_default_stopwords=not args.no_default_stopwords,
        normalization_base=args.base,
        tie_break=args.tie_break,
        top_n=args.top,
        workers=args.workers,
        debug=args.verbose,
    ).validate()


def _emit(rows, args):
    """Write rows to --output, or print them to stdout."""
    if args.output:
        if args.format == "json":
            path = write_json(rows, args.output)
        else:
            path = write_delimited(rows, args.output, "," if args.format == "csv" else "\t")
        print(f"Saved {len(rows)} rows: {path}")
    elif not rows:
        print("No data")
    else:
        write_delimited_to(rows, sys.stdout, "," if args.format == "csv" else "\t")


def cmd_count(args):
    """Word counts per document."""
    config = _build_config(args)
    result = TextStatsPipeline(config).run(_load_documents(args))
    rows = result.term_counts if args.all else result.top_terms(config.top_n)
    _emit(rows, args)


def cmd_tfidf(args):
    """Most characteristic words per document."""
    config = _build_config(args)
    result = TextStatsPipeline(config).run(_load_documents(args))
    rows = result.tfidf if args.all else result.top_tfidf(config.top_n)
    _emit(rows, args)


def cmd_normalize(args):
    """Frequency per million (or --base) words."""
    config = _build_config(args)
    result = TextStatsPipeline(config).run(_load_documents(args))
    _emit(result.normalized, args)


def cmd_sentiment(args):
    """Dictionary sentiment per document."""
    if not Path(args.lexicon).exists():
        print(f"Error: Lexicon not found: {args.lexicon}")
        sys.exit(1)

    config = _build_config(args)
    lexicon = load_lexicon(args.lexicon)
    result = TextStatsPipeline(config).run(_load_documents(args))
    _emit(lexicon_sentiment(result.term_counts, lexicon), args)


def _add_common_arguments(parser):
    parser.add_argument("files", nargs="*", help="Plain-text input files (id = file name)")
    parser.add_argument("--tsv", default=None, help="Tab-separated input file with a header row")
    parser.add_argument("--id-column", default="id", help="TSV column with document id (default: id)")
    parser.add_argument("--text-column", default="text", help="TSV column with text (default: text)")
    parser.add_argument("--stopwords-lang", default="en",
                        help="Stopword list language (en, es, ru, de, ...) or 'none' (default: en)")
    parser.add_argument("--extra-stopwords", default=None,
                        help="Comma-separated extra exclusions, e.g. character names")
    parser.add_argument("--no-default-stopwords", action="store_true",
                        help="Only use --extra-stopwords")
    parser.add_argument("--base", type=float, default=1_000_000,
                        help="Normalization base (default: 1000000 = per million)")
    parser.add_argument("--tie-break", default="first_seen", choices=["first_seen", "lexicographic"],
                        help="Ordering of equally ranked words (default: first_seen)")
    parser.add_argument("--top", type=int, default=10, help="Words per document (default: 10)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Parallel workers for per-document counting (default: 1)")
    parser.add_argument("-o", "--output", default=None, help="Output file (default: print to stdout)")
    parser.add_argument("--format", default="tsv", choices=["tsv", "csv", "json"],
                        help="Output format (default: tsv; json needs --output)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Text statistics - word counts, frequency per million, tf-idf and sentiment"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === count command ===
    count_parser = subparsers.add_parser("count", help="Word counts per document")
    _add_common_arguments(count_parser)
    count_parser.add_argument("--all", action="store_true", help="All words, unranked")
    count_parser.set_defaults(func=cmd_count)

    # === tfidf command ===
    tfidf_parser = subparsers.add_parser("tfidf", help="tf-idf per document")
    _add_common_arguments(tfidf_parser)
    tfidf_parser.add_argument("--all", action="store_true", help="All words, unranked")
    tfidf_parser.set_defaults(func=cmd_tfidf)

    # === normalize command ===
    normalize_parser = subparsers.add_parser("normalize", help="Frequency per million words")
    _add_common_arguments(normalize_parser)
    normalize_parser.set_defaults(func=cmd_normalize)

    # === sentiment command ===
    sentiment_parser = subparsers.add_parser("sentiment", help="Dictionary sentiment per document")
    _add_common_arguments(sentiment_parser)
    sentiment_parser.add_argument("--lexicon", required=True,
                                  help="Lexicon TSV: word + value (numeric) or sentiment (positive/negative)")
    sentiment_parser.set_defaults(func=cmd_sentiment)

    args = parser.parse_args(argv)

    if args.format == "json" and not args.output:
        print("Error: --format json requires --output")
        sys.exit(1)

    setup_logging(args.verbose)

    try:
        args.func(args)
    except (TextStatsError, UnsupportedLanguageError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
