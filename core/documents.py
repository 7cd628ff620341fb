"""Document model and ingestion helpers."""

import csv
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from loguru import logger

from errors import InvalidConfigurationError


@dataclass(frozen=True)
class Document:
    """A document to analyze: identifier plus raw text."""
    id: str
    text: str


def load_text_files(paths: Iterable, encoding: str = "utf-8") -> list[Document]:
    """Load plain-text files, one Document per file (id = file stem)."""
    documents = []
    for path in paths:
        path = Path(path)
        text = path.read_text(encoding=encoding)
        documents.append(Document(id=path.stem, text=text))
        logger.debug(f"Loaded {path} ({len(text)} chars)")
    return documents


def load_tsv(
    path,
    id_column: str = "id",
    text_column: str = "text",
    encoding: str = "utf-8",
) -> list[Document]:
    """
    Load documents from a tab-separated file with a header row.

    Rows sharing the same id (e.g. one line of a book per row) are joined
    with newlines, in file order. Documents keep the order in which their
    id first appears.

    Args:
        path: TSV file path
        id_column: Column holding the document id
        text_column: Column holding the text

    Raises:
        InvalidConfigurationError: If a required column is missing
    """
    # Long book lines can exceed the csv module's default field limit
    csv.field_size_limit(sys.maxsize)

    parts: dict[str, list[str]] = {}
    with open(path, "r", encoding=encoding, newline="") as f:
        reader = csv.DictReader(f, delimiter="\t")
        columns = reader.fieldnames or []
        for column in (id_column, text_column):
            if column not in columns:
                raise InvalidConfigurationError(
                    "TSV column", column, f"available: {', '.join(columns) or 'none'}"
                )

        for row in reader:
            doc_id = row[id_column]
            parts.setdefault(doc_id, []).append(row[text_column] or "")

    logger.debug(f"Loaded {len(parts)} documents from {path}")
    return [Document(id=doc_id, text="\n".join(lines)) for doc_id, lines in parts.items()]
