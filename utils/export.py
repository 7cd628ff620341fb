"""Serialization of result tables to delimited text and JSON."""

import csv
import json
from pathlib import Path
from typing import Iterable, TextIO


def rows_to_dicts(rows: Iterable) -> list[dict]:
    """Convert result rows (anything with as_dict(), or (term, count) tuples) to dicts."""
    result = []
    for row in rows:
        if hasattr(row, "as_dict"):
            result.append(row.as_dict())
        else:
            term, count = row
            result.append({"term": term, "count": count})
    return result


def write_delimited_to(rows: Iterable, stream: TextIO, delimiter: str = "\t") -> int:
    """Write rows with a header line to an open stream. Returns number of rows."""
    records = rows_to_dicts(rows)
    if not records:
        return 0

    writer = csv.DictWriter(stream, fieldnames=list(records[0]), delimiter=delimiter, lineterminator="\n")
    writer.writeheader()
    writer.writerows(records)
    return len(records)


def write_delimited(rows: Iterable, path, delimiter: str = "\t") -> str:
    """
    Export rows to a delimited text file (TSV by default).

    An empty table produces an empty file.

    Returns:
        Path of the written file
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        write_delimited_to(rows, f, delimiter)

    return str(output_path)


def write_json(rows: Iterable, path) -> str:
    """Export rows to a JSON array of objects."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(rows_to_dicts(rows), f, ensure_ascii=False, indent=2)

    return str(output_path)
