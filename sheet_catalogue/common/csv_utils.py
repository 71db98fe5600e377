"""
CSV Utilities

Tokenizes raw sheet exports into positional rows and writes normalized
products back out. Handles large field sizes and quoted multi-line cells.
"""

import csv
import io
from pathlib import Path
from typing import Dict, List, Optional

from .errors import ParseFailure


def configure_csv(field_size_limit: int = 10 * 1024 * 1024) -> None:
    """
    Configure CSV module for large fields.

    Args:
        field_size_limit: Maximum field size in bytes (default: 10MB)
    """
    csv.field_size_limit(field_size_limit)


def parse_rows(text: str, delimiter: str = ',', strict: bool = False) -> List[List[str]]:
    """
    Tokenize delimited text into rows of string cells.

    Quoted fields may contain delimiters and newlines. Blank lines are
    skipped; rows of empty cells are kept since their position still counts.

    Args:
        text: Raw CSV text
        delimiter: Field delimiter (default: comma)
        strict: Reject malformed quoting instead of reading it leniently

    Returns:
        List of rows, each a list of cell strings

    Raises:
        ParseFailure: If the text is empty or cannot be tokenized
    """
    if not text or not text.strip():
        raise ParseFailure("CSV content is empty")

    # Sheet exports sometimes carry a UTF-8 BOM
    if text.startswith('\ufeff'):
        text = text[1:]

    reader = csv.reader(io.StringIO(text, newline=''), delimiter=delimiter, strict=strict)
    try:
        rows = [row for row in reader if row and row != ['']]
    except csv.Error as e:
        raise ParseFailure(f"CSV tokenization failed at line {reader.line_num}: {e}") from e

    if not rows:
        raise ParseFailure("CSV content has no rows")

    return rows


def write_csv(
    file_path: str | Path,
    rows: List[Dict[str, str]],
    fieldnames: Optional[List[str]] = None,
    encoding: str = 'utf-8'
) -> int:
    """
    Write rows to CSV file.

    Args:
        file_path: Path to output CSV file
        rows: List of dictionaries to write
        fieldnames: Column names (if None, uses keys from first row)
        encoding: File encoding (default: utf-8)

    Returns:
        Number of rows written
    """
    if not rows:
        return 0

    if fieldnames is None:
        fieldnames = list(rows[0].keys())

    with open(file_path, 'w', encoding=encoding, newline='') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    return len(rows)


# Initialize CSV configuration on module import
configure_csv()
