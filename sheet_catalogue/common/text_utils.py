"""
Text Utilities

Helper functions for cleaning sheet cell text.
"""

import re
from typing import Optional

# Currency symbols and thousands separators found in price cells
_PRICE_NOISE = re.compile(r'[$¥￥,]')


def join_lines(text: str) -> str:
    """
    Trim a cell and turn each line break into a single space.

    Spacing inside a line is kept as typed, so product names keep their
    original spelling.

    Args:
        text: Cell text, possibly spanning several lines

    Returns:
        Single-line trimmed text
    """
    if not text:
        return ""
    return text.strip().replace('\r\n', '\n').replace('\n', ' ')


def collapse_whitespace(text: str) -> str:
    """
    Collapse newlines and every run of whitespace into single spaces.

    Stricter than join_lines; used for section labels, where banner rows
    are often padded with extra spaces.

    Args:
        text: Cell text, possibly spanning several lines

    Returns:
        Single-line trimmed text
    """
    if not text:
        return ""
    return re.sub(r'\s+', ' ', text).strip()


def clean_price(value: Optional[str]) -> Optional[str]:
    """
    Strip currency symbols and thousands separators from a price cell.

    Args:
        value: Raw price cell (e.g. " $1,299.00 ")

    Returns:
        Numeric-looking string (e.g. "1299.00"), or None for an empty cell

    Example:
        >>> clean_price("¥9,350")
        '9350'
    """
    if value is None:
        return None
    cleaned = _PRICE_NOISE.sub('', value).strip()
    return cleaned or None


def cell(row: list, index: int) -> str:
    """
    Return the trimmed cell at index, or "" when the row is too short.

    Args:
        row: Tokenized sheet row
        index: 0-based column index

    Returns:
        Trimmed cell text
    """
    if index < 0 or index >= len(row) or row[index] is None:
        return ""
    return row[index].strip()
