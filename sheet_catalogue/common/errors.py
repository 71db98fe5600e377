"""
Exceptions for the ingestion pipeline.

Every failure here is recoverable by the caller: parse and network
failures fall through to the next data tier, malformed rows are dropped.
"""

from typing import Optional


class CatalogueError(Exception):
    """Base exception for catalogue ingestion errors"""

    detail: str = "Catalogue ingestion failed"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.detail)
        self.detail = detail or self.detail


class ParseFailure(CatalogueError):
    """CSV text is empty or cannot be tokenized"""

    detail = "CSV content could not be parsed"


class NetworkFailure(CatalogueError):
    """A data source could not deliver a usable payload"""

    detail = "Data source unavailable"


class MalformedRowFailure(CatalogueError):
    """A sheet row cannot yield a product record"""

    detail = "Row rejected"

    def __init__(self, row_index: int, reason: str):
        super().__init__(f"Row {row_index}: {reason}")
        self.row_index = row_index
        self.reason = reason
