"""
Sheet Catalogue

Turns a hand-maintained resale spreadsheet export into categorized product
records, preferring the live sheet and falling back to a bundled snapshot.

Modules:
    models      - Data models (ProductRecord, SectionState, CategoryMatch)
    common      - Shared utilities (config loader, CSV tokenizer, logging, errors)
    extraction  - Category classification and row normalization
    fetching    - Live / snapshot sources and the fetch orchestrator
    catalogue   - Consumer-side filtering, counts and pagination
"""

__version__ = "0.1.0"
