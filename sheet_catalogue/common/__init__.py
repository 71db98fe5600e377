# Common utilities
from .config_loader import (
    load_category_rules,
    load_config,
    load_force_overrides,
    load_header_markers,
    load_row_overrides,
    load_sheet_layout,
    load_source_settings,
)
from .csv_utils import configure_csv, parse_rows, write_csv
from .errors import CatalogueError, MalformedRowFailure, NetworkFailure, ParseFailure
from .log_config import setup_logging
from .text_utils import cell, clean_price, collapse_whitespace, join_lines
