#!/usr/bin/env python3
"""
Print the section headers detected in a sheet export.

Handy after the sheet owners reword a banner: unknown headers show up
as "Other" sections and reset markers as "(reset)".

Usage:
    python3 scripts/inspect_sections.py
    python3 scripts/inspect_sections.py path/to/export.csv
"""

import argparse
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sheet_catalogue.common.config_loader import load_source_settings
from sheet_catalogue.common.csv_utils import parse_rows
from sheet_catalogue.common.errors import ParseFailure
from sheet_catalogue.common.log_config import setup_logging
from sheet_catalogue.extraction import RowNormalizer


def main():
    parser = argparse.ArgumentParser(description="Show section headers detected in a sheet export")
    parser.add_argument(
        "csv_file",
        nargs="?",
        help="CSV export to inspect (default: bundled snapshot)"
    )
    args = parser.parse_args()
    setup_logging(quiet=True)

    path = args.csv_file or str(load_source_settings()["snapshot_path"])
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    try:
        rows = parse_rows(text)
    except ParseFailure as e:
        print(f"Cannot parse {path}: {e}")
        sys.exit(1)

    normalizer = RowNormalizer()
    print(f"{path}: {len(rows)} rows\n")
    for transition in normalizer.scan_sections(rows):
        if transition.is_reset:
            target = "(reset)"
        else:
            target = f"{transition.state.category} / {transition.state.subcategory}"
        print(f"  Row {transition.row_index:>4}: {transition.header[:40]:<40} -> {target}")

    products = normalizer.normalize(rows, source=path)
    stats = normalizer.get_stats()
    print(f"\n  Products: {len(products)}  Sections: {stats['sections']}  Dropped rows: {stats['dropped']}")


if __name__ == "__main__":
    main()
