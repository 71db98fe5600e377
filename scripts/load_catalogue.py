#!/usr/bin/env python3
"""
Catalogue Loader

Fetches the catalogue (live sheet, falling back to the bundled snapshot)
and prints a summary of what the storefront would show.

Usage:
    python3 scripts/load_catalogue.py
    python3 scripts/load_catalogue.py --category Shoes --search dunk
    python3 scripts/load_catalogue.py --output products.json
    python3 scripts/load_catalogue.py --offline --output products.csv
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sheet_catalogue.catalogue import ALL, ProductCatalogue
from sheet_catalogue.common.config_loader import load_source_settings
from sheet_catalogue.common.csv_utils import write_csv
from sheet_catalogue.common.log_config import setup_logging
from sheet_catalogue.extraction import RowNormalizer
from sheet_catalogue.fetching import SnapshotSource, load_catalogue

logger = logging.getLogger(__name__)

load_dotenv(Path(__file__).parent.parent / ".env")


async def load_offline(catalogue: ProductCatalogue, settings: dict) -> None:
    """Load only the bundled snapshot (no network)."""
    text = await SnapshotSource.from_settings(settings).fetch()
    catalogue.replace(RowNormalizer().normalize_text(text, source="Local Snapshot"))


def write_output(products: list, output: str) -> int:
    """Write products as JSON or CSV depending on the file extension."""
    rows = [p.to_dict() for p in products]
    if output.lower().endswith(".csv"):
        return write_csv(output, rows)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2, ensure_ascii=False)
    return len(rows)


def print_summary(catalogue: ProductCatalogue, selected: str, search: str, limit: int) -> None:
    counts = catalogue.category_counts()

    print("\n" + "=" * 60)
    print("Catalogue Summary")
    print("=" * 60)
    print(f"\n  Products:      {len(catalogue)}")
    print(f"  Deliveries:    {catalogue.version}")
    print("\n  Categories:")
    for label in catalogue.category_labels():
        print(f"     {label:<24} {counts.get(label, 0)}")

    matches = catalogue.filter(selected, search)
    print(f"\n  Showing {min(limit, len(matches))} of {len(matches)} "
          f"(category={selected!r}, search={search!r}):")
    for product in catalogue.page(matches, limit):
        price = f"${product.price_usd}" if product.price_usd else "-"
        print(f"     {product.name[:44]:<44} {price:>9}  [{product.category}]")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description="Load the product catalogue from the live sheet or its snapshot"
    )
    parser.add_argument(
        "--category", "-c",
        default=ALL,
        help="Category pill to show (default: All)"
    )
    parser.add_argument(
        "--search", "-s",
        default="",
        help="Search term"
    )
    parser.add_argument(
        "--limit", "-l",
        type=int,
        default=16,
        help="Number of products to list (default: 16)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the final product list to a .json or .csv file"
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the live sheet and read the bundled snapshot only"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug output (every dropped row)"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    settings = load_source_settings()
    catalogue = ProductCatalogue()

    if args.offline:
        asyncio.run(load_offline(catalogue, settings))
    else:
        asyncio.run(load_catalogue(on_data=catalogue.replace, settings=settings))

    print_summary(catalogue, args.category, args.search, args.limit)

    if args.output:
        written = write_output(catalogue.products, args.output)
        logger.info("Wrote %d products to %s", written, args.output)


if __name__ == "__main__":
    main()
