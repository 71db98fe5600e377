#!/usr/bin/env python3
"""
Refresh the bundled snapshot from the live sheet.

The snapshot is what the storefront shows while (or instead of) the live
fetch, so refresh it whenever the sheet changes significantly.

Usage:
    python3 scripts/refresh_snapshot.py
    python3 scripts/refresh_snapshot.py --output /tmp/snapshot.csv
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sheet_catalogue.common.config_loader import load_source_settings
from sheet_catalogue.common.errors import CatalogueError
from sheet_catalogue.common.log_config import setup_logging
from sheet_catalogue.fetching import refresh_snapshot

logger = logging.getLogger(__name__)

load_dotenv(Path(__file__).parent.parent / ".env")


def main():
    settings = load_source_settings()

    parser = argparse.ArgumentParser(description="Download the live sheet into the bundled snapshot")
    parser.add_argument(
        "--url",
        default=settings["live_csv_url"],
        help="Published CSV export URL (default: from config/sources.yaml)"
    )
    parser.add_argument(
        "--output", "-o",
        default=str(settings["snapshot_path"]),
        help=f"Snapshot file (default: {settings['snapshot_path']})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug output"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        rows = refresh_snapshot(
            args.url,
            args.output,
            timeout=settings.get("request_timeout", 30),
            min_body_length=settings.get("min_body_length", 100),
        )
    except CatalogueError as e:
        logger.error("Snapshot not updated: %s", e)
        sys.exit(1)

    print(f"Snapshot written: {args.output} ({rows} rows)")


if __name__ == "__main__":
    main()
