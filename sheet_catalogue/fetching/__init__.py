"""
Sheet fetching.

Modules:
    sources - LiveSheetSource (aiohttp), SnapshotSource, refresh_snapshot (requests)
    orchestrator - FetchOrchestrator, live vs. snapshot race with fallback
"""

from .orchestrator import (
    Delivery,
    FetchEvent,
    FetchOrchestrator,
    FetchState,
    load_catalogue,
)
from .sources import LiveSheetSource, SnapshotSource, refresh_snapshot, with_cache_buster

__all__ = [
    'Delivery',
    'FetchEvent',
    'FetchOrchestrator',
    'FetchState',
    'load_catalogue',
    'LiveSheetSource',
    'SnapshotSource',
    'refresh_snapshot',
    'with_cache_buster',
]
