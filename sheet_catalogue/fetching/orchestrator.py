"""
Fetch Orchestrator

Races the live sheet against a fallback timer:
1. Start the live fetch and a fallback timer.
2. If the timer fires first, deliver the snapshot but keep the live fetch going.
3. If live succeeds (early or late), deliver it; it replaces any snapshot data.
4. If live fails before the timer fires, load the snapshot immediately.
5. If the snapshot fails too, deliver the emergency product set.

The consumer callback may run twice (snapshot, then live). Every call
carries the full product list and replaces the previous one.

Both competing paths (timer task, live task) report to a single
arbitration method that checks the current state before acting; all state
lives on one event loop so no locking is needed.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import aiohttp

from ..common.config_loader import load_source_settings
from ..common.csv_utils import parse_rows
from ..common.errors import NetworkFailure, ParseFailure
from ..extraction import RowNormalizer, emergency_products
from ..models import ProductRecord
from .sources import LiveSheetSource, SnapshotSource

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_TIMEOUT = 1.0  # seconds

ProductCallback = Callable[[List[ProductRecord]], Any]


class FetchState(Enum):
    PENDING = "pending"
    FALLBACK_DELIVERED = "fallback_delivered"
    FALLBACK_FAILED = "fallback_failed"
    LIVE_LOADED = "live_loaded"


class FetchEvent(Enum):
    TIMEOUT = "timeout"
    LIVE_LOADED = "live_loaded"
    LIVE_FAILED = "live_failed"
    SNAPSHOT_LOADED = "snapshot_loaded"
    SNAPSHOT_FAILED = "snapshot_failed"


@dataclass
class Delivery:
    """One invocation of the consumer callback."""
    source: str  # "live", "snapshot" or "emergency"
    products: List[ProductRecord] = field(default_factory=list)


class FetchOrchestrator:
    """
    Delivers the catalogue from the best source available.

    Usage:
        orchestrator = FetchOrchestrator(live, snapshot, on_data=catalogue.replace)
        products = await orchestrator.run()
    """

    def __init__(
        self,
        live_source: LiveSheetSource,
        snapshot_source: SnapshotSource,
        on_data: Optional[ProductCallback] = None,
        normalizer: Optional[RowNormalizer] = None,
        fallback_timeout: float = DEFAULT_FALLBACK_TIMEOUT,
    ):
        """
        Initialize the orchestrator.

        Args:
            live_source: Anything with an async fetch() -> str
            snapshot_source: Anything with an async fetch() -> str
            on_data: Consumer callback, receives the full product list
            normalizer: Row normalizer (built from config if None)
            fallback_timeout: Seconds to wait for live before showing the snapshot
        """
        self.live_source = live_source
        self.snapshot_source = snapshot_source
        self.on_data = on_data
        self.normalizer = normalizer if normalizer is not None else RowNormalizer()
        self.fallback_timeout = fallback_timeout

        self.state = FetchState.PENDING
        self.deliveries: List[Delivery] = []
        self._fallback_triggered = False
        self._timer: Optional[asyncio.Task] = None
        self._started = False

    @classmethod
    def from_settings(
        cls,
        on_data: Optional[ProductCallback] = None,
        settings: Optional[Dict[str, Any]] = None,
        session: Optional[aiohttp.ClientSession] = None,
        normalizer: Optional[RowNormalizer] = None,
    ) -> "FetchOrchestrator":
        """Build sources and timeout from config/sources.yaml."""
        if settings is None:
            settings = load_source_settings()
        return cls(
            live_source=LiveSheetSource.from_settings(settings, session=session),
            snapshot_source=SnapshotSource.from_settings(settings),
            on_data=on_data,
            normalizer=normalizer,
            fallback_timeout=settings.get('fallback_timeout', DEFAULT_FALLBACK_TIMEOUT),
        )

    @property
    def products(self) -> List[ProductRecord]:
        """The most recently delivered product list."""
        if not self.deliveries:
            return []
        return list(self.deliveries[-1].products)

    async def run(self) -> List[ProductRecord]:
        """
        Run the race until the live attempt and any fallback have settled.

        Returns:
            The last product list delivered to the consumer
        """
        if self._started:
            raise RuntimeError("FetchOrchestrator.run() can only be called once")
        self._started = True

        self._timer = asyncio.create_task(self._fallback_timer())
        try:
            await self._attempt_live()
            # A fired timer may still be loading the snapshot
            await asyncio.wait([self._timer])
            if not self._timer.cancelled() and self._timer.exception() is not None:
                raise self._timer.exception()
        finally:
            if not self._timer.done():
                self._timer.cancel()

        return self.products

    # ------------------------------------------------------------------
    # Competing paths
    # ------------------------------------------------------------------

    async def _fallback_timer(self) -> None:
        await asyncio.sleep(self.fallback_timeout)
        if self._arbitrate(FetchEvent.TIMEOUT):
            await self._load_snapshot("Backup")

    async def _attempt_live(self) -> None:
        logger.info("Attempting LIVE fetch...")
        try:
            text = await self.live_source.fetch()
            rows = parse_rows(text)
        except (NetworkFailure, ParseFailure) as e:
            logger.warning("Live fetch failed: %s", e)
            if self._arbitrate(FetchEvent.LIVE_FAILED):
                await self._load_snapshot("Immediate Fallback")
            return

        products = self.normalizer.normalize(rows, source="Live Sheet")
        self._arbitrate(FetchEvent.LIVE_LOADED, products)

    async def _load_snapshot(self, reason: str) -> None:
        try:
            text = await self.snapshot_source.fetch()
        except NetworkFailure as e:
            logger.error("Backup load failed: %s", e)
            self._arbitrate(FetchEvent.SNAPSHOT_FAILED)
            return

        products = self.normalizer.normalize_text(text, source=f"Local Snapshot ({reason})")
        self._arbitrate(FetchEvent.SNAPSHOT_LOADED, products)

    # ------------------------------------------------------------------
    # Arbitration
    # ------------------------------------------------------------------

    def _arbitrate(self, event: FetchEvent, products: Optional[List[ProductRecord]] = None) -> bool:
        """
        Apply an event to the state machine.

        Returns:
            True if the event was accepted, False if a competing path
            already made it irrelevant
        """
        if event is FetchEvent.TIMEOUT:
            if self.state is not FetchState.PENDING:
                return False
            self._fallback_triggered = True
            logger.warning("Live fetch taking > %.1fs. Loading backup...", self.fallback_timeout)
            return True

        if event is FetchEvent.LIVE_FAILED:
            if self._fallback_triggered or self.state is not FetchState.PENDING:
                return False
            self._cancel_timer()
            self._fallback_triggered = True
            logger.warning("Live failed quickly. Loading backup immediately.")
            return True

        if event is FetchEvent.LIVE_LOADED:
            if self.state is FetchState.LIVE_LOADED:
                return False
            superseding = self.state is not FetchState.PENDING
            self._cancel_timer()
            self.state = FetchState.LIVE_LOADED
            self._deliver("live", products or [])
            if superseding:
                logger.info("Replaced backup data with live data")
            return True

        # Snapshot outcomes
        if self.state is FetchState.LIVE_LOADED:
            logger.info("Discarding snapshot result, live data already loaded")
            return False
        if event is FetchEvent.SNAPSHOT_LOADED:
            self.state = FetchState.FALLBACK_DELIVERED
            self._deliver("snapshot", products or [])
        else:
            self.state = FetchState.FALLBACK_FAILED
            self._deliver("emergency", emergency_products())
        return True

    def _cancel_timer(self) -> None:
        """Cancel the fallback timer unless it has already fired."""
        if self._timer is not None and not self._fallback_triggered and not self._timer.done():
            self._timer.cancel()

    def _deliver(self, source: str, products: List[ProductRecord]) -> None:
        self.deliveries.append(Delivery(source, list(products)))
        logger.info("Delivering %d products from %s", len(products), source)
        if self.on_data is not None:
            self.on_data(list(products))


async def load_catalogue(
    on_data: Optional[ProductCallback] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> List[ProductRecord]:
    """
    Run a configured orchestrator with a shared HTTP session.

    Args:
        on_data: Consumer callback (may be called twice)
        settings: Source settings (loaded from config if None)

    Returns:
        The final product list
    """
    async with aiohttp.ClientSession() as session:
        orchestrator = FetchOrchestrator.from_settings(on_data, settings=settings, session=session)
        return await orchestrator.run()
