"""
Data Sources

Where the sheet export comes from:
- LiveSheetSource: the published sheet, fetched through a CORS relay (aiohttp)
- SnapshotSource: the bundled copy under data/ (read off the event loop)
- refresh_snapshot: blocking download (requests) that rewrites the bundled copy
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp
import requests

from ..common.csv_utils import parse_rows
from ..common.errors import NetworkFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_MIN_BODY_LENGTH = 100


def with_cache_buster(url: str, now_ms: Optional[int] = None) -> str:
    """
    Append a timestamp parameter so relays and CDNs skip their caches.

    Args:
        url: Export URL
        now_ms: Timestamp in milliseconds (default: current time)

    Returns:
        URL with a trailing t=<ms> parameter
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    separator = '&' if '?' in url else '?'
    return f"{url}{separator}t={now_ms}"


class LiveSheetSource:
    """
    Fetches the live sheet export.

    Usage:
        source = LiveSheetSource(csv_url, cors_proxy="https://relay/?quest=")
        text = await source.fetch()
    """

    def __init__(
        self,
        csv_url: str,
        cors_proxy: str = "",
        request_timeout: float = DEFAULT_TIMEOUT,
        min_body_length: int = DEFAULT_MIN_BODY_LENGTH,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the live source.

        Args:
            csv_url: Published CSV export URL
            cors_proxy: Relay prefix; the encoded export URL is appended to it
            request_timeout: Total request timeout in seconds
            min_body_length: Bodies of this length or shorter count as a failed fetch
            session: Shared aiohttp session (one is created per fetch if None)
        """
        self.csv_url = csv_url
        self.cors_proxy = cors_proxy
        self.request_timeout = request_timeout
        self.min_body_length = min_body_length
        self._session = session

    @classmethod
    def from_settings(
        cls, settings: Dict[str, Any], session: Optional[aiohttp.ClientSession] = None
    ) -> "LiveSheetSource":
        """Build from config/sources.yaml settings."""
        return cls(
            csv_url=settings['live_csv_url'],
            cors_proxy=settings.get('cors_proxy', ''),
            request_timeout=settings.get('request_timeout', DEFAULT_TIMEOUT),
            min_body_length=settings.get('min_body_length', DEFAULT_MIN_BODY_LENGTH),
            session=session,
        )

    def build_url(self, now_ms: Optional[int] = None) -> str:
        """Build the request URL (relay prefix + encoded, cache-busted export URL)."""
        target = with_cache_buster(self.csv_url, now_ms)
        if not self.cors_proxy:
            return target
        return f"{self.cors_proxy}{quote(target, safe='')}"

    async def fetch(self) -> str:
        """
        Fetch the export text.

        Returns:
            CSV text

        Raises:
            NetworkFailure: On client errors, timeouts, undecodable bodies,
                non-2xx status, or a body no longer than min_body_length
        """
        url = self.build_url()
        session = self._session
        owns_session = session is None
        if owns_session:
            session = aiohttp.ClientSession()

        try:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=self.request_timeout),
            ) as resp:
                status = resp.status
                text = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as exc:
            raise NetworkFailure(f"Live fetch failed: {type(exc).__name__}: {exc}") from exc
        finally:
            if owns_session:
                await session.close()

        if not 200 <= status < 300:
            raise NetworkFailure(f"Live fetch failed: HTTP {status}")
        if len(text) <= self.min_body_length:
            raise NetworkFailure(
                f"Live fetch failed: body too small ({len(text)} <= {self.min_body_length} chars)"
            )

        logger.info("LIVE data fetched (%d chars)", len(text))
        return text


class SnapshotSource:
    """Reads the bundled snapshot of the sheet export."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "SnapshotSource":
        """Build from config/sources.yaml settings."""
        return cls(settings['snapshot_path'])

    async def fetch(self) -> str:
        """
        Read the snapshot text without blocking the event loop.

        Raises:
            NetworkFailure: If the snapshot is missing or unreadable
        """
        try:
            return await asyncio.to_thread(self.path.read_text, encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise NetworkFailure(f"Local snapshot unavailable: {self.path} ({exc})") from exc


def refresh_snapshot(
    csv_url: str,
    destination: str | Path,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    min_body_length: int = DEFAULT_MIN_BODY_LENGTH,
) -> int:
    """
    Download the live export and replace the bundled snapshot.

    The export is fetched directly (no relay) and must tokenize before the
    existing snapshot is touched.

    Args:
        csv_url: Published CSV export URL
        destination: Snapshot file to overwrite
        session: Optional requests session
        timeout: Request timeout in seconds
        min_body_length: Bodies of this length or shorter are refused

    Returns:
        Number of rows in the new snapshot

    Raises:
        NetworkFailure: If the download fails or the body is too small
        ParseFailure: If the body is not usable CSV
    """
    requester = session or requests
    url = with_cache_buster(csv_url)

    try:
        response = requester.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        raise NetworkFailure(f"Snapshot download failed: {exc}") from exc

    text = response.text
    if len(text) <= min_body_length:
        raise NetworkFailure(
            f"Snapshot download refused: body too small ({len(text)} <= {min_body_length} chars)"
        )

    row_count = len(parse_rows(text))

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = destination.with_suffix(destination.suffix + '.tmp')
    tmp_path.write_text(text, encoding='utf-8')
    tmp_path.replace(destination)

    logger.info("Snapshot refreshed: %s (%d rows)", destination, row_count)
    return row_count
