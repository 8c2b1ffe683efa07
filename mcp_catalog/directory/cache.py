from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, List

from .errors import FetchError, ParseError
from .fetcher import ContentFetcher
from .models import CatalogEntry, CatalogSnapshot
from .parser import parse_readme

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CatalogCache:
    """
    Holds the last parsed snapshot of the catalog and refetches it when it
    is empty or older than the TTL.

    A snapshot is replaced by a single attribute assignment, so readers see
    either the old or the new one. Refreshes are single-flight: callers
    blocked behind an in-flight refresh reuse its result instead of
    fetching again. A failed refresh leaves the previous snapshot in place.
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        source: str,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = utc_now,
        parser: Callable[[str], List[CatalogEntry]] = parse_readme,
    ):
        self.fetcher = fetcher
        self.source = source
        self.ttl = ttl
        self.clock = clock
        self.parser = parser
        self._snapshot = CatalogSnapshot()
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    def is_stale(self) -> bool:
        snapshot = self._snapshot
        if snapshot.is_empty or snapshot.fetched_at is None:
            return True
        return self.clock() - snapshot.fetched_at > self.ttl

    def ensure_fresh(self) -> CatalogSnapshot:
        if not self.is_stale():
            return self._snapshot
        with self._lock:
            # Another caller may have refreshed while we waited.
            if not self.is_stale():
                return self._snapshot
            return self._reload()

    def force_refresh(self) -> CatalogSnapshot:
        generation = self._generation
        with self._lock:
            if self._generation != generation:
                return self._snapshot
            return self._reload()

    def _reload(self) -> CatalogSnapshot:
        try:
            content = self.fetcher.fetch(self.source)
        except FetchError:
            logger.warning("Fetching %s failed; keeping %d cached entries", self.source, len(self._snapshot.entries))
            raise

        try:
            entries = self.parser(content)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Parsing %s failed; keeping %d cached entries", self.source, len(self._snapshot.entries))
            raise ParseError(f"Failed to parse server list: {exc}") from exc

        snapshot = CatalogSnapshot(entries=tuple(entries), fetched_at=self.clock())
        self._snapshot = snapshot
        self._generation += 1
        logger.info("Fetched %d servers from %s", len(snapshot.entries), self.source)
        return snapshot
