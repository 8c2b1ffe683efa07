from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

import requests

from .errors import FetchError

logger = logging.getLogger(__name__)


class ContentFetcher(Protocol):
    def fetch(self, source: str) -> str:
        ...


class HttpContentFetcher:
    """
    Fetches the raw document over HTTP(S). Any transport failure or
    non-success status is reported as FetchError; retries are left to the
    caller.
    """

    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, source: str) -> str:
        logger.debug("Fetching %s", source)
        try:
            response = self.session.get(source, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch server list: {exc}") from exc
        if not response.ok:
            raise FetchError(f"Failed to fetch server list: HTTP error! status: {response.status_code}")
        return response.text


class LocalFileFetcher:
    """
    Reads the document from disk. `source` is a filesystem path.
    """

    def fetch(self, source: str) -> str:
        path = Path(source)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(f"Failed to read server list from {path}: {exc}") from exc


class StaticContentFetcher:
    """
    Returns fixed text regardless of source. Useful offline and in tests.
    """

    def __init__(self, content: str):
        self.content = content
        self.calls = 0

    def fetch(self, source: str) -> str:
        self.calls += 1
        return self.content
