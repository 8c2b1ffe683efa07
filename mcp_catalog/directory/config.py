from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta

DEFAULT_SOURCE_URL = "https://raw.githubusercontent.com/modelcontextprotocol/servers/main/README.md"


@dataclass
class CatalogConfig:
    source_url: str = DEFAULT_SOURCE_URL
    cache_ttl_seconds: int = 3600
    fetch_timeout: float = 30.0
    log_level: str = "INFO"

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(seconds=self.cache_ttl_seconds)

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(
            source_url=os.getenv("CATALOG_SOURCE_URL", DEFAULT_SOURCE_URL),
            cache_ttl_seconds=int(os.getenv("CATALOG_CACHE_TTL_SECONDS", "3600")),
            fetch_timeout=float(os.getenv("CATALOG_FETCH_TIMEOUT", "30")),
            log_level=os.getenv("CATALOG_LOG_LEVEL", "INFO").upper(),
        )
