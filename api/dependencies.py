from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from mcp_catalog.directory import (
    CatalogCache,
    CatalogConfig,
    CatalogError,
    CatalogService,
    FetchError,
    HttpContentFetcher,
    InvalidArgumentsError,
    NotFoundError,
    UnknownOperationError,
)


@lru_cache(maxsize=1)
def get_config() -> CatalogConfig:
    return CatalogConfig.from_env()


@lru_cache(maxsize=1)
def get_service() -> CatalogService:
    config = get_config()
    fetcher = HttpContentFetcher(timeout=config.fetch_timeout)
    cache = CatalogCache(fetcher, config.source_url, ttl=config.cache_ttl)
    return CatalogService(cache)


def to_http_exception(exc: CatalogError) -> HTTPException:
    if isinstance(exc, (NotFoundError, UnknownOperationError)):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InvalidArgumentsError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, FetchError):
        return HTTPException(status_code=502, detail=str(exc))
    return HTTPException(status_code=500, detail=f"Error executing tool: {exc}")
