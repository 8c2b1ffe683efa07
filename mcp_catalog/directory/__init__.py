"""
Directory subsystem exports.
"""

from .cache import CatalogCache, DEFAULT_TTL
from .config import CatalogConfig
from .errors import (
    CatalogError,
    FetchError,
    InvalidArgumentsError,
    NotFoundError,
    ParseError,
    UnknownOperationError,
)
from .fetcher import ContentFetcher, HttpContentFetcher, LocalFileFetcher, StaticContentFetcher
from .models import (
    ALL_CATEGORIES,
    CatalogEntry,
    CatalogSnapshot,
    Category,
    FeatureSearchResult,
    ListResult,
    RandomResult,
    RefreshResult,
)
from .parser import clean_description, parse_readme
from .service import CatalogService

__all__ = [
    "ALL_CATEGORIES",
    "CatalogCache",
    "CatalogConfig",
    "CatalogEntry",
    "CatalogError",
    "CatalogService",
    "CatalogSnapshot",
    "Category",
    "ContentFetcher",
    "DEFAULT_TTL",
    "FeatureSearchResult",
    "FetchError",
    "HttpContentFetcher",
    "InvalidArgumentsError",
    "ListResult",
    "LocalFileFetcher",
    "NotFoundError",
    "ParseError",
    "RandomResult",
    "RefreshResult",
    "StaticContentFetcher",
    "UnknownOperationError",
    "clean_description",
    "parse_readme",
]
