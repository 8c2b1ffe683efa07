"""
Read-only queries over a catalog snapshot.

Every function takes the snapshot's entries plus explicit parameters and
never mutates the input. Text matching is case-insensitive and literal.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .errors import NotFoundError
from .models import ALL_CATEGORIES, CatalogEntry, FeatureSearchResult, ListResult, RandomResult


def filter_by_category(entries: Sequence[CatalogEntry], category: str = ALL_CATEGORIES) -> List[CatalogEntry]:
    if category == ALL_CATEGORIES:
        return list(entries)
    return [e for e in entries if e.category.value == category]


def _contains(haystack: Optional[str], needle_lower: str) -> bool:
    return haystack is not None and needle_lower in haystack.lower()


def list_servers(
    entries: Sequence[CatalogEntry],
    category: str = ALL_CATEGORIES,
    search: Optional[str] = None,
    limit: int = 20,
) -> ListResult:
    filtered = filter_by_category(entries, category)

    if search:
        search_lower = search.lower()
        filtered = [
            e
            for e in filtered
            if _contains(e.name, search_lower)
            or _contains(e.description, search_lower)
            or _contains(e.author, search_lower)
        ]

    results = filtered[:limit]
    return ListResult(total=len(filtered), showing=len(results), servers=results)


def get_server_details(entries: Sequence[CatalogEntry], name: str) -> CatalogEntry:
    name_lower = name.lower()
    for entry in entries:
        if entry.name.lower() == name_lower:
            return entry
    raise NotFoundError(f'Server "{name}" not found')


def search_servers_by_feature(
    entries: Sequence[CatalogEntry],
    feature: str,
    limit: int = 10,
) -> FeatureSearchResult:
    feature_lower = feature.lower()
    matches = [e for e in entries if _contains(e.description, feature_lower) or _contains(e.name, feature_lower)]
    results = matches[:limit]
    return FeatureSearchResult(feature=feature, found=len(results), servers=results)


def shuffle_entries(pool: Sequence[CatalogEntry], rng: random.Random) -> List[CatalogEntry]:
    """
    Fisher-Yates shuffle of a copy of `pool`, walking from the last index
    down to 1 and swapping with a uniform index in [0, i].
    """
    shuffled = list(pool)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def get_random_servers(
    entries: Sequence[CatalogEntry],
    count: int = 5,
    category: str = ALL_CATEGORIES,
    rng: Optional[random.Random] = None,
) -> RandomResult:
    pool = filter_by_category(entries, category)
    shuffled = shuffle_entries(pool, rng or random.Random())
    results = shuffled[: min(count, len(shuffled))]
    return RandomResult(count=len(results), servers=results)
