from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


ALL_CATEGORIES = "all"


class Category(str, Enum):
    REFERENCE = "reference"
    OFFICIAL = "official"
    COMMUNITY = "community"


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    description: str
    category: Category
    link: Optional[str] = None
    github: Optional[str] = None
    author: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # Absent optional fields are left out rather than serialized as null.
        data: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
        }
        for key in ("link", "github", "author"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class CatalogSnapshot:
    entries: Tuple[CatalogEntry, ...] = ()
    fetched_at: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass
class ListResult:
    total: int
    showing: int
    servers: List[CatalogEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "showing": self.showing,
            "servers": [s.to_dict() for s in self.servers],
        }


@dataclass
class FeatureSearchResult:
    feature: str
    found: int
    servers: List[CatalogEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "feature": self.feature,
            "found": self.found,
            "servers": [s.to_dict() for s in self.servers],
        }


@dataclass
class RandomResult:
    count: int
    servers: List[CatalogEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "servers": [s.to_dict() for s in self.servers],
        }


@dataclass
class RefreshResult:
    success: bool
    message: str
    total_servers: int
    last_fetch: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "total_servers": self.total_servers,
            "last_fetch": self.last_fetch.isoformat() if self.last_fetch else None,
        }
