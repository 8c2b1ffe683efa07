from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from . import queries
from .cache import CatalogCache
from .errors import InvalidArgumentsError, UnknownOperationError
from .models import ALL_CATEGORIES, RefreshResult
from .prompts import get_prompt, list_prompts
from .tools import TOOL_SPECS

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Entry point for the five catalog operations. Each query operation makes
    sure the cache is fresh and then runs against the current snapshot.
    Results are returned as JSON-serializable dicts.
    """

    def __init__(self, cache: CatalogCache, rng: Optional[random.Random] = None):
        self.cache = cache
        self.rng = rng or random.Random()
        self._handlers: Dict[str, Callable[..., Dict[str, Any]]] = {
            "list_servers": self.list_servers,
            "get_server_details": self.get_server_details,
            "search_servers_by_feature": self.search_servers_by_feature,
            "get_random_servers": self.get_random_servers,
            "refresh_server_list": self.refresh_server_list,
        }

    def _entries(self):
        return self.cache.ensure_fresh().entries

    def list_servers(self, category: str = ALL_CATEGORIES, search: Optional[str] = None, limit: int = 20) -> Dict[str, Any]:
        return queries.list_servers(self._entries(), category=category, search=search, limit=limit).to_dict()

    def get_server_details(self, name: str) -> Dict[str, Any]:
        return queries.get_server_details(self._entries(), name).to_dict()

    def search_servers_by_feature(self, feature: str, limit: int = 10) -> Dict[str, Any]:
        return queries.search_servers_by_feature(self._entries(), feature, limit=limit).to_dict()

    def get_random_servers(self, count: int = 5, category: str = ALL_CATEGORIES) -> Dict[str, Any]:
        return queries.get_random_servers(self._entries(), count=count, category=category, rng=self.rng).to_dict()

    def refresh_server_list(self) -> Dict[str, Any]:
        snapshot = self.cache.force_refresh()
        return RefreshResult(
            success=True,
            message="Server list refreshed successfully",
            total_servers=len(snapshot.entries),
            last_fetch=snapshot.fetched_at,
        ).to_dict()

    def list_tools(self) -> List[Dict[str, Any]]:
        return [spec.describe() for spec in TOOL_SPECS.values()]

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        spec = TOOL_SPECS.get(name)
        if spec is None:
            raise UnknownOperationError(f"Unknown tool: {name}")
        try:
            parsed = spec.arguments.model_validate(arguments or {})
        except ValidationError as exc:
            raise InvalidArgumentsError(f"Invalid arguments for {name}: {exc}") from exc
        logger.debug("Calling tool %s with %s", name, parsed.model_dump())
        return self._handlers[name](**parsed.model_dump())

    def list_prompts(self) -> List[Dict[str, Any]]:
        return list_prompts()

    def get_prompt(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return get_prompt(name, arguments)
