"""
Example: fetch the MCP servers README, parse it and run a list query.

Usage:
    python3 catalog_demo.py --category community --search database --limit 5
    python3 catalog_demo.py --readme ./README.md --search git
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from mcp_catalog.directory import (
    CatalogCache,
    CatalogConfig,
    CatalogError,
    CatalogService,
    HttpContentFetcher,
    LocalFileFetcher,
)


def main():
    config = CatalogConfig.from_env()

    parser = argparse.ArgumentParser()
    parser.add_argument("--readme", default=None, type=Path, help="Read the README from a local file instead of the URL")
    parser.add_argument("--url", default=config.source_url, help="README URL")
    parser.add_argument(
        "--category",
        default="all",
        choices=["reference", "official", "community", "all"],
        help="Category filter",
    )
    parser.add_argument("--search", default=None, help="Search text for name, description or author")
    parser.add_argument("--limit", default=20, type=int, help="Maximum number of servers to print")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.readme is not None:
        if not args.readme.exists():
            raise FileNotFoundError(f"README not found: {args.readme}")
        cache = CatalogCache(LocalFileFetcher(), str(args.readme), ttl=config.cache_ttl)
    else:
        cache = CatalogCache(HttpContentFetcher(timeout=config.fetch_timeout), args.url, ttl=config.cache_ttl)

    service = CatalogService(cache)
    try:
        result = service.call_tool(
            "list_servers",
            {"category": args.category, "search": args.search, "limit": args.limit},
        )
    except CatalogError as exc:
        print(f"Could not load server list: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
