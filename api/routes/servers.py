from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from mcp_catalog.directory import CatalogError, CatalogService
from mcp_catalog.directory.tools import CategoryFilter

from api.dependencies import get_service, to_http_exception

router = APIRouter(prefix="/servers", tags=["servers"])


@router.get("")
def list_servers(
    category: CategoryFilter = "all",
    search: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    service: CatalogService = Depends(get_service),
):
    try:
        return service.list_servers(category=category, search=search, limit=limit)
    except CatalogError as exc:
        raise to_http_exception(exc)


@router.get("/search")
def search_servers_by_feature(
    feature: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=50),
    service: CatalogService = Depends(get_service),
):
    try:
        return service.search_servers_by_feature(feature, limit=limit)
    except CatalogError as exc:
        raise to_http_exception(exc)


@router.get("/random")
def get_random_servers(
    count: int = Query(5, ge=1, le=20),
    category: CategoryFilter = "all",
    service: CatalogService = Depends(get_service),
):
    try:
        return service.get_random_servers(count=count, category=category)
    except CatalogError as exc:
        raise to_http_exception(exc)


@router.post("/refresh")
def refresh_server_list(service: CatalogService = Depends(get_service)):
    try:
        return service.refresh_server_list()
    except CatalogError as exc:
        raise to_http_exception(exc)


@router.get("/by-name/{name:path}")
def get_server_details(name: str, service: CatalogService = Depends(get_service)):
    """
    Lookup lives under its own prefix so names such as "search", "random"
    or ones containing "/" never collide with the fixed routes.
    """
    try:
        return service.get_server_details(name)
    except CatalogError as exc:
        raise to_http_exception(exc)
