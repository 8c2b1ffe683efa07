from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from mcp_catalog.directory import CatalogError, CatalogService

from api.dependencies import get_service, to_http_exception

router = APIRouter(tags=["tools"])


@router.get("/tools")
def list_tools(service: CatalogService = Depends(get_service)):
    return {"tools": service.list_tools()}


@router.post("/tools/{name}")
def call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]] = Body(None),
    service: CatalogService = Depends(get_service),
):
    try:
        return service.call_tool(name, arguments)
    except CatalogError as exc:
        raise to_http_exception(exc)


@router.get("/prompts")
def list_prompts(service: CatalogService = Depends(get_service)):
    return {"prompts": service.list_prompts()}


@router.post("/prompts/{name}")
def get_prompt(
    name: str,
    arguments: Optional[Dict[str, Any]] = Body(None),
    service: CatalogService = Depends(get_service),
):
    try:
        return service.get_prompt(name, arguments)
    except CatalogError as exc:
        raise to_http_exception(exc)
