"""
Tool argument models and descriptors.

The pydantic models double as validators for `CatalogService.call_tool`
and as the source of the JSON input schemas advertised by `list_tools`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Type

from pydantic import BaseModel, Field

CategoryFilter = Literal["reference", "official", "community", "all"]


class ListServersArgs(BaseModel):
    category: CategoryFilter = Field("all", description="Filter servers by category (default: all)")
    search: Optional[str] = Field(None, description="Search servers by name or description")
    limit: int = Field(20, ge=1, le=100, description="Limit the number of results (default: 20)")


class GetServerDetailsArgs(BaseModel):
    name: str = Field(..., description="The name of the MCP server to get details for")


class SearchByFeatureArgs(BaseModel):
    feature: str = Field(
        ...,
        description='The feature or capability to search for (e.g., "database", "api", "file", "blockchain")',
    )
    limit: int = Field(10, ge=1, le=50, description="Limit the number of results (default: 10)")


class GetRandomServersArgs(BaseModel):
    count: int = Field(5, ge=1, le=20, description="Number of random servers to return (default: 5)")
    category: CategoryFilter = Field("all", description="Filter random servers by category (default: all)")


class RefreshArgs(BaseModel):
    pass


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    arguments: Type[BaseModel]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.arguments.model_json_schema(),
        }


TOOL_SPECS: Dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec("list_servers", "List all available MCP servers with optional filtering", ListServersArgs),
        ToolSpec("get_server_details", "Get detailed information about a specific MCP server", GetServerDetailsArgs),
        ToolSpec(
            "search_servers_by_feature",
            "Search for MCP servers that provide specific features or capabilities",
            SearchByFeatureArgs,
        ),
        ToolSpec("get_random_servers", "Get a random selection of MCP servers for discovery", GetRandomServersArgs),
        ToolSpec("refresh_server_list", "Force refresh the cached list of MCP servers from GitHub", RefreshArgs),
    )
}
