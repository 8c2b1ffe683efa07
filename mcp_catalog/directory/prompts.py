from __future__ import annotations

from typing import Any, Dict, List, Optional

from .errors import InvalidArgumentsError, UnknownOperationError

SEARCH_PROMPT = "mcp-servers-search"
DEFAULT_MCP_CLIENT = "Claude Desktop"


def list_prompts() -> List[Dict[str, Any]]:
    return [
        {
            "name": SEARCH_PROMPT,
            "description": "MCP Server Search is a tool to find and explore MCP servers.",
            "arguments": [
                {
                    "name": "keywords",
                    "description": 'Keywords to search for MCP servers, e.g. "database", "api", "file", "blockchain"',
                    "required": True,
                },
                {
                    "name": "mcp_client",
                    "description": "MCP client library, e.g. Claude Desktop",
                    "required": False,
                },
            ],
        }
    ]


def get_prompt(name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    if name != SEARCH_PROMPT:
        raise UnknownOperationError(f"Unknown prompt: {name}")

    arguments = arguments or {}
    keywords = arguments.get("keywords")
    if not keywords:
        raise InvalidArgumentsError(f"Prompt {name} requires 'keywords'")
    mcp_client = arguments.get("mcp_client") or DEFAULT_MCP_CLIENT

    text = "\n".join(
        [
            f'Search for MCP servers with "{keywords}" keywords.',
            f'Once found a few options, offer to show how to install and configure a MCP server for "{mcp_client}" client.',
        ]
    )
    return {
        "description": "Search MCP servers by keywords",
        "messages": [{"role": "user", "content": {"type": "text", "text": text}}],
    }
