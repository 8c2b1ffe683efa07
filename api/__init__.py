"""
HTTP layer for the MCP server catalog.
"""
