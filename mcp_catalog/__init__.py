"""
MCP server catalog core package.

This package currently focuses on the directory subsystem. It exposes
dataclasses for catalog entries and snapshots, a parser for the upstream
servers README, a time-bounded cache over a pluggable content fetcher,
and the query/tool service that the HTTP layer sits on.
"""
