"""
Exceptions raised by the directory subsystem.

None of these are retried internally; callers (the HTTP layer, the demo
script) decide how to present them.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures."""


class FetchError(CatalogError):
    """The source document could not be retrieved."""


class ParseError(FetchError):
    """Parsing the fetched document raised unexpectedly."""


class NotFoundError(CatalogError):
    """No catalog entry matched the requested name."""


class UnknownOperationError(CatalogError):
    """A tool or prompt name outside the defined set was requested."""


class InvalidArgumentsError(CatalogError):
    """Tool or prompt arguments failed validation."""
