"""Protocol-facing adapters: the search tool and read-only doc resources.

The transport that carries requests is provided by the host application;
these adapters only map requests onto the registry and search engine.
"""

from .resources import INDEX_URI, ResourceCatalog
from .tools import SEARCH_TOOL_NAME, SearchArgs, ToolDefinition, create_tools

__all__ = [
    "INDEX_URI",
    "ResourceCatalog",
    "SEARCH_TOOL_NAME",
    "SearchArgs",
    "ToolDefinition",
    "create_tools",
]
