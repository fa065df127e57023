"""
Tools registry.

Importing this package declares the built-in tools and freezes them into
the process-wide TOOL_REGISTRY.
"""
from mcp.server.fastmcp import FastMCP

from . import calculator  # noqa: F401  (declares the built-in tools)
from .base import ToolRegistry, build_registry

TOOL_REGISTRY: ToolRegistry = build_registry()


def register_all_tools(mcp: FastMCP, registry: ToolRegistry = TOOL_REGISTRY) -> None:
    """Register all tools with a FastMCP server.

    Args:
        mcp: The FastMCP server instance
        registry: Tools to publish (defaults to the built-in registry)
    """
    for definition in registry:
        mcp.add_tool(
            definition.function,
            name=definition.name,
            description=definition.description,
        )
