"""JSON-RPC 2.0 / MCP protocol handling."""
from .processor import process

__all__ = ["process"]
