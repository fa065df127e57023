"""
Tool descriptors: the wire shape returned by tools/list, and the internal
definition that also carries the callable.
"""

from typing import Any, Callable
from pydantic import BaseModel, Field


class ToolSchema(BaseModel):
    """One entry of the tools/list result."""
    name: str = Field(..., description="Unique tool name within the registry")
    description: str = Field(..., description="Human-readable summary")
    inputSchema: dict[str, Any] = Field(..., description="JSON Schema object for the arguments")


class ToolDefinition:
    """Registry entry: descriptor fields plus the function computing the output."""
    __slots__ = ("name", "description", "inputSchema", "function")

    def __init__(self, name: str, description: str, inputSchema: dict[str, Any], function: Callable):
        self.name = name
        self.description = description
        self.inputSchema = inputSchema
        self.function = function

    def __repr__(self) -> str:
        return f"ToolDefinition(name={self.name!r})"

    def to_schema(self) -> ToolSchema:
        return ToolSchema(name=self.name, description=self.description, inputSchema=self.inputSchema)
