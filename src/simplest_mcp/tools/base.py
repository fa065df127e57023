"""
Tool registry and decorator.
NOTE:
1. MCP uses JSON Schema for tool input definitions.
2. Tools are registered with @tool while their module is imported, then
   frozen by build_registry() into a ToolRegistry that is never mutated.
"""
import inspect
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping

from .schemas import ToolDefinition

# Definitions collected by @tool, in declaration order
_DECLARED: dict[str, ToolDefinition] = {}


def python_type_to_json_schema(python_type: type) -> str:
    """Convert Python type to JSON Schema type."""
    type_map = {
        str: "string",
        int: "integer",
        float: "number",
        bool: "boolean",
        list: "array",
        dict: "object",
    }
    return type_map.get(python_type, "string")  # Default to string


def build_input_schema(func: Callable, descriptions: Mapping[str, str] | None = None) -> dict:
    """Build a JSON Schema object from a function signature."""
    descriptions = descriptions or {}
    sig = inspect.signature(func)

    properties = {}
    required = []

    for param_name, param in sig.parameters.items():
        param_type = param.annotation if param.annotation != inspect.Parameter.empty else str

        prop = {"type": python_type_to_json_schema(param_type)}
        if param_name in descriptions:
            prop["description"] = descriptions[param_name]
        properties[param_name] = prop

        # If no default value, it's required
        if param.default == inspect.Parameter.empty:
            required.append(param_name)

    return {
        "type": "object",
        "properties": properties,
        "required": required
    }


def tool(name: str, description: str, descriptions: Mapping[str, str] | None = None) -> Callable:
    """
    Decorator to register a function as an MCP tool.

    Usage:
        @tool(name="Somar", description="Adds two numbers")
        def somar(num1: float, num2: float) -> float:
            return num1 + num2

    The original function is returned unchanged.
    """
    def decorator(func: Callable) -> Callable:
        if name in _DECLARED:
            raise ValueError(f"Tool '{name}' is already registered")

        _DECLARED[name] = ToolDefinition(
            name=name,
            description=description,
            inputSchema=build_input_schema(func, descriptions),
            function=func
        )
        return func

    return decorator


class ToolRegistry:
    """Immutable, ordered set of tool definitions keyed by name."""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        by_name: dict[str, ToolDefinition] = {}
        for definition in definitions:
            if definition.name in by_name:
                raise ValueError(f"Tool '{definition.name}' is already registered")
            by_name[definition.name] = definition
        self._tools = tuple(by_name.values())
        self._by_name = MappingProxyType(by_name)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def mapping(self) -> Mapping[str, ToolDefinition]:
        return self._by_name

    def all(self) -> tuple[ToolDefinition, ...]:
        """Return all registered tools."""
        return self._tools

    def names(self) -> list[str]:
        return [t.name for t in self._tools]

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._by_name.get(name)


def build_registry() -> ToolRegistry:
    """Freeze every tool declared so far."""
    return ToolRegistry(_DECLARED.values())
