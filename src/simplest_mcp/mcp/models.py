"""
MCP protocol models - JSON-RPC 2.0 format.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ..tools.schemas import ToolSchema

JSONRPC_VERSION = "2.0"
MCP_PROTOCOL_VERSION = "2025-06-18"


# ============ BASE MODELS ============

class MCPRequest(BaseModel):
    """Base request - all MCP requests have these fields."""
    jsonrpc: str = Field(default=JSONRPC_VERSION)
    id: int = Field(...)
    method: str = Field(...)
    params: Any = Field(default=None)


class MCPResponse(BaseModel):
    """Success envelope."""
    jsonrpc: str = Field(default=JSONRPC_VERSION)
    id: int = Field(...)
    result: Any = Field(...)


# ============ ERROR HANDLING ============

class MCPError(BaseModel):
    """Error structure."""
    code: int = Field(...)
    message: str = Field(...)
    data: Optional[Any] = Field(default=None)


class MCPErrorResponse(BaseModel):
    """Error envelope."""
    jsonrpc: str = Field(default=JSONRPC_VERSION)
    id: int = Field(...)
    error: MCPError = Field(...)


# Error codes
ERROR_PARSE_ERROR = -32700
ERROR_INVALID_REQUEST = -32600
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INVALID_PARAMS = -32602
ERROR_INTERNAL_ERROR = -32603


# ============ INITIALIZE ============

class ToolsCapability(BaseModel):
    listChanged: bool = False


class ServerCapabilities(BaseModel):
    tools: ToolsCapability = Field(default_factory=ToolsCapability)


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    """Result of the initialize handshake."""
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    protocolVersion: str = Field(default=MCP_PROTOCOL_VERSION)
    serverInfo: ServerInfo


# ============ TOOLS/LIST ============

class ToolsListResult(BaseModel):
    """Result with list of tools."""
    tools: list[ToolSchema] = Field(...)


# ============ TOOLS/CALL ============

class ToolCallParams(BaseModel):
    """Decoded params of tools/call (and its alias execute)."""
    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr = Field(..., min_length=1)
    arguments: dict[str, Any] = Field(default_factory=dict)
    meta: Any = Field(default=None, alias="_meta")


class ExecuteResultPayload(BaseModel):
    """Result of a tool execution."""
    output: float = Field(...)
