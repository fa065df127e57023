"""
MCP utilities - envelope builders and handler functions for processing requests.
"""
import logging
from typing import Any, Callable

from pydantic import ValidationError

from .. import SERVER_NAME, __version__
from ..tools.base import ToolRegistry
from ..tools.calculator import OPERANDS
from .codec import MISSING, fold_keys, get_field, get_number, get_object
from .models import (
    MCPRequest,
    MCPResponse,
    MCPError,
    MCPErrorResponse,
    InitializeResult,
    ServerInfo,
    ToolsListResult,
    ToolCallParams,
    ExecuteResultPayload,
    ERROR_INVALID_PARAMS,
    ERROR_METHOD_NOT_FOUND,
)

logger = logging.getLogger(__name__)

Handler = Callable[[MCPRequest, ToolRegistry], dict]

TOOL_CALL_FIELDS = ("name", "arguments", "_meta")


def create_success_response(request_id: int, result: Any) -> dict:
    return MCPResponse(id=request_id, result=result).model_dump()


def create_error_response(request_id: int, code: int, message: str, data: Any = None) -> dict:
    envelope = MCPErrorResponse(
        id=request_id,
        error=MCPError(code=code, message=message, data=data)
    )
    return envelope.model_dump(exclude_none=True)


def handle_initialize(request: MCPRequest, registry: ToolRegistry) -> dict:
    """
    Handle initialize request.
    Announces fixed capabilities; nothing in params is consulted.
    """
    result = InitializeResult(serverInfo=ServerInfo(name=SERVER_NAME, version=__version__))
    return create_success_response(request.id, result.model_dump())


def handle_tools_list(request: MCPRequest, registry: ToolRegistry) -> dict:
    """
    Handle tools/list request.
    Returns all registered tools in MCP format, in registry order.
    """
    result = ToolsListResult(tools=[tool.to_schema() for tool in registry.all()])
    return create_success_response(request.id, result.model_dump())


def handle_tools_call(request: MCPRequest, registry: ToolRegistry) -> dict:
    """Handle tools/call (and execute)."""
    return execute_tool(request.id, request.params, registry)


def decode_tool_call_params(params: Any) -> ToolCallParams | None:
    fields = get_object(params)
    if fields is None:
        return None
    try:
        return ToolCallParams.model_validate(fold_keys(fields, TOOL_CALL_FIELDS))
    except ValidationError as e:
        logger.debug("Rejected tools/call params: %s", e.errors())
        return None


def execute_tool(request_id: int, params: Any, registry: ToolRegistry) -> dict:
    """
    Tool executor.

    Checks run in a fixed order, each returning an error envelope on failure:
    params shape, operand presence, operand type, tool name.
    """
    call = decode_tool_call_params(params)
    if call is None:
        return create_error_response(
            request_id, ERROR_INVALID_PARAMS,
            "Invalid params: Parameters for 'tools/call' are malformed."
        )

    raw_operands = [get_field(call.arguments, name) for name in OPERANDS]
    if any(value is MISSING for value in raw_operands):
        return create_error_response(
            request_id, ERROR_INVALID_PARAMS,
            "Invalid params: 'num1' and 'num2' are required."
        )

    operands = [get_number(value) for value in raw_operands]
    if any(value is None for value in operands):
        return create_error_response(
            request_id, ERROR_INVALID_PARAMS,
            "Invalid params: 'num1' and 'num2' must be numeric."
        )

    tool = registry.get(call.name)
    if tool is None:
        return create_error_response(
            request_id, ERROR_METHOD_NOT_FOUND,
            f"Method not found: Tool '{call.name}' not found."
        )

    output = tool.function(**dict(zip(OPERANDS, operands)))
    logger.debug("Tool %s(%s) -> %r", call.name, ", ".join(map(repr, operands)), output)

    return create_success_response(request_id, ExecuteResultPayload(output=output).model_dump())
