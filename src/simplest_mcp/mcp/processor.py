"""
Envelope processor: raw request body in, JSON-RPC response body out.

Every failure becomes an error envelope; nothing raised here reaches the
HTTP layer, and the transport status is always 200.
"""
import logging
from types import MappingProxyType
from typing import Mapping

from ..tools import TOOL_REGISTRY
from ..tools.base import ToolRegistry
from .codec import (
    JSON_CONTENT_TYPE,
    decode_text,
    encode,
    fold_keys,
    get_field,
    get_integer,
    get_object,
    get_string,
    parse_json,
)
from .models import (
    MCPRequest,
    JSONRPC_VERSION,
    ERROR_PARSE_ERROR,
    ERROR_INVALID_REQUEST,
    ERROR_METHOD_NOT_FOUND,
    ERROR_INTERNAL_ERROR,
)
from .utils import (
    Handler,
    create_error_response,
    handle_initialize,
    handle_tools_list,
    handle_tools_call,
)

logger = logging.getLogger(__name__)

# Used whenever the request id cannot be read
UNKNOWN_ID = -1

HTTP_STATUS = 200

ENVELOPE_FIELDS = ("jsonrpc", "id", "method", "params")

METHOD_HANDLERS: Mapping[str, Handler] = MappingProxyType({
    "initialize": handle_initialize,
    "tools/list": handle_tools_list,
    "tools/call": handle_tools_call,
    "execute": handle_tools_call,
})

MSG_EMPTY_BODY = "Parse error: Request body is empty."
MSG_INVALID_JSON = "Parse error: Invalid JSON was received by the server."
MSG_INVALID_REQUEST = 'Invalid Request: Missing required JSON-RPC fields (jsonrpc:"2.0", id, method).'


def process(raw_body: bytes, registry: ToolRegistry = TOOL_REGISTRY) -> tuple[str, int, bytes]:
    """
    Handle one JSON-RPC request body.

    Returns:
        (content type, HTTP status, response body)
    """
    envelope = handle_message(raw_body, registry)
    return JSON_CONTENT_TYPE, HTTP_STATUS, encode(envelope)


def handle_message(raw_body: bytes, registry: ToolRegistry = TOOL_REGISTRY) -> dict:
    """Decode, validate and dispatch; returns the response envelope as a dict."""
    request = decode_request(raw_body)
    envelope = request if isinstance(request, dict) else dispatch(request, registry)

    if "error" in envelope:
        error = envelope["error"]
        logger.warning("JSON-RPC error %s (id=%s): %s", error["code"], envelope["id"], error["message"])
    return envelope


def decode_request(raw_body: bytes) -> MCPRequest | dict:
    """
    Parse and validate a request body.

    Returns the request, or an error envelope when the body is not a valid
    JSON-RPC 2.0 request.
    """
    request_id = UNKNOWN_ID
    try:
        try:
            text = decode_text(raw_body or b"")
        except UnicodeDecodeError:
            return create_error_response(UNKNOWN_ID, ERROR_PARSE_ERROR, MSG_INVALID_JSON)

        if not text.strip():
            return create_error_response(UNKNOWN_ID, ERROR_PARSE_ERROR, MSG_EMPTY_BODY)

        try:
            document = parse_json(text)
        except (ValueError, RecursionError):
            return create_error_response(UNKNOWN_ID, ERROR_PARSE_ERROR, MSG_INVALID_JSON)

        fields = get_object(document)
        if fields is None:
            return create_error_response(UNKNOWN_ID, ERROR_INVALID_REQUEST, MSG_INVALID_REQUEST)
        fields = fold_keys(fields, ENVELOPE_FIELDS)

        parsed_id = get_integer(get_field(fields, "id"))
        if parsed_id is None:
            return create_error_response(UNKNOWN_ID, ERROR_INVALID_REQUEST, MSG_INVALID_REQUEST)
        request_id = parsed_id

        method = get_string(get_field(fields, "method"))
        if get_field(fields, "jsonrpc") != JSONRPC_VERSION or not method or not method.strip():
            return create_error_response(request_id, ERROR_INVALID_REQUEST, MSG_INVALID_REQUEST)

        return MCPRequest(
            jsonrpc=JSONRPC_VERSION,
            id=request_id,
            method=method,
            params=fields.get("params"),
        )
    except Exception as e:
        logger.exception("Unexpected failure while decoding request")
        return create_error_response(
            request_id, ERROR_INTERNAL_ERROR,
            f"Internal error: {e}"
        )


def dispatch(request: MCPRequest, registry: ToolRegistry = TOOL_REGISTRY) -> dict:
    """Route a validated request to its method handler."""
    handler = METHOD_HANDLERS.get(request.method)
    if handler is None:
        return create_error_response(request.id, ERROR_METHOD_NOT_FOUND, f"Method not found: {request.method}")

    logger.debug("Dispatching %s (id=%s)", request.method, request.id)
    try:
        return handler(request, registry)
    except Exception as e:
        logger.exception("Handler for %s failed", request.method)
        return create_error_response(request.id, ERROR_INTERNAL_ERROR, f"Internal error: {e}")
