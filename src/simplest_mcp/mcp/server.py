"""
MCP server - FastAPI route for JSON-RPC requests.
"""
from fastapi import APIRouter, Request, Response

from ..config import settings
from .processor import process

router = APIRouter()


@router.post(settings.path)
async def mcp_endpoint(request: Request) -> Response:
    """
    Main MCP endpoint.
    The raw body goes to the processor; protocol errors travel in the body.
    """
    body = await request.body()
    content_type, status_code, payload = process(body)
    return Response(content=payload, status_code=status_code, media_type=content_type)
