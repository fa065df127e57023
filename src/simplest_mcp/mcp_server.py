"""
Calculator tools served through the MCP SDK (SSE transport).
"""
from mcp.server.fastmcp import FastMCP

from . import SERVER_NAME
from .config import settings
from .logging_config import configure_logging
from .tools import register_all_tools

mcp = FastMCP(name=SERVER_NAME, host=settings.host, port=settings.sse_port)
register_all_tools(mcp)


if __name__ == "__main__":
    configure_logging()
    mcp.run(transport="sse")
