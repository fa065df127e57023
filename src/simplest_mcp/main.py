"""
SimplestMcpHttpServerTestEver - Main FastAPI application.
"""
import logging

from fastapi import FastAPI

from . import SERVER_NAME, __version__
from .config import settings
from .logging_config import configure_logging
from .mcp.server import router as mcp_router
from .tools import TOOL_REGISTRY

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=SERVER_NAME,
    description="Minimal MCP server: JSON-RPC 2.0 over HTTP with calculator tools",
    version=__version__
)

# Include MCP router
app.include_router(mcp_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": SERVER_NAME,
        "version": __version__,
        "status": "operational"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "tools": len(TOOL_REGISTRY)}


@app.on_event("startup")
async def startup_event():
    """Log the tools being served."""
    logger.info("Loaded %d tools: %s", len(TOOL_REGISTRY), ", ".join(TOOL_REGISTRY.names()))
    logger.info("MCP endpoint: %s", settings.base_uri)


def run() -> None:
    import uvicorn

    configure_logging()
    logger.info("Starting %s %s on %s", SERVER_NAME, __version__, settings.base_uri)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
