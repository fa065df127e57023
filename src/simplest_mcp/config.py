"""
Runtime settings, read from the environment (and an optional .env file).
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass
class Settings:
    # HTTP JSON-RPC endpoint
    host: str = os.getenv("MCP_HOST", "localhost")
    port: int = _get_int("MCP_PORT", 9000)
    path: str = os.getenv("MCP_PATH", "/mcp")

    # FastMCP SSE host
    sse_port: int = _get_int("MCP_SSE_PORT", 9001)

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def base_uri(self) -> str:
        return f"http://{self.host}:{self.port}{self.path}"


settings = Settings()
