"""
SimplestMcpHttpServerTestEver - minimal MCP server over HTTP JSON-RPC.
"""

SERVER_NAME = "SimplestMcpHttpServerTestEver"
__version__ = "0.0.1-rc1"
