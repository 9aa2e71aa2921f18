"""
MCP Server module for the Yup schema builder.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from yup_builder.mcp_server.server import (
    TRANSPORTS,
    create_mcp_server,
    create_sse_app,
    run_mcp_server,
)
from yup_builder.mcp_server.tools import get_mcp_tools

__all__ = [
    "create_mcp_server",
    "create_sse_app",
    "run_mcp_server",
    "TRANSPORTS",
    "get_mcp_tools",
]
