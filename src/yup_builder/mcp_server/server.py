"""
MCP Server implementation for the Yup schema builder.

Provides both stdio and SSE transport support for the Model Context Protocol.
The SSE app also serves a small JSON API for generating schemas over HTTP.
"""

import json
import logging
from typing import Any, Literal

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from yup_builder import __version__
from yup_builder.config import get_config
from yup_builder.mcp_server.tools import (
    get_mcp_tools,
    mcp_check_fields,
    mcp_generate_schema,
)

# Configure logging
logging.basicConfig(level=get_config().log_level)
logger = logging.getLogger("yup-builder-mcp")

TOOL_HANDLERS = {
    "generate_yup_schema": mcp_generate_schema,
    "check_fields": mcp_check_fields,
}


def handle_tool_call(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Dispatch a tool call and wrap the JSON result as MCP text content."""
    logger.info(f"Tool call: {name}")

    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return [TextContent(type="text", text=json.dumps({"error": f"Unknown tool: {name}"}))]

    try:
        result = handler(fields=arguments.get("fields", []))
    except ValidationError as e:
        logger.error(f"Invalid arguments for {name}: {e}")
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    return [TextContent(type="text", text=json.dumps(result, indent=2))]


def create_mcp_server() -> Server:
    """
    Create and configure the MCP server instance.

    Returns:
        Configured MCP Server with the schema builder tools registered.
    """
    server = Server("yup-builder-mcp")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        tools_def = get_mcp_tools()
        return [
            Tool(
                name=t["name"],
                description=t["description"],
                inputSchema=t["inputSchema"],
            )
            for t in tools_def
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        return handle_tool_call(name, arguments)

    return server


async def _read_fields(request: Request) -> list[Any] | JSONResponse:
    try:
        payload = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"error": "Request body must be JSON"}, status_code=400)

    if not isinstance(payload, dict) or not isinstance(payload.get("fields", []), list):
        return JSONResponse({"error": "Expected an object with a 'fields' list"}, status_code=400)
    return payload.get("fields", [])


async def generate_endpoint(request: Request) -> JSONResponse:
    """POST /api/generate: field list in, schema text and warnings out."""
    fields = await _read_fields(request)
    if isinstance(fields, JSONResponse):
        return fields

    try:
        result = mcp_generate_schema(fields)
    except ValidationError as e:
        logger.error(f"Invalid field descriptors: {e}")
        return JSONResponse({"error": str(e)}, status_code=422)
    return JSONResponse(result)


async def check_endpoint(request: Request) -> JSONResponse:
    """POST /api/check: field list in, advisory issues out."""
    fields = await _read_fields(request)
    if isinstance(fields, JSONResponse):
        return fields

    try:
        result = mcp_check_fields(fields)
    except ValidationError as e:
        logger.error(f"Invalid field descriptors: {e}")
        return JSONResponse({"error": str(e)}, status_code=422)
    return JSONResponse(result)


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse({
        "status": "healthy",
        "service": "yup-builder-mcp",
        "transport": "sse",
        "version": __version__,
    })


def create_sse_app(server: Server) -> Starlette:
    """
    Build the ASGI app served in SSE mode.

    MCP clients connect on ``/sse`` and post messages to ``/sse/messages/``.
    The same app serves ``/health`` and the ``/api`` JSON routes.
    """
    sse = SseServerTransport("/messages/")

    async def sse_app(scope, receive, send):
        async with sse.connect_sse(scope, receive, send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())

    return Starlette(
        routes=[
            Route("/health", health_check, methods=["GET"]),
            Route("/api/generate", generate_endpoint, methods=["POST"]),
            Route("/api/check", check_endpoint, methods=["POST"]),
            Mount("/sse/messages", app=sse.handle_post_message),
            Mount("/sse", app=sse_app),
        ],
    )


async def _serve_stdio(server: Server, host: str, port: int) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def _serve_sse(server: Server, host: str, port: int) -> None:
    import uvicorn

    app = create_sse_app(server)
    config = uvicorn.Config(app, host=host, port=port, log_level=get_config().log_level.lower())
    await uvicorn.Server(config).serve()


TRANSPORTS = {
    "stdio": _serve_stdio,
    "sse": _serve_sse,
}


async def run_mcp_server(
    transport: Literal["stdio", "sse"] = "stdio",
    host: str = "0.0.0.0",
    port: int = 8080,
) -> None:
    """
    Serve the schema builder tools until the transport closes.

    Args:
        transport: "stdio" for a parent process, "sse" for HTTP clients.
        host: Bind address, SSE only.
        port: Listen port, SSE only.

    Raises:
        ValueError: For an unknown transport name.
    """
    serve = TRANSPORTS.get(transport)
    if serve is None:
        raise ValueError(f"Unknown transport: {transport!r} (expected one of {sorted(TRANSPORTS)})")

    if transport == "sse":
        logger.info(f"Serving MCP over SSE on {host}:{port}")
    else:
        logger.info("Serving MCP over stdio")
    await serve(create_mcp_server(), host, port)
