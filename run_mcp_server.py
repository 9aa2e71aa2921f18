"""
Start the schema builder MCP server.

    python run_mcp_server.py                       # stdio, for desktop MCP clients
    python run_mcp_server.py --transport sse       # SSE plus /health and /api/*

Defaults come from MCP_TRANSPORT, MCP_HOST and MCP_PORT.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from yup_builder.config import get_config
from yup_builder.mcp_server import TRANSPORTS, run_mcp_server

logger = logging.getLogger("yup-builder-mcp")


def main():
    config = get_config()

    parser = argparse.ArgumentParser(description="Yup schema builder MCP server")
    parser.add_argument("--transport", choices=sorted(TRANSPORTS), default=config.mcp_transport)
    parser.add_argument("--host", default=config.mcp_host, help="SSE bind address")
    parser.add_argument("--port", type=int, default=config.mcp_port, help="SSE port")
    args = parser.parse_args()

    try:
        asyncio.run(run_mcp_server(args.transport, host=args.host, port=args.port))
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception:
        logger.exception("Server failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
