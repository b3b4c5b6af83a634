# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
MCP server entry point.

Wires a ToolDispatcher into an ``mcp`` low-level Server and runs it over
stdio. Configuration errors are reported on stderr and end the process with
a non-zero exit status before the transport starts.
"""

import argparse
import asyncio
import logging
import os
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, CallToolResult, ServerResult, Tool

from .. import __version__
from ..client import RandomOrgClient
from ..config import RandomOrgConfig, load_config
from ..exceptions import ConfigurationError
from .dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "random-org-server"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger to write to stderr.

    stdout carries the MCP stream, so nothing else may be printed there.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def create_server(dispatcher: ToolDispatcher) -> Server:
    """
    Build an MCP server whose tools are served by ``dispatcher``.

    Tool failures are answered as JSON-RPC errors carrying the McpError code,
    so unknown tools (METHOD_NOT_FOUND) stay distinguishable from failed
    executions (INTERNAL_ERROR).
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_tools()

    # Registered directly rather than through @server.call_tool(), which turns
    # every exception into an isError result and drops the McpError code.
    async def call_tool(request: CallToolRequest) -> ServerResult:
        content = await dispatcher.handle(request.params.name, request.params.arguments)
        return ServerResult(CallToolResult(content=content, isError=False))

    server.request_handlers[CallToolRequest] = call_tool

    return server


async def run(config: RandomOrgConfig) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    async with RandomOrgClient(config) as client:
        server = create_server(ToolDispatcher(client))
        logger.info(f"Random.org MCP server v{__version__} running on stdio")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
        logger.info(f"Session finished: {client.metrics.snapshot()}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: load configuration, then serve on stdio."""
    parser = argparse.ArgumentParser(description="MCP server for the RANDOM.ORG API.")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO").upper(),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (defaults to LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    asyncio.run(run(config))


if __name__ == "__main__":
    main()
