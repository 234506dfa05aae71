"""
MCP Server implementation for Alpha Vantage tools.

Provides a Model Context Protocol server, spoken over stdio, that exposes
stock, forex, crypto and technical indicator data from Alpha Vantage.
"""

import asyncio
import logging
import sys
from typing import Any, List, Union

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool
from pydantic import ValidationError

from alpha_vantage_mcp import __version__
from alpha_vantage_mcp.client import AlphaVantageClient
from alpha_vantage_mcp.config import AlphaVantageConfig
from alpha_vantage_mcp.tools import TOOLS, call_tool

SERVER_NAME = "alpha-vantage"

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging to stderr; stdout carries the MCP transport."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


async def handle_call_tool(
    client: AlphaVantageClient,
    name: str,
    arguments: dict[str, Any] | None,
) -> Union[List[TextContent], CallToolResult]:
    """Run a tool, turning argument validation errors into an MCP error result."""
    logger.info(f"Tool call: {name} with args: {arguments}")

    try:
        return await call_tool(client, name, arguments or {})
    except ValidationError as e:
        logger.warning(f"Invalid arguments for {name}: {e}")
        return CallToolResult(
            content=[TextContent(type="text", text=f"Invalid arguments for {name}: {e}")],
            isError=True,
        )


def create_server(client: AlphaVantageClient) -> Server:
    """Create and configure the MCP server."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        """Return list of available Alpha Vantage tools."""
        return TOOLS

    @server.call_tool()
    async def call_tool_handler(name: str, arguments: dict[str, Any] | None):
        return await handle_call_tool(client, name, arguments)

    return server


async def run_server(config: AlphaVantageConfig):
    """Run the MCP server"""
    errors = config.validate_config()
    if errors:
        logger.error("Configuration errors:")
        for error in errors:
            logger.error(f"  - {error}")
        raise ValueError("Invalid configuration")

    async with AlphaVantageClient(config) as client:
        server = create_server(client)

        async with stdio_server() as (read_stream, write_stream):
            logger.info("Alpha Vantage MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main():
    """Entry point for CLI"""
    config = AlphaVantageConfig.from_env()
    setup_logging(config.debug)

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Server shut down by user")
    except ValueError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
