"""Wiring between the dispatcher and the MCP SDK stdio transport."""

import asyncio
import sys
from collections.abc import Callable

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from toolservers.core.config import settings
from toolservers.core.logging import get_logger, setup_logging
from toolservers.tools.dispatcher import Dispatcher
from toolservers.tools.registry import ToolRegistry

logger = get_logger(__name__)


def create_server(name: str, dispatcher: Dispatcher, version: str = "0.1.0") -> Server:
    """Create an MCP server exposing the dispatcher's tools.

    ``tools/call`` is registered as a raw request handler so that a missing
    arguments object reaches the dispatcher as ``None``. Exceptions raised by
    the dispatcher are turned into JSON-RPC errors by the SDK, message intact.
    """
    server = Server(name, version=version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.inputSchema)
            for tool in dispatcher.list_tools()
        ]

    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        response = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(
            types.CallToolResult(
                content=[
                    types.TextContent(type="text", text=item.text) for item in response.content
                ]
            )
        )

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def serve(server: Server) -> None:
    """Run the server over stdio until the host closes the streams."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run(service_name: str, build_registry: Callable[[], ToolRegistry]) -> None:
    """Process entry point shared by the tool servers.

    Logging is configured before ``build_registry`` runs so nothing reaches
    stdout ahead of the protocol. Exits with status 1 if the transport cannot
    be started or fails.
    """
    setup_logging(
        service_name=service_name,
        service_version=settings.service_version,
        log_level=settings.log_level,
        log_format=settings.log_format,
    )
    dispatcher = Dispatcher(build_registry())
    server = create_server(service_name, dispatcher, version=settings.service_version)
    logger.info(f"{service_name} running on stdio")
    try:
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info(f"{service_name} stopped")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)
