"""MCP server wiring.

Builds the low-level MCP server exposing the upload tool and runs it
over stdio.
"""

import logging

import mcp.server.stdio
from mcp import types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.shared.exceptions import McpError

from . import __version__
from .models import CloudinaryConfig
from .tools import ToolDispatcher, list_tools
from .upload import UploadAdapter, Uploader
from .utils import print_error, print_info


SERVER_NAME = "cloudinary-server"

# Logger the MCP SDK reports stream and protocol failures on
MCP_LOGGER_NAME = "mcp"


class ProtocolErrorHandler(logging.Handler):
    """Forwards MCP SDK error records to the stderr console."""

    def __init__(self):
        super().__init__(level=logging.ERROR)

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.exc_info and record.exc_info[1] is not None:
            message = f"{message} ({record.exc_info[1]})"
        print_error(f"[MCP Error] {message}")


def route_protocol_errors() -> ProtocolErrorHandler:
    """Attach a ProtocolErrorHandler to the MCP SDK logger once.

    Returns:
        The installed handler
    """
    logger = logging.getLogger(MCP_LOGGER_NAME)
    for handler in logger.handlers:
        if isinstance(handler, ProtocolErrorHandler):
            return handler

    handler = ProtocolErrorHandler()
    logger.addHandler(handler)
    return handler


def create_server(config: CloudinaryConfig, uploader: Uploader | None = None) -> Server:
    """Create an MCP server exposing the upload tool.

    Args:
        config: Cloudinary credentials (the cloud name appears in the
            tool description)
        uploader: Optional uploader substitute, CloudinaryUploader otherwise

    Returns:
        Configured low-level MCP server
    """
    server = Server(SERVER_NAME)
    dispatcher = ToolDispatcher(UploadAdapter(uploader))

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_tools(config.cloud_name)

    # Registered directly so McpError reaches the client as a JSON-RPC error
    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        try:
            content = await dispatcher.call(request.params.name, request.params.arguments)
        except McpError as e:
            print_error(f"Tool call failed: {e.error.message}")
            raise
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


def get_initialization_options(server: Server) -> InitializationOptions:
    return InitializationOptions(
        server_name=SERVER_NAME,
        server_version=__version__,
        capabilities=server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )


async def run_stdio(server: Server) -> None:
    """Serve requests on stdin/stdout until the client disconnects."""
    route_protocol_errors()
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        print_info("Cloudinary MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            get_initialization_options(server),
        )
