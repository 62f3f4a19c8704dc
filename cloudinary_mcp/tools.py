"""Tool registry and dispatch for the Cloudinary MCP server.

Declares the ``upload`` tool and routes tool calls to the upload adapter,
translating adapter failures into MCP errors.
"""

from typing import Any

from mcp import types
from mcp.shared.exceptions import McpError

from .models import UPLOAD_INPUT_SCHEMA
from .upload import InvalidArgumentsError, UploadAdapter, UploadError


UPLOAD_TOOL_NAME = "upload"

ASSET_URL_TEMPLATE = (
    "{scheme}://res.cloudinary.com/{cloud_name}/{resource_type}/upload/v1/{public_id}.{format}"
)


def build_upload_tool(cloud_name: str) -> types.Tool:
    """Create the ``upload`` tool definition.

    Args:
        cloud_name: Cloud name shown in the asset URL template

    Returns:
        Tool with name, description and input schema
    """
    description = (
        "Upload media (images/videos) to Cloudinary. Large files are uploaded "
        "in chunks. The uploaded asset will be available at:\n"
        f"- HTTP: {ASSET_URL_TEMPLATE.replace('{scheme}', 'http')}\n"
        f"- HTTPS: {ASSET_URL_TEMPLATE.replace('{scheme}', 'https')}\n"
        f"where cloud_name='{cloud_name}', resource_type is 'image', 'video' "
        "or 'raw', and format is determined by the file extension."
    )
    return types.Tool(
        name=UPLOAD_TOOL_NAME,
        description=description,
        inputSchema=UPLOAD_INPUT_SCHEMA,
    )


def list_tools(cloud_name: str) -> list[types.Tool]:
    """Return every tool the server exposes."""
    return [build_upload_tool(cloud_name)]


class ToolDispatcher:
    """Routes tool calls by name.

    Args:
        adapter: Adapter that performs uploads
    """

    def __init__(self, adapter: UploadAdapter):
        self._adapter = adapter

    async def call(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """Execute a tool call.

        Args:
            name: Tool name from the request
            arguments: Tool arguments, forwarded unchanged

        Returns:
            One text content block with the upload result JSON

        Raises:
            McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for
                malformed arguments, INTERNAL_ERROR for failed uploads
        """
        if name != UPLOAD_TOOL_NAME:
            raise McpError(
                types.ErrorData(
                    code=types.METHOD_NOT_FOUND,
                    message=f"Unknown tool: {name}",
                )
            )

        try:
            text = await self._adapter.upload(arguments or {})
        except InvalidArgumentsError as e:
            raise McpError(
                types.ErrorData(code=types.INVALID_PARAMS, message=str(e))
            ) from e
        except UploadError as e:
            raise McpError(
                types.ErrorData(code=types.INTERNAL_ERROR, message=str(e))
            ) from e

        return [types.TextContent(type="text", text=text)]
