"""Cloudinary MCP server - Upload media to Cloudinary from MCP clients.

Exposes a single ``upload`` tool over the MCP stdio transport that sends
a local file, remote URL, or data URI to Cloudinary and returns the
resulting asset metadata.
"""

__version__ = "0.1.0"

from .models import CloudinaryConfig, UploadOptions, UploadRequest, UploadResult

__all__ = [
    "__version__",
    "CloudinaryConfig",
    "UploadOptions",
    "UploadRequest",
    "UploadResult",
]
