"""Data models for the Cloudinary MCP server.

Contains data classes for credentials, upload requests, upload options,
and the projected upload result returned to tool callers.
"""

import json
from dataclasses import dataclass, field, fields
from typing import Any, Optional


# Chunk size handed to the Cloudinary client for chunked uploads (20MB)
CHUNK_SIZE = 20_000_000

DEFAULT_RESOURCE_TYPE = "auto"

RESOURCE_TYPES = ("image", "video", "raw")

# JSON schema of the upload tool's arguments
UPLOAD_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "file": {
            "type": "string",
            "minLength": 1,
            "description": "Path to file, URL, or base64 data URI to upload",
        },
        "resource_type": {
            "type": "string",
            "enum": list(RESOURCE_TYPES),
            "description": (
                "Type of resource to upload. For videos, the upload is sent "
                "in chunks and may take a while."
            ),
        },
        "public_id": {
            "type": "string",
            "description": (
                "Public ID to assign to the uploaded asset. This will be used "
                "in the final URL. If not provided, Cloudinary will generate one."
            ),
        },
        "overwrite": {
            "type": "boolean",
            "description": "Whether to overwrite existing assets with the same public ID",
        },
        "tags": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Tags to assign to the uploaded asset",
        },
    },
    "required": ["file"],
}


@dataclass(frozen=True)
class CloudinaryConfig:
    """Cloudinary account credentials.

    Attributes:
        cloud_name: Cloudinary cloud name (part of every asset URL)
        api_key: Cloudinary API key
        api_secret: Cloudinary API secret
    """
    cloud_name: str
    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)


@dataclass
class UploadRequest:
    """Arguments of a single ``upload`` tool call.

    Attributes:
        file: Local path, remote URL, or base64 data URI
        resource_type: One of image, video, raw (None lets Cloudinary detect it)
        public_id: Public ID to assign to the asset
        overwrite: Whether to overwrite an asset with the same public ID
        tags: Tags to assign to the asset, in the caller's order
    """
    file: str
    resource_type: Optional[str] = None
    public_id: Optional[str] = None
    overwrite: Optional[bool] = None
    tags: Optional[list[str]] = None

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "UploadRequest":
        """Build a request from an already validated argument dict."""
        tags = arguments.get("tags")
        return cls(
            file=arguments["file"],
            resource_type=arguments.get("resource_type"),
            public_id=arguments.get("public_id"),
            overwrite=arguments.get("overwrite"),
            tags=list(tags) if tags is not None else None,
        )


@dataclass
class UploadOptions:
    """Options passed to the Cloudinary upload call.

    Attributes:
        resource_type: Resource type, "auto" unless the caller chose one
        public_id: Optional public ID
        overwrite: Optional overwrite flag
        tags: Optional tags
        chunk_size: Segment size for chunked transfer (always CHUNK_SIZE)
    """
    resource_type: str = DEFAULT_RESOURCE_TYPE
    public_id: Optional[str] = None
    overwrite: Optional[bool] = None
    tags: Optional[list[str]] = None
    chunk_size: int = CHUNK_SIZE

    @classmethod
    def from_request(cls, request: UploadRequest) -> "UploadOptions":
        return cls(
            resource_type=request.resource_type or DEFAULT_RESOURCE_TYPE,
            public_id=request.public_id,
            overwrite=request.overwrite,
            tags=request.tags,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return keyword arguments for the Cloudinary client.

        Unset optional fields are left out so Cloudinary's defaults apply.
        """
        options: dict[str, Any] = {
            "resource_type": self.resource_type,
            "chunk_size": self.chunk_size,
        }
        if self.public_id is not None:
            options["public_id"] = self.public_id
        if self.overwrite is not None:
            options["overwrite"] = self.overwrite
        if self.tags is not None:
            options["tags"] = list(self.tags)
        return options


@dataclass
class UploadResult:
    """Projection of a Cloudinary upload response.

    Every value is copied verbatim from the response.
    """
    public_id: Any = None
    version: Any = None
    signature: Any = None
    format: Any = None
    resource_type: Any = None
    created_at: Any = None
    bytes: Any = None
    type: Any = None
    url: Any = None
    secure_url: Any = None

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> "UploadResult":
        return cls(**{f.name: response.get(f.name) for f in fields(cls)})

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_json(self) -> str:
        """Serialize with two-space indentation, keys in field order."""
        return json.dumps(self.to_dict(), indent=2, default=str)
