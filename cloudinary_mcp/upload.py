"""Cloudinary upload logic.

Manages Cloudinary client configuration, the upload call itself, and
the adapter that turns upload tool arguments into an upload result.
"""

import asyncio
import io
from typing import Any, Protocol

import cloudinary
import cloudinary.api
import cloudinary.uploader
from cloudinary.exceptions import AuthorizationRequired, Error as CloudinaryError
from jsonschema import ValidationError as JsonSchemaValidationError
from jsonschema import validate

from .models import (
    UPLOAD_INPUT_SCHEMA,
    CloudinaryConfig,
    UploadOptions,
    UploadRequest,
    UploadResult,
)
from .source import resolve_source
from .utils import format_file_size, print_info, print_success


class InvalidArgumentsError(Exception):
    """Raised when upload arguments do not match the tool schema."""
    pass


class UploadError(Exception):
    """Raised when an upload fails for any reason.

    Attributes:
        cause: Description of the underlying failure
    """

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Upload failed: {cause}")


class Uploader(Protocol):
    """Anything that can send a payload to Cloudinary."""

    def upload(self, source: bytes | str, options: UploadOptions) -> dict[str, Any] | None:
        """Upload a payload and return the raw response."""
        ...


def init_cloudinary(config: CloudinaryConfig) -> None:
    """Configure the Cloudinary SDK with the given credentials.

    Args:
        config: Cloudinary credentials
    """
    cloudinary.config(
        cloud_name=config.cloud_name,
        api_key=config.api_key,
        api_secret=config.api_secret,
        secure=True,
    )


class CloudinaryUploader:
    """Uploader backed by the Cloudinary SDK.

    Byte payloads go through ``upload_large`` so files bigger than the
    chunk size are sent in segments. Remote URLs are handed to ``upload``
    as strings and fetched by Cloudinary.
    """

    def upload(self, source: bytes | str, options: UploadOptions) -> dict[str, Any] | None:
        if isinstance(source, bytes):
            return cloudinary.uploader.upload_large(io.BytesIO(source), **options.to_dict())
        return cloudinary.uploader.upload(source, **options.to_dict())


def verify_connection() -> bool:
    """Verify Cloudinary credentials by pinging the Admin API.

    Returns:
        True if connection successful

    Raises:
        RuntimeError: If connection fails
    """
    try:
        cloudinary.api.ping()
        return True
    except AuthorizationRequired:
        raise RuntimeError("Access denied. Check your Cloudinary credentials.")
    except CloudinaryError as e:
        raise RuntimeError(f"Failed to connect to Cloudinary: {e}")


def validate_arguments(arguments: dict[str, Any]) -> None:
    """Check upload arguments against the tool's input schema.

    Raises:
        InvalidArgumentsError: If the arguments are malformed
    """
    try:
        validate(instance=arguments, schema=UPLOAD_INPUT_SCHEMA)
    except JsonSchemaValidationError as e:
        raise InvalidArgumentsError(f"Invalid arguments: {e.message}") from e


def describe_error(error: BaseException) -> str:
    """Return the message of an exception, or its type name if it has none."""
    return str(error) or type(error).__name__


class UploadAdapter:
    """Runs one upload per tool call.

    Args:
        uploader: Uploader used for the remote call (CloudinaryUploader
            unless a substitute is injected)
    """

    def __init__(self, uploader: Uploader | None = None):
        self._uploader = uploader or CloudinaryUploader()

    async def upload(self, arguments: dict[str, Any]) -> str:
        """Upload a file and return the result as indented JSON.

        Args:
            arguments: Tool call arguments matching UPLOAD_INPUT_SCHEMA

        Returns:
            JSON text of the UploadResult projection

        Raises:
            InvalidArgumentsError: If the arguments are malformed
            UploadError: If reading the source or the upload fails, or if
                Cloudinary returns no result
        """
        validate_arguments(arguments)
        request = UploadRequest.from_arguments(arguments)
        options = UploadOptions.from_request(request)

        try:
            payload = await asyncio.to_thread(resolve_source, request.file)

            if options.resource_type == "video":
                print_info("Starting video upload, this may take a while...")

            response = await asyncio.to_thread(self._uploader.upload, payload, options)
        except Exception as e:
            raise UploadError(describe_error(e)) from e

        # An empty response is a failure, same as an exception
        if not response:
            raise UploadError("No result received from upload")

        result = UploadResult.from_response(response)

        if isinstance(result.bytes, int):
            print_success(
                f"Upload completed successfully! {result.public_id} "
                f"({format_file_size(result.bytes)})"
            )
        else:
            print_success(f"Upload completed successfully! {result.public_id}")

        return result.to_json()
