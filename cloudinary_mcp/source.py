"""Media source resolution for uploads.

Turns the ``file`` argument of an upload call into something the
Cloudinary client can send: bytes for local files and data URIs, or a
URL for sources Cloudinary fetches itself.
"""

import base64
import binascii
import re
from pathlib import Path
from typing import Literal


# Sources Cloudinary can fetch on its side
REMOTE_SCHEMES = ('http', 'https', 'ftp', 's3', 'gs')

REMOTE_URL_PATTERN = re.compile(
    r'^(%s)://' % '|'.join(REMOTE_SCHEMES),
    re.IGNORECASE
)

DATA_URI_PATTERN = re.compile(
    r'^data:([\w-]+/[\w.+-]+)?(;[\w-]+=[^;,]+)*;base64,',
    re.IGNORECASE
)


SourceType = Literal["local", "remote", "data"]


def categorize_source(file: str) -> SourceType:
    """Determine if a file reference is a local path, remote URL, or data URI.

    Args:
        file: File reference from the upload call

    Returns:
        Source type: 'local', 'remote', or 'data'
    """
    if DATA_URI_PATTERN.match(file):
        return "data"

    if REMOTE_URL_PATTERN.match(file):
        return "remote"

    return "local"


def read_local_file(file: str) -> bytes:
    """Read a local file as bytes.

    Args:
        file: Path to the file (``~`` is expanded)

    Returns:
        File content

    Raises:
        OSError: If the file is missing or unreadable
    """
    path = Path(file).expanduser()
    with open(path, 'rb') as f:
        return f.read()


def decode_data_uri(file: str) -> bytes:
    """Decode a base64 data URI.

    Whitespace is ignored and URL-safe base64 is accepted.

    Raises:
        ValueError: If the payload is empty or not valid base64
    """
    payload = file.split('base64,', 1)[1]
    payload = re.sub(r'\s+', '', payload)
    if not payload:
        raise ValueError("Data URI has no content")

    payload = payload.replace('-', '+').replace('_', '/')
    payload += '=' * (-len(payload) % 4)

    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 in data URI: {e}") from e


def normalize_remote_url(file: str) -> str:
    """Lowercase the scheme so Cloudinary recognizes the URL as remote."""
    scheme, rest = file.split('://', 1)
    return f"{scheme.lower()}://{rest}"


def resolve_source(file: str) -> bytes | str:
    """Resolve a file reference to an upload payload.

    Local paths are read into memory and data URIs are decoded. Remote
    URLs are returned as strings for Cloudinary to fetch.

    Args:
        file: File reference from the upload call

    Returns:
        Bytes for local paths and data URIs, otherwise the URL
    """
    source_type = categorize_source(file)
    if source_type == "data":
        return decode_data_uri(file)
    if source_type == "remote":
        return normalize_remote_url(file)
    return read_local_file(file)
