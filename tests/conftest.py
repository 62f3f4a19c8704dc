"""Shared fixtures for Cloudinary MCP server tests."""

import pytest

from cloudinary_mcp.models import CloudinaryConfig


class FakeUploader:
    """Uploader stand-in that records calls instead of contacting Cloudinary."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def upload(self, source, options):
        self.calls.append((source, options))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def cloudinary_config():
    """Sample Cloudinary configuration for testing."""
    return CloudinaryConfig(
        cloud_name="test_cloud",
        api_key="test_key",
        api_secret="test_secret",
    )


@pytest.fixture
def sample_response():
    """Cloudinary upload response with the projected fields plus extras."""
    return {
        "asset_id": "f1e2d3",
        "public_id": "cat123",
        "version": 1,
        "version_id": "v-abc",
        "signature": "abc",
        "width": 640,
        "height": 480,
        "format": "png",
        "resource_type": "image",
        "created_at": "t",
        "tags": [],
        "bytes": 1000,
        "type": "upload",
        "etag": "etag123",
        "placeholder": False,
        "url": "http://res.cloudinary.com/test_cloud/image/upload/v1/cat123.png",
        "secure_url": "https://res.cloudinary.com/test_cloud/image/upload/v1/cat123.png",
        "original_filename": "cat",
    }


@pytest.fixture
def projected_response(sample_response):
    """The ten fields an upload call returns."""
    keys = [
        "public_id", "version", "signature", "format", "resource_type",
        "created_at", "bytes", "type", "url", "secure_url",
    ]
    return {key: sample_response[key] for key in keys}


@pytest.fixture
def fake_uploader(sample_response):
    """Uploader that succeeds with sample_response."""
    return FakeUploader(response=sample_response)


@pytest.fixture
def image_file(tmp_path):
    """Small local file to upload."""
    path = tmp_path / "cat.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake image data")
    return path


@pytest.fixture
def make_uploader():
    """Factory for FakeUploader instances with custom behaviour."""
    return FakeUploader
