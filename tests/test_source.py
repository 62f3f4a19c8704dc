"""Tests for source.py module.

Tests file reference categorization and payload resolution.
"""

import pytest
from cloudinary import utils as cloudinary_utils

from cloudinary_mcp.source import (
    categorize_source,
    decode_data_uri,
    read_local_file,
    resolve_source,
)


DATA_URI = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"


class TestCategorizeSource:
    """Tests for categorize_source function."""

    @pytest.mark.parametrize("ref", [
        "http://example.com/cat.png",
        "https://example.com/cat.png",
        "HTTPS://EXAMPLE.COM/CAT.PNG",
        "ftp://files.example.com/cat.png",
        "s3://bucket/cat.png",
        "gs://bucket/cat.png",
    ])
    def test_remote_urls(self, ref):
        """Should identify URLs Cloudinary can fetch."""
        assert categorize_source(ref) == "remote"

    def test_data_uri(self):
        """Should identify base64 data URIs."""
        assert categorize_source(DATA_URI) == "data"

    @pytest.mark.parametrize("ref", [
        "/tmp/cat.png",
        "images/cat.png",
        "~/cat.png",
        "C:\\images\\cat.png",
        "data.png",
    ])
    def test_local_paths(self, ref):
        """Should treat anything else as a local path."""
        assert categorize_source(ref) == "local"


class TestResolveSource:
    """Tests for resolve_source function."""

    def test_reads_local_file(self, image_file):
        """Should return file bytes for local paths."""
        assert resolve_source(str(image_file)) == image_file.read_bytes()

    def test_passes_remote_url_through(self):
        """Should return lowercase-scheme URLs unchanged."""
        url = "https://example.com/cat.png"

        assert resolve_source(url) == url

    def test_lowercases_url_scheme(self):
        """Should lowercase the scheme and keep the rest of the URL."""
        assert resolve_source("HTTPS://EXAMPLE.COM/CAT.PNG") == "https://EXAMPLE.COM/CAT.PNG"

    @pytest.mark.parametrize("ref", [
        "http://example.com/cat.png",
        "HTTPS://EXAMPLE.COM/CAT.PNG",
        "Ftp://files.example.com/cat.png",
        "S3://bucket/cat.png",
        "gs://bucket/cat.png",
    ])
    def test_remote_urls_match_sdk_check(self, ref):
        """Should produce URLs the Cloudinary SDK treats as remote."""
        assert cloudinary_utils.is_remote_url(resolve_source(ref))

    def test_decodes_data_uri(self):
        """Should decode data URIs to bytes."""
        assert resolve_source(DATA_URI).startswith(b"\x89PNG\r\n\x1a\n")

    @pytest.mark.parametrize("ref, expected", [
        ("data:application/vnd.ms-excel;base64,AAAA", b"\x00\x00\x00"),
        ("DATA:text/plain;charset=utf-8;base64,aGVsbG8=", b"hello"),
        ("data:text/plain;base64,aGVs\n bG8=", b"hello"),
        ("data:;base64,aGVsbG8", b"hello"),
        ("data:application/octet-stream;base64,-_8", b"\xfb\xff"),
    ])
    def test_decodes_data_uri_variants(self, ref, expected):
        """Should accept dotted MIME types, whitespace, URL-safe and unpadded base64."""
        assert categorize_source(ref) == "data"
        assert resolve_source(ref) == expected

    @pytest.mark.parametrize("ref", [
        "data:image/png;base64,",
        "data:image/png;base64,@@@@",
        "data:image/png;base64,A",
    ])
    def test_invalid_data_uri_raises(self, ref):
        """Should raise ValueError for empty or malformed base64."""
        with pytest.raises(ValueError):
            decode_data_uri(ref)

    def test_missing_file_raises(self, tmp_path):
        """Should raise OSError for a missing file."""
        with pytest.raises(OSError):
            resolve_source(str(tmp_path / "missing.png"))

    def test_directory_raises(self, tmp_path):
        """Should raise OSError when the path is a directory."""
        with pytest.raises(OSError):
            read_local_file(str(tmp_path))

    def test_expands_home(self, tmp_path, monkeypatch):
        """Should expand ~ in local paths."""
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "cat.png").write_bytes(b"meow")

        assert read_local_file("~/cat.png") == b"meow"
