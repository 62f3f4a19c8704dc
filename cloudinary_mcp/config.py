"""Configuration and credentials management for the Cloudinary MCP server.

Handles loading Cloudinary credentials from the environment and
validating that all of them are present before the server starts.
"""

import os
from typing import Mapping

from .models import CloudinaryConfig


# Environment variable for each CloudinaryConfig field
ENV_VARS = {
    "cloud_name": "CLOUDINARY_CLOUD_NAME",
    "api_key": "CLOUDINARY_API_KEY",
    "api_secret": "CLOUDINARY_API_SECRET",
}


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


def load_credentials(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Read Cloudinary credentials from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Dictionary keyed by CloudinaryConfig field name. Values are
        stripped; unset variables map to an empty string.
    """
    if environ is None:
        environ = os.environ

    return {
        name: (environ.get(var) or "").strip()
        for name, var in ENV_VARS.items()
    }


def validate_credentials(credentials: dict[str, str]) -> None:
    """Validate that every credential is present and non-empty.

    Args:
        credentials: Dictionary returned by load_credentials

    Raises:
        ConfigError: If any credential is missing, listing all of them
    """
    missing = [
        ENV_VARS[name]
        for name in ENV_VARS
        if not credentials.get(name)
    ]
    if missing:
        raise ConfigError(
            "Missing required Cloudinary environment variables: "
            + ", ".join(missing)
        )


def get_cloudinary_config(environ: Mapping[str, str] | None = None) -> CloudinaryConfig:
    """Load, validate and return Cloudinary credentials.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        CloudinaryConfig dataclass with credentials

    Raises:
        ConfigError: If any credential is missing
    """
    credentials = load_credentials(environ)
    validate_credentials(credentials)
    return CloudinaryConfig(**credentials)
