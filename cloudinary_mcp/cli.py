"""CLI interface for the Cloudinary MCP server using Typer.

Main entry point for the application. Starts the stdio server and
checks Cloudinary credentials. Console output goes to stderr.
"""

import asyncio
from typing import Optional

import typer

from . import __version__
from .config import get_cloudinary_config, ConfigError
from .server import create_server, run_stdio
from .upload import init_cloudinary, verify_connection
from .utils import console, print_error, print_success


app = typer.Typer(
    name="cloudinary-mcp",
    help="MCP server for uploading media to Cloudinary",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"cloudinary-mcp {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """MCP server for uploading media to Cloudinary."""


@app.command()
def serve() -> None:
    """Run the MCP server on stdio.

    Requires CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and
    CLOUDINARY_API_SECRET to be set.
    """
    try:
        config = get_cloudinary_config()
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        raise typer.Exit(1)

    init_cloudinary(config)
    server = create_server(config)

    try:
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        raise typer.Exit(0)
    except Exception as e:
        print_error(f"Server error: {e}")
        raise typer.Exit(1)


@app.command()
def auth() -> None:
    """Validate credentials and test the Cloudinary connection."""
    try:
        with console.status("[bold green]Validating configuration..."):
            config = get_cloudinary_config()

        print_success("Configuration valid")

        init_cloudinary(config)

        with console.status("[bold green]Testing Cloudinary connection..."):
            verify_connection()

        print_success("Cloudinary connection successful")
        console.print(f"  Cloud name: {config.cloud_name}", highlight=False)

    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        raise typer.Exit(1)
    except RuntimeError as e:
        print_error(f"Connection error: {e}")
        raise typer.Exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
