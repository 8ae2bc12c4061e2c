"""CLI entry point for striker-server.

This module provides the command-line interface for starting the striker-server.
It can be invoked as `striker-server` (via the script entry point) or
`python -m striker_server`.
"""

import argparse
import sys

import uvicorn

from striker_server import __version__, create_app
from striker_server.config import StrikerServerSettings


def main() -> None:
    """Main entry point for the striker-server CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="striker-server",
        description="Mock backend for Hat-Trick customized jersey tools",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"striker-server {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via STRIKER_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via STRIKER_PORT)",
    )

    parser.add_argument(
        "--fixture",
        type=str,
        default=None,
        help="JSON fixture file to serve instead of the built-in mock data "
        "(can be set via STRIKER_FIXTURE_PATH)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via STRIKER_LOG_LEVEL)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.fixture is not None:
        settings_kwargs["fixture_path"] = args.fixture
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = StrikerServerSettings(**settings_kwargs)

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
