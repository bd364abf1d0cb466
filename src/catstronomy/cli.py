#!/usr/bin/env python3
"""
Main CLI entry point for the Catstronomy API server.
"""

import os
import sys

import click
import uvicorn

from catstronomy import __version__
from catstronomy.config import settings
from catstronomy.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="catstronomy")
def cli() -> None:
    """Catstronomy CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=(settings.log_level or "info").lower(),
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Log level for the app and uvicorn (default: CATSTRONOMY_LOG_LEVEL or info)",
)
@click.option(
    "--tracks-api-url",
    default=settings.tracks_api_url,
    help="Base URL of the track catalogue REST API",
)
def serve(host: str, port: int, reload: bool, log_level: str, tracks_api_url: str) -> None:
    """Start the Catstronomy API server."""
    log_level = log_level.lower()
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Catstronomy API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        tracks_api_url=tracks_api_url,
    )

    # Settings are already loaded in this process; reload workers read the environment
    settings.debug = log_level == "debug"
    settings.log_level = log_level
    settings.tracks_api_url = tracks_api_url
    os.environ["CATSTRONOMY_DEBUG"] = "true" if settings.debug else "false"
    os.environ["CATSTRONOMY_LOG_LEVEL"] = log_level
    os.environ["CATSTRONOMY_TRACKS_API_URL"] = tracks_api_url

    try:
        uvicorn.run(
            "catstronomy.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("print-schema")
def print_schema_command() -> None:
    """Print the GraphQL schema as SDL."""
    from catstronomy.graphql.schema import print_schema

    click.echo(print_schema())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
