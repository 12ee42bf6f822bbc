#!/usr/bin/env python3
"""
Main CLI entry point for SocialQL backend server.
"""

import os
import sys

import click
import uvicorn

from socialql import __version__
from socialql.config import settings
from socialql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="socialql")
def cli() -> None:
    """SocialQL CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to (defaults to $PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the SocialQL API server.

    Data lives in process memory, so the server always runs a single worker.
    """

    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting SocialQL API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads its settings at import time when reloading
    if log_level == "debug":
        os.environ["SOCIALQL_DEBUG"] = "true"
        os.environ["SOCIALQL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("SOCIALQL_DEBUG", "false")
        os.environ.setdefault("SOCIALQL_LOG_LEVEL", log_level)

    try:
        if reload:
            uvicorn.run(
                "socialql.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from socialql.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to a file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from socialql.graphql.schema import schema as graphql_schema

    sdl = graphql_schema.as_str()
    if output:
        with open(output, "w") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
