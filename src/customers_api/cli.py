#!/usr/bin/env python3
"""
Main CLI entry point for the Customers API server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from customers_api import __version__
from customers_api.config import settings
from customers_api.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="customers-api")
def cli() -> None:
    """Customers API CLI - run the server and manage the database."""
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
    """Start the Customers API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Customers API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app module reads these when it is imported by the reloader
    if log_level == "debug":
        os.environ["CUSTOMERS_DEBUG"] = "true"
        os.environ["CUSTOMERS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("CUSTOMERS_DEBUG", "false")
        os.environ.setdefault("CUSTOMERS_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "customers_api.api.app:app",
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


@cli.command("init-db")
@click.option(
    "--database-url",
    default=None,
    help="Database URL (default: CUSTOMERS_DATABASE_URL or settings)",
)
def init_db(database_url: str | None) -> None:
    """Create the customers table if it does not exist."""
    from customers_api.database import init_database

    configure_logging()

    async def do_init():
        database = await init_database(database_url)
        await database.dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database initialized")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
