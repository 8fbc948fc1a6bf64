#!/usr/bin/env python3
"""
Main CLI entry point for the blogql server.
"""

import os
import sys

import click
import uvicorn

from blogql import __version__
from blogql.config import settings
from blogql.database.cli import db
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEFAULT_SCHEMA_OUTPUT = "generated/schema.graphql"


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """blogql CLI - manage the server, schema and database."""
    pass


cli.add_command(db)


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
    """Start the blogql API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting blogql API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads settings at import time, including under --reload
    if log_level == "debug":
        os.environ["BLOGQL_DEBUG"] = "true"
        os.environ["BLOGQL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BLOGQL_DEBUG", "false")
        os.environ.setdefault("BLOGQL_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "blogql.api.app:app",
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


@cli.command("export-schema")
@click.option(
    "-o",
    "--output",
    default=DEFAULT_SCHEMA_OUTPUT,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="File to write the GraphQL SDL to",
)
def export_schema(output: str) -> None:
    """Write the GraphQL schema (SDL type definitions) to a file."""
    from blogql.graphql.schema import write_schema_sdl

    path = write_schema_sdl(output)
    click.echo(f"✓ Schema written to {path}")


@cli.command()
def seed() -> None:
    """Seed the database with sample users and posts."""
    import asyncio

    from blogql.database import DataClient, Database
    from blogql.database.seed_data import seed_sample_data

    configure_logging()

    async def do_seed():
        database = Database()
        try:
            user_ids = await seed_sample_data(DataClient(database))
            click.echo(f"✓ Database seeded successfully ({len(user_ids)} users)")
        except Exception as e:
            logger.error("Failed to seed database", error=str(e))
            click.echo(f"✗ Error seeding database: {e}", err=True)
            sys.exit(1)
        finally:
            await database.dispose()

    asyncio.run(do_seed())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
