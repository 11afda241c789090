#!/usr/bin/env python3
"""
Main CLI entry point for the Travelogue backend.
"""

import asyncio
import os
import sys

import click
import uvicorn

from travelogue import __version__
from travelogue.config import settings
from travelogue.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="travelogue")
def cli() -> None:
    """Travelogue CLI - serve the API and prepare the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Travelogue API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info("Starting Travelogue API server", host=host, port=port, reload=reload)

    # Set on the live settings for this process; exported for the --reload worker
    settings.debug = log_level == "debug"
    settings.log_level = log_level.upper()
    os.environ["TRAVELOGUE_DEBUG"] = "true" if settings.debug else "false"
    os.environ["TRAVELOGUE_LOG_LEVEL"] = settings.log_level

    try:
        uvicorn.run(
            "travelogue.api.app:app",
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
def init_db() -> None:
    """Create the database tables."""
    from travelogue.database import close_database, create_schema

    configure_logging()

    async def do_init():
        try:
            await create_schema()
            click.echo("✓ Database tables created")
        except Exception as e:
            logger.error("Failed to create database tables", error=str(e))
            click.echo(f"✗ Error creating database tables: {e}", err=True)
            sys.exit(1)
        finally:
            await close_database()

    asyncio.run(do_init())


@cli.command()
def seed() -> None:
    """Seed the database with the demonstration albums and blog posts."""
    from travelogue.database import close_database, get_async_session
    from travelogue.database.seed_data import seed_initial_data

    configure_logging()

    async def do_seed():
        try:
            async with get_async_session() as db:
                summary = await seed_initial_data(db)
            click.echo("✓ Database seeded successfully")
            click.echo(f"  Albums: {len(summary.album_ids)}")
            click.echo(f"  Countries: {', '.join(summary.country_ids)}")
            click.echo(f"  Blog posts: {len(summary.blog_post_ids)}")
        except Exception as e:
            logger.error("Failed to seed database", error=str(e))
            click.echo(f"✗ Error seeding database: {e}", err=True)
            sys.exit(1)
        finally:
            await close_database()

    asyncio.run(do_seed())


@cli.command()
def schema() -> None:
    """Print the GraphQL schema (SDL)."""
    from travelogue.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
