"""Command-line interface for Latchkey.

This module provides the CLI commands for running and managing
the Latchkey service.
"""

import asyncio

import click

from latchkey import __version__
from latchkey.core.config import get_settings
from latchkey.core.logging import configure_logging, get_logger
from latchkey.domain.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="Latchkey")
def cli() -> None:
    """Latchkey - account registration and session authentication.

    Configuration is read from LATCHKEY_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload (defaults to on in development)",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool | None) -> None:
    """Start the Latchkey server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    try:
        settings.require_secret()
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers
    if reload is None:
        reload = settings.is_development

    logger.info(
        "Starting Latchkey server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "latchkey.infrastructure.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create the accounts table.

    Intended for development; production deployments run the Alembic
    migrations instead.
    """
    from latchkey.infrastructure.persistence.database import DatabaseManager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm("This will create the database tables. Continue?", abort=True, default=False)

    async def initialize() -> None:
        db = DatabaseManager(settings)
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
def info() -> None:
    """Display Latchkey configuration."""
    settings = get_settings()

    click.echo(f"""
Latchkey v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:   {settings.environment}
  Debug:         {settings.debug}
  API Prefix:    {settings.api_prefix}

Database:
  URL:           {settings.database_url}
  Op Timeout:    {settings.db_operation_timeout}s

Security:
  Secret Key:    {'set' if settings.secret_key else 'MISSING'}
  Token Expire:  {settings.token_lifetime_seconds} seconds
  Hash Cost:     t={settings.hash_time_cost} m={settings.hash_memory_cost} p={settings.hash_parallelism}
  Cookie:        {settings.cookie_name} (secure={settings.is_production})

Logging:
  Level:         {settings.log_level}
  Format:        {settings.log_format}
""")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
