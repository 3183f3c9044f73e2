#!/usr/bin/env python3
"""
Main CLI entry point for the GeoQL server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from geoql import __version__, settings
from geoql.database import ReferentialPolicy
from geoql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="geoql")
def cli() -> None:
    """GeoQL CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    envvar="GEOQL_API_HOST",
    default=lambda: settings.api_host,
    show_default="GEOQL_API_HOST or 0.0.0.0",
    help="Host to bind to",
)
@click.option(
    "--port",
    envvar="GEOQL_API_PORT",
    default=lambda: settings.api_port,
    type=int,
    show_default="GEOQL_API_PORT or 5000",
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development (also GEOQL_API_RELOAD)",
)
@click.option(
    "--referential-policy",
    type=click.Choice([policy.value for policy in ReferentialPolicy]),
    default=None,
    help="How deleting a country treats its cities (default: from settings)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    referential_policy: str | None,
    log_level: str,
) -> None:
    """Start the GeoQL API server.

    The entity store lives in process memory, so the server always runs a
    single worker.
    """
    configure_logging(debug=(log_level == "debug"))
    reload = reload or settings.api_reload

    logger.info(
        "Starting GeoQL API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Settings are read when the app module is imported
    if log_level == "debug":
        os.environ["GEOQL_DEBUG"] = "true"
        os.environ["GEOQL_LOG_LEVEL"] = "debug"
        settings.debug = True
    else:
        os.environ.setdefault("GEOQL_DEBUG", "false")
        os.environ.setdefault("GEOQL_LOG_LEVEL", log_level)
    if referential_policy:
        # Env var for the reloader subprocess, settings for this process
        os.environ["GEOQL_REFERENTIAL_POLICY"] = referential_policy
        settings.referential_policy = ReferentialPolicy(referential_policy)

    try:
        if reload:
            uvicorn.run(
                "geoql.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from geoql.api.app import app

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


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from geoql.graphql.schema import schema

    sdl = schema.as_str()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
