"""Command line entry points for applying migrations and validating the schema."""

import argparse
import asyncio
import sys
from typing import Awaitable, Callable, List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from creditra.core.config import settings
from creditra.core.logging import setup_logging
from creditra.domain.exceptions import DomainException
from creditra.domain.interfaces import DatabaseClient
from .connection import get_connection
from .migrations import MigrationRunner
from .validation import validate_schema

logger = structlog.get_logger(__name__)

ClientFactory = Callable[[Optional[str]], DatabaseClient]


def _build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--migrations-dir",
        default=settings.migrations_dir,
        help="Directory holding NNN_name.sql files",
    )
    return parser


async def _connect(
    database_url: Optional[str],
    client_factory: ClientFactory,
) -> Optional[DatabaseClient]:
    """Open a client and check it answers SELECT 1; None when unreachable."""
    try:
        client = client_factory(database_url)
    except DomainException as e:
        logger.error("database_not_configured", error=e.message)
        return None
    except SQLAlchemyError as e:
        # Unknown dialect or malformed URL
        logger.error("database_url_invalid", error=str(e), error_type=type(e).__name__)
        return None

    try:
        await client.fetch("SELECT 1")
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            "database_unreachable",
            error=str(e),
            error_type=type(e).__name__,
        )
        await client.close()
        return None

    return client


async def _run(
    database_url: Optional[str],
    client_factory: ClientFactory,
    task: Callable[[DatabaseClient], Awaitable[None]],
) -> int:
    client = await _connect(database_url, client_factory)
    if client is None:
        return 1

    try:
        await task(client)
        return 0
    except (DomainException, SQLAlchemyError, OSError) as e:
        logger.error("database_command_failed", error=str(e), error_type=type(e).__name__)
        return 1
    finally:
        await client.close()


async def run_migrate(
    database_url: Optional[str],
    migrations_dir: str,
    client_factory: ClientFactory = get_connection,
) -> int:
    """Apply pending migrations. Returns the process exit code."""

    async def task(client: DatabaseClient) -> None:
        ran = await MigrationRunner(client, migrations_dir).run_pending()
        if ran:
            logger.info("migrations_applied", versions=ran)
        else:
            logger.info("no_pending_migrations")

    return await _run(database_url, client_factory, task)


async def run_validate(
    database_url: Optional[str],
    migrations_dir: str,
    client_factory: ClientFactory = get_connection,
) -> int:
    """Apply pending migrations, then check the core tables exist."""

    async def task(client: DatabaseClient) -> None:
        ran = await MigrationRunner(client, migrations_dir).run_pending()
        if ran:
            logger.info("migrations_applied", versions=ran)
        await validate_schema(client)
        logger.info("schema_validation_passed")

    return await _run(database_url, client_factory, task)


def migrate_main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser("Apply pending SQL migrations.").parse_args(argv)
    setup_logging()
    sys.exit(asyncio.run(run_migrate(args.database_url, args.migrations_dir)))


def validate_main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser(
        "Apply pending SQL migrations and validate the core schema."
    ).parse_args(argv)
    setup_logging()
    sys.exit(asyncio.run(run_validate(args.database_url, args.migrations_dir)))


if __name__ == "__main__":
    migrate_main()
