"""Database infrastructure."""

from .connection import (
    SqlAlchemyDatabaseClient,
    create_engine,
    get_connection,
    normalize_database_url,
)
from .migrations import (
    EXPECTED_TABLES,
    MigrationRunner,
    list_migration_files,
    version_from_filename,
)
from .validation import missing_tables, validate_schema

__all__ = [
    "SqlAlchemyDatabaseClient",
    "create_engine",
    "get_connection",
    "normalize_database_url",
    "EXPECTED_TABLES",
    "MigrationRunner",
    "list_migration_files",
    "version_from_filename",
    "missing_tables",
    "validate_schema",
]
