"""Sequential SQL migration runner."""

from pathlib import Path
from typing import List

import structlog

from creditra.domain.interfaces import DatabaseClient

logger = structlog.get_logger(__name__)

SCHEMA_MIGRATIONS_TABLE = """
CREATE TABLE IF NOT EXISTS schema_migrations (
  version TEXT PRIMARY KEY,
  applied_at TIMESTAMPTZ NOT NULL DEFAULT now()
);
"""

# Core tables that must exist once the initial schema is applied.
EXPECTED_TABLES = (
    "borrowers",
    "credit_lines",
    "risk_evaluations",
    "transactions",
    "events",
)


def list_migration_files(directory: Path | str) -> List[str]:
    """Return the sorted names of the .sql files directly inside directory."""
    return sorted(
        entry.name
        for entry in Path(directory).iterdir()
        if entry.is_file() and entry.name.endswith(".sql")
    )


def version_from_filename(filename: str) -> str:
    """001_initial_schema.sql -> 001_initial_schema"""
    if not filename.endswith(".sql"):
        return filename
    return filename[: -len(".sql")]


class MigrationRunner:
    """
    Applies pending .sql files from a directory in filename order.

    Applied versions are tracked in the schema_migrations table.
    """

    def __init__(self, client: DatabaseClient, migrations_dir: Path | str):
        self._client = client
        self._dir = Path(migrations_dir)

    async def ensure_schema_migrations(self) -> None:
        await self._client.execute_script(SCHEMA_MIGRATIONS_TABLE)

    async def get_applied_versions(self) -> List[str]:
        await self.ensure_schema_migrations()
        rows = await self._client.fetch(
            "SELECT version FROM schema_migrations ORDER BY version"
        )
        return [row["version"] for row in rows]

    async def apply_migration(self, filename: str) -> str:
        """
        Run one migration file and record its version.

        Returns:
            The recorded version string
        """
        sql = (self._dir / filename).read_text(encoding="utf-8")
        await self._client.execute_script(sql)

        version = version_from_filename(filename)
        await self._client.execute(
            "INSERT INTO schema_migrations (version, applied_at) "
            "VALUES (:version, now()) ON CONFLICT (version) DO NOTHING",
            {"version": version},
        )
        logger.info("migration_applied", version=version)
        return version

    async def run_pending(self) -> List[str]:
        """
        Apply every migration not yet recorded.

        Returns:
            Versions applied by this call, in order
        """
        applied = set(await self.get_applied_versions())
        ran = []

        for filename in list_migration_files(self._dir):
            version = version_from_filename(filename)
            if version in applied:
                continue
            await self.apply_migration(filename)
            applied.add(version)
            ran.append(version)

        logger.info("migrations_complete", applied=ran, pending_count=len(ran))
        return ran
