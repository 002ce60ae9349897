"""
Fixtures for unit tests.

Provides a fake DatabaseClient that keeps schema_migrations rows and
table names in memory so the migration runner and schema validator can
be exercised without PostgreSQL.
"""

from typing import Any, Dict, List, Mapping, Optional

import pytest

from creditra.domain.interfaces import DatabaseClient


class FakeDatabaseClient(DatabaseClient):
    """In-memory stand-in recording every statement it receives."""

    def __init__(self, tables: tuple = (), applied: tuple = (), fail_on_script: str | None = None):
        self.tables = set(tables)
        self.applied = list(applied)
        self.fail_on_script = fail_on_script
        self.scripts: List[str] = []
        self.statements: List[tuple] = []
        self.closed = False

    async def execute_script(self, sql: str) -> None:
        if self.fail_on_script and self.fail_on_script in sql:
            raise OSError("script failed")
        self.scripts.append(sql)

    async def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> None:
        params = dict(params or {})
        self.statements.append((sql, params))
        if "INSERT INTO schema_migrations" in sql and params["version"] not in self.applied:
            self.applied.append(params["version"])

    async def fetch(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        if "FROM schema_migrations" in sql:
            return [{"version": v} for v in sorted(self.applied)]
        if "information_schema.tables" in sql:
            return [{"table_name": t} for t in sorted(self.tables)]
        return [{"ok": 1}]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_db() -> FakeDatabaseClient:
    return FakeDatabaseClient()


@pytest.fixture
def migrations_dir(tmp_path):
    """A directory with two migrations and one non-SQL file."""
    (tmp_path / "002_add_index.sql").write_text("CREATE INDEX foo ON bar (baz);")
    (tmp_path / "001_initial.sql").write_text("CREATE TABLE bar (baz TEXT);")
    (tmp_path / "README.md").write_text("not a migration")
    (tmp_path / "nested.sql").mkdir()
    return tmp_path
