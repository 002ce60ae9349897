"""Database engine creation and the SQLAlchemy-backed client."""

from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from creditra.core.config import settings
from creditra.domain.exceptions import DatabaseNotConfiguredException
from creditra.domain.interfaces import DatabaseClient


def normalize_database_url(url: str) -> str:
    """Convert postgres:// and postgresql:// URLs to the asyncpg driver."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def create_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Pool sizing only applies to server databases; SQLite URLs get the
    driver defaults.
    """
    url = normalize_database_url(database_url)
    options: Dict[str, Any] = {"echo": settings.debug, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return create_async_engine(url, **options)


class SqlAlchemyDatabaseClient(DatabaseClient):
    """
    DatabaseClient over an SQLAlchemy async engine.

    Parameterised statements go through text() with :name binds.
    Multi-statement scripts are handed to the DBAPI driver directly,
    since prepared statements cannot hold more than one command.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def execute_script(self, sql: str) -> None:
        async with self._engine.connect() as conn:
            raw = await conn.get_raw_connection()
            driver = raw.driver_connection
            if hasattr(driver, "executescript"):
                # aiosqlite
                await driver.executescript(sql)
            else:
                # asyncpg runs an unparameterised multi-statement string as one script
                async with driver.transaction():
                    await driver.execute(sql)

    async def execute(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        async with self._engine.begin() as conn:
            await conn.execute(text(sql), dict(params or {}))

    async def fetch(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        async with self._engine.connect() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            return [dict(row._mapping) for row in result]

    async def close(self) -> None:
        await self._engine.dispose()


def get_connection(database_url: str | None = None) -> SqlAlchemyDatabaseClient:
    """
    Build a database client from an explicit URL or DATABASE_URL.

    Raises:
        DatabaseNotConfiguredException: If no URL is available
    """
    url = database_url or settings.database_url
    if not url:
        raise DatabaseNotConfiguredException()
    return SqlAlchemyDatabaseClient(create_engine(url))
